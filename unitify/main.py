"""Unitify - Measurement Expression Service"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unitify import __version__
from unitify.api.measurements import router as measurements_router
from unitify.common.config import settings

logging.basicConfig(level=settings.app.log_level)

app = FastAPI(
    title="Unitify",
    description="Dimensionally checked arithmetic over physical measurements",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(measurements_router)

@app.get("/")
async def root():
    return {"message": settings.app.name, "status": "running"}

@app.get("/health")
async def health():
    return {"status": "healthy"}
