"""Pydantic schemas for API requests and responses"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


# Request Schemas

class EvaluateRequest(BaseModel):
    """Single expression evaluation request"""
    expression: str = Field(..., min_length=1, max_length=4096)

    @field_validator("expression")
    @classmethod
    def validate_expression(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("expression must not be blank")
        return v.strip()


class BatchEvaluateRequest(BaseModel):
    """Evaluate several expressions, one result per expression"""
    expressions: List[str] = Field(..., min_length=1, max_length=10000)


class ConvertRequest(BaseModel):
    """Unit conversion request"""
    magnitude: float
    from_unit: str = Field(..., min_length=1, max_length=255)
    to_unit: str = Field(..., min_length=1, max_length=255)


# Response Schemas

class MeasurementResponse(BaseModel):
    """Evaluated measurement"""
    magnitude: float
    unit: str
    kind: str
    base_magnitude: float
    base_unit: str


class BatchItem(BaseModel):
    """Result of one expression within a batch"""
    index: int
    expression: str
    result: Optional[MeasurementResponse] = None
    error: Optional[str] = None
    error_type: Optional[str] = None


class StatisticsSchema(BaseModel):
    """Statistics over successful magnitudes"""
    count: int = 0
    mean: Optional[float] = None
    mode: Optional[float] = None
    median: Optional[float] = None


class BatchEvaluateResponse(BaseModel):
    """Batch evaluation response"""
    total: int
    evaluated: int
    failed: int
    results: List[BatchItem] = Field(default_factory=list)
    statistics: StatisticsSchema = Field(default_factory=StatisticsSchema)


class ConvertResponse(BaseModel):
    """Unit conversion response"""
    magnitude: float
    from_unit: str
    converted_magnitude: float
    to_unit: str
    conversion_factor: float


class SupportedUnitsResponse(BaseModel):
    """Supported units grouped by kind"""
    units: Dict[str, List[str]]
