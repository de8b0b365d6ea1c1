"""Pytest configuration and shared fixtures"""
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from unitify.evaluation import ExpressionEvaluator
from unitify.main import app
from unitify.measurement import Measurement
from unitify.units import UnitRegistry


@pytest.fixture(scope="session")
def registry():
    """Registry loaded from the bundled unit table"""
    return UnitRegistry()


@pytest.fixture
def evaluator():
    """Create expression evaluator instance"""
    return ExpressionEvaluator()


@pytest.fixture
def m():
    """Shorthand for building measurements from text"""
    return Measurement.from_text


@pytest.fixture(scope="function")
def client():
    """Create FastAPI test client"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def measurement_file():
    """Factory writing measurement lines to a temporary file"""
    paths = []

    def _write(*lines: str, encoding: str = "utf-8") -> str:
        with tempfile.NamedTemporaryFile(
            mode='w', suffix='.txt', delete=False, encoding=encoding
        ) as tmp:
            tmp.write("\n".join(lines))
            if lines:
                tmp.write("\n")
            paths.append(tmp.name)
            return tmp.name

    yield _write

    for path in paths:
        Path(path).unlink(missing_ok=True)
