"""Measurement Validation Module"""

from .validator import MeasurementValidator, ValidationIssue

__all__ = [
    "MeasurementValidator",
    "ValidationIssue",
]
