"""Reports and statistics over evaluated measurements."""

from .report_generator import ReportGenerator, REPORT_FORMATS
from .statistics_calculator import (
    MeasurementStatistics,
    compute_mean,
    compute_mode,
    compute_median,
    compute_statistics,
)

__all__ = [
    'ReportGenerator',
    'REPORT_FORMATS',
    'MeasurementStatistics',
    'compute_mean',
    'compute_mode',
    'compute_median',
    'compute_statistics',
]
