"""Descriptive statistics over measurement magnitudes"""
import statistics
from dataclasses import dataclass
from typing import List, Sequence

from unitify.measurement import Measurement


@dataclass
class MeasurementStatistics:
    """Summary statistics of a set of measurements"""
    count: int
    mean: float
    mode: float
    median: float


def _magnitudes(measurements: Sequence[Measurement]) -> List[float]:
    if not measurements:
        raise ValueError("No measurements to compute statistics")
    return [m.magnitude for m in measurements]


def compute_mean(measurements: Sequence[Measurement]) -> float:
    return statistics.mean(_magnitudes(measurements))


def compute_mode(measurements: Sequence[Measurement]) -> float:
    """Most frequent magnitude; ties resolve to the smallest value"""
    return min(statistics.multimode(_magnitudes(measurements)))


def compute_median(measurements: Sequence[Measurement]) -> float:
    return statistics.median(_magnitudes(measurements))


def compute_statistics(measurements: Sequence[Measurement]) -> MeasurementStatistics:
    """
    Compute mean, mode and median of measurement magnitudes

    Magnitudes are taken as-is; units are not converted.

    Raises:
        ValueError: If there are no measurements
    """
    return MeasurementStatistics(
        count=len(measurements),
        mean=compute_mean(measurements),
        mode=compute_mode(measurements),
        median=compute_median(measurements),
    )
