"""Text and CSV reports of measurement results"""
import logging
from pathlib import Path
from typing import Optional, Sequence

import polars as pl

from unitify.common.config import settings
from unitify.measurement import Measurement

logger = logging.getLogger(__name__)

REPORT_FORMATS = ("text", "csv")


class ReportGenerator:
    """Formats measurements as text lines or CSV"""

    def __init__(self, precision: Optional[int] = None):
        self.precision = precision if precision is not None else settings.measurement.report_precision

    def format_measurement(self, measurement: Measurement) -> str:
        return f"{measurement.magnitude:.{self.precision}g} {measurement.unit_name}"

    def to_dataframe(self, measurements: Sequence[Measurement]) -> pl.DataFrame:
        """Build a DataFrame with one row per measurement"""
        return pl.DataFrame(
            {
                "Magnitude": [m.magnitude for m in measurements],
                "Unit": [m.unit_name for m in measurements],
            },
            schema={"Magnitude": pl.Float64, "Unit": pl.Utf8},
        )

    def generate_text_report(self, measurements: Sequence[Measurement]) -> str:
        """One "<magnitude> <unit>" line per measurement"""
        return "".join(f"{self.format_measurement(m)}\n" for m in measurements)

    def generate_csv_report(self, measurements: Sequence[Measurement]) -> str:
        """CSV with a Magnitude,Unit header"""
        return self.to_dataframe(measurements).write_csv()

    def write_report(
        self,
        measurements: Sequence[Measurement],
        output_path: str,
        fmt: str = "text"
    ) -> Path:
        """
        Write a report to disk

        Args:
            measurements: Measurements to report
            output_path: Destination file
            fmt: "text" or "csv"

        Returns:
            Path of the written report

        Raises:
            ValueError: If the format is not supported
        """
        if fmt not in REPORT_FORMATS:
            raise ValueError(f"Unsupported report format: {fmt}. Use one of {REPORT_FORMATS}")

        path = Path(output_path)
        if fmt == "csv":
            self.to_dataframe(measurements).write_csv(path)
        else:
            path.write_text(self.generate_text_report(measurements), encoding="utf-8")

        logger.info(f"Wrote {fmt} report with {len(measurements)} measurements to {path}")
        return path
