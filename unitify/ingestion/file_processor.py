"""Measurement file processing: read, evaluate and summarize expression lines"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import chardet

from unitify.common.config import settings
from unitify.evaluation.evaluator import ExpressionEvaluator
from unitify.ingestion.exceptions import EmptyFileError, FileReadError
from unitify.measurement import Measurement
from unitify.reporting.report_generator import ReportGenerator
from unitify.reporting.statistics_calculator import MeasurementStatistics, compute_statistics
from unitify.units.exceptions import UnitifyError

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


@dataclass
class LineResult:
    """Outcome of evaluating one line"""
    line_number: int
    text: str
    measurement: Optional[Measurement] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.measurement is not None


@dataclass
class ProcessingSummary:
    """Summary of a file processing run"""
    file_name: str
    total_lines: int
    evaluated: int
    failed: int
    result_units: Dict[str, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)


class MeasurementFileProcessor:
    """Loads a file of measurement expressions and evaluates each line"""

    def __init__(
        self,
        file_path: str,
        evaluator: Optional[ExpressionEvaluator] = None,
        skip_invalid_lines: Optional[bool] = None,
    ):
        """Initialize file processor.

        Args:
            file_path: Path to a text file with one expression per line
            evaluator: ExpressionEvaluator instance
            skip_invalid_lines: Record failing lines instead of raising
                (defaults to the configured value)
        """
        self.file_path = Path(file_path)
        self.evaluator = evaluator or ExpressionEvaluator()
        if skip_invalid_lines is None:
            skip_invalid_lines = settings.measurement.skip_invalid_lines
        self.skip_invalid_lines = skip_invalid_lines
        self.results: List[LineResult] = []
        self.is_loaded = False

    def detect_encoding(self) -> str:
        """Detect file encoding using chardet"""
        default = settings.measurement.default_encoding
        try:
            with open(self.file_path, 'rb') as f:
                raw_data = f.read(10000)  # Read first 10KB
        except OSError as e:
            raise FileReadError(f"Failed to open file {self.file_path}: {e}") from e

        result = chardet.detect(raw_data)
        encoding = result['encoding']
        confidence = result['confidence']

        if not encoding or confidence < 0.7:
            logger.debug(f"Low confidence encoding detection ({confidence}), using {default}")
            return default

        return encoding

    def read_lines(self) -> List[str]:
        """Read the file into lines.

        Raises:
            FileReadError: If the file can not be read or decoded
            EmptyFileError: If the file is empty
        """
        try:
            if self.file_path.stat().st_size == 0:
                raise EmptyFileError(f"Measurement file is empty: {self.file_path}")
        except OSError as e:
            raise FileReadError(f"Failed to open file {self.file_path}: {e}") from e

        encoding = self.detect_encoding()
        logger.info(f"Reading {self.file_path} with encoding {encoding}")

        try:
            with open(self.file_path, 'r', encoding=encoding) as f:
                return f.read().splitlines()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise FileReadError(f"Failed to read file {self.file_path}: {e}") from e

    def load(self) -> List[LineResult]:
        """Evaluate every expression line in the file.

        Blank lines and lines starting with '#' are ignored.

        Returns:
            Results for the evaluated lines in file order

        Raises:
            UnitifyError: For the first failing line when skipping is disabled
        """
        self.results = []

        for line_number, raw_line in enumerate(self.read_lines(), start=1):
            text = raw_line.strip()
            if not text or text.startswith(COMMENT_PREFIX):
                continue

            try:
                measurement = self.evaluator.evaluate_line(text)
            except UnitifyError as e:
                if not self.skip_invalid_lines:
                    raise
                logger.warning(f"Skipping line {line_number} due to error: {e}")
                self.results.append(LineResult(
                    line_number=line_number,
                    text=text,
                    error=str(e),
                    error_type=type(e).__name__,
                ))
                continue

            self.results.append(LineResult(line_number=line_number, text=text, measurement=measurement))

        self.is_loaded = True
        logger.info(
            f"Evaluated {len(self.measurements)}/{len(self.results)} lines from {self.file_path.name}"
        )
        return self.results

    def _require_loaded(self) -> None:
        if not self.is_loaded:
            raise RuntimeError("No file loaded; call load() first")

    @property
    def measurements(self) -> List[Measurement]:
        """Successfully evaluated results in file order"""
        return [r.measurement for r in self.results if r.measurement is not None]

    def sorted_measurements(self) -> List[Measurement]:
        """Results in ascending order of magnitude"""
        self._require_loaded()
        return sorted(self.measurements, key=lambda m: m.magnitude)

    def generate_reports_in_original_order(self) -> List[str]:
        self._require_loaded()
        generator = ReportGenerator()
        return [generator.format_measurement(m) for m in self.measurements]

    def generate_reports_in_sorted_order(self) -> List[str]:
        self._require_loaded()
        generator = ReportGenerator()
        return [generator.format_measurement(m) for m in self.sorted_measurements()]

    def compute_statistics(self) -> MeasurementStatistics:
        """
        Raises:
            ValueError: If no line evaluated successfully
        """
        self._require_loaded()
        return compute_statistics(self.measurements)

    def summary(self) -> ProcessingSummary:
        self._require_loaded()
        result_units: Dict[str, int] = {}
        for m in self.measurements:
            result_units[m.unit_name] = result_units.get(m.unit_name, 0) + 1

        return ProcessingSummary(
            file_name=self.file_path.name,
            total_lines=len(self.results),
            evaluated=len(self.measurements),
            failed=len(self.results) - len(self.measurements),
            result_units=result_units,
            errors=[f"line {r.line_number}: {r.error}" for r in self.results if not r.ok],
        )
