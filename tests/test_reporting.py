"""Tests for statistics and report generation"""
import polars as pl
import pytest

from unitify.measurement import Measurement
from unitify.reporting import (
    ReportGenerator,
    compute_mean,
    compute_median,
    compute_mode,
    compute_statistics,
)


@pytest.fixture
def measurements():
    """Sample results with a repeated magnitude"""
    return [
        Measurement.from_text(text)
        for text in ["4 g", "1 m", "4 l", "2 s", "10 km / hr"]
    ]


class TestStatistics:
    """Test descriptive statistics over magnitudes"""

    def test_mean(self, measurements):
        assert compute_mean(measurements) == pytest.approx(4.2)

    def test_median_odd(self, measurements):
        assert compute_median(measurements) == 4.0

    def test_median_even(self):
        values = [Measurement.from_text(t) for t in ["1 g", "2 g", "3 g", "10 g"]]
        assert compute_median(values) == 2.5

    def test_mode(self, measurements):
        assert compute_mode(measurements) == 4.0

    def test_mode_tie_takes_smallest(self):
        values = [Measurement.from_text(t) for t in ["5 g", "3 g", "5 g", "3 g", "9 g"]]
        assert compute_mode(values) == 3.0

    def test_compute_statistics(self, measurements):
        stats = compute_statistics(measurements)
        assert stats.count == 5
        assert stats.mean == pytest.approx(4.2)
        assert stats.mode == 4.0
        assert stats.median == 4.0

    def test_empty(self):
        with pytest.raises(ValueError):
            compute_statistics([])


class TestReportGenerator:
    """Test text and CSV reports"""

    def test_text_report(self):
        report = ReportGenerator().generate_text_report([
            Measurement.from_text("700 g"),
            Measurement.from_text("2.5 km / hr"),
        ])
        assert report == "700 g\n2.5 km / hr\n"

    def test_text_report_precision(self):
        report = ReportGenerator(precision=3).generate_text_report([
            Measurement.from_text("3.14159 m"),
        ])
        assert report == "3.14 m\n"

    def test_explicit_zero_precision_kept(self):
        generator = ReportGenerator(precision=0)
        assert generator.precision == 0
        assert generator.generate_text_report([Measurement.from_text("3.14159 m")]) == "3 m\n"

    def test_to_dataframe(self, measurements):
        df = ReportGenerator().to_dataframe(measurements)
        assert df.columns == ["Magnitude", "Unit"]
        assert df.height == 5
        assert df["Unit"].to_list() == ["g", "m", "l", "s", "km / hr"]

    def test_empty_dataframe(self):
        df = ReportGenerator().to_dataframe([])
        assert df.height == 0
        assert df.schema["Magnitude"] == pl.Float64

    def test_csv_report(self):
        report = ReportGenerator().generate_csv_report([
            Measurement.from_text("700 g"),
            Measurement.from_text("1.5 m"),
        ])
        lines = report.strip().splitlines()
        assert lines[0] == "Magnitude,Unit"
        assert lines[1] == "700.0,g"
        assert lines[2] == "1.5,m"

    def test_write_text_report(self, tmp_path, measurements):
        path = ReportGenerator().write_report(measurements, str(tmp_path / "report.txt"))
        assert path.read_text(encoding="utf-8").splitlines()[0] == "4 g"

    def test_write_csv_report(self, tmp_path, measurements):
        path = ReportGenerator().write_report(measurements, str(tmp_path / "report.csv"), fmt="csv")
        df = pl.read_csv(path)
        assert df.height == 5
        assert df["Magnitude"].to_list()[0] == 4.0

    def test_write_report_bad_format(self, tmp_path, measurements):
        with pytest.raises(ValueError):
            ReportGenerator().write_report(measurements, str(tmp_path / "report.pdf"), fmt="pdf")
