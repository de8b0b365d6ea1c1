"""Tests for the process_measurements command line script"""
import polars as pl

from scripts.process_measurements import main
from unitify.common.config import settings


class TestProcessMeasurementsCli:
    """Test exit codes and output of the CLI"""

    def test_prints_sections(self, measurement_file, capsys):
        path = measurement_file("2 kg", "1 g + 1 g", "oops")
        assert main([path]) == 0

        out = capsys.readouterr().out
        assert "in original order:" in out
        assert "in ascending order:" in out
        assert "Median: 2" in out
        assert "Skipped 1 of 3 lines" in out

    def test_writes_results_csv(self, measurement_file, tmp_path):
        path = measurement_file("2 kg", "3 m")
        csv_path = tmp_path / "results.csv"
        assert main([path, "--results-csv", str(csv_path)]) == 0
        assert pl.read_csv(csv_path)["Unit"].to_list() == ["kg", "m"]

    def test_missing_file_exits_with_error(self, tmp_path):
        assert main([str(tmp_path / "missing.txt")]) == 1

    def test_invalid_line_exits_with_error(self, measurement_file, monkeypatch):
        monkeypatch.setattr(settings.measurement, "skip_invalid_lines", False)
        path = measurement_file("1 kg + 1 m")
        assert main([path]) == 1
