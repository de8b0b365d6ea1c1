"""Evaluate measurement files and print results, sorted results and statistics"""
import argparse
import logging
import sys
from typing import List

from unitify.common.config import settings
from unitify.ingestion.exceptions import IngestionError
from unitify.ingestion.file_processor import MeasurementFileProcessor
from unitify.reporting import ReportGenerator
from unitify.units import UnitifyError

logger = logging.getLogger(__name__)


def process_file(file_name: str) -> MeasurementFileProcessor:
    processor = MeasurementFileProcessor(file_name)
    processor.load()
    return processor


def render_sections(processor: MeasurementFileProcessor) -> List[str]:
    """Original-order, ascending-order and statistics sections for one file"""
    name = processor.file_path.name
    lines = [f"Responses for {name} in original order:"]
    lines.extend(processor.generate_reports_in_original_order())

    lines.append(f"\nResponses for {name} in ascending order:")
    lines.extend(processor.generate_reports_in_sorted_order())

    lines.append(f"\nStatistics for {name}:")
    if processor.measurements:
        stats = processor.compute_statistics()
        lines.append(f"Mean: {stats.mean:g}")
        lines.append(f"Mode: {stats.mode:g}")
        lines.append(f"Median: {stats.median:g}")
    else:
        lines.append("No valid measurements")

    summary = processor.summary()
    if summary.failed:
        lines.append(f"Skipped {summary.failed} of {summary.total_lines} lines")
    return lines


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("files", nargs="+", help="Measurement expression files")
    parser.add_argument("-o", "--output", help="Also write the report to this file")
    parser.add_argument(
        "--results-csv",
        help="Write every evaluated result of all files to this CSV file",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.app.log_level)

    report_lines: List[str] = []
    all_results = []
    for file_name in args.files:
        try:
            processor = process_file(file_name)
        except (IngestionError, UnitifyError) as e:
            logger.error(f"Failed to process {file_name}: {e}")
            return 1
        report_lines.extend(render_sections(processor))
        report_lines.append("")
        all_results.extend(processor.measurements)

    report = "\n".join(report_lines)
    print(report)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(report)
        print(f"Report saved to {args.output}")

    if args.results_csv:
        ReportGenerator().write_report(all_results, args.results_csv, fmt="csv")

    return 0


if __name__ == "__main__":
    sys.exit(main())
