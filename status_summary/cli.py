"""Command-line entry point for building a status summary table."""

from __future__ import annotations

import argparse
import sys

from status_summary.constants import DEFAULT_OUTPUT_FILE
from status_summary.extract import process_directory
from status_summary.models import StatusSummaryError
from status_summary.writer import write_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Summarize item codes and current statuses from a directory of XML files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -i exports/                      # Write status_output.csv
  %(prog)s -i exports/ -o summary.csv       # Choose the output file
  %(prog)s -i exports/ -v                   # Echo each file and its values
""",
    )
    parser.add_argument("--input-dir", "-i", required=True, help="Input directory with XML files")
    parser.add_argument(
        "--output-file",
        "-o",
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output CSV file (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 on completion, 1 on a setup or output write error).
    """
    args = build_parser().parse_args(argv)

    try:
        report = process_directory(args.input_dir, verbose=args.verbose)
        write_table(args.output_file, report.results)
    except StatusSummaryError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Extracted {report.succeeded} of {report.total} XML files ({report.failed} failed)")
    print(
        f"Successfully processed {report.succeeded} files. "
        f"Results saved to {args.output_file}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
