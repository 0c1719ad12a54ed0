"""XML status summary tools.

This package extracts the item code and most recent status from per-item XML
records and collects them into a single CSV table.
"""

from status_summary.extract import extract, process_directory, process_file, select_item_code
from status_summary.models import (
    BatchReport,
    ExtractionFailure,
    ExtractionResult,
    FailureKind,
    OutputWriteError,
    SetupError,
    StatusSummaryError,
)
from status_summary.writer import read_table, write_table

__version__ = "0.1.0"

__all__ = [
    "BatchReport",
    "ExtractionFailure",
    "ExtractionResult",
    "FailureKind",
    "OutputWriteError",
    "SetupError",
    "StatusSummaryError",
    "extract",
    "process_directory",
    "process_file",
    "read_table",
    "select_item_code",
    "write_table",
]
