"""Write extraction results to a CSV summary table."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from status_summary.constants import TABLE_COLUMNS, TABLE_ENCODING, TABLE_LINE_TERMINATOR
from status_summary.models import ExtractionResult, OutputWriteError


def build_frame(records: Iterable[ExtractionResult]) -> pd.DataFrame:
    """Build a DataFrame with one row per record, in input order."""
    return pd.DataFrame([r.to_row() for r in records], columns=list(TABLE_COLUMNS), dtype=str)


def write_table(output_path: str | Path, records: Iterable[ExtractionResult]) -> Path:
    """Write records to output_path, replacing any existing content.

    The header is always written, even with no records. Fields holding a
    comma, quote, carriage return or newline are quoted with embedded quotes
    doubled. Rows end with CRLF.

    Args:
        output_path: Destination CSV file.
        records: Results in processing order.

    Returns:
        The path written.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    output_path = Path(output_path)
    df = build_frame(records)
    try:
        df.to_csv(
            output_path,
            index=False,
            encoding=TABLE_ENCODING,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator=TABLE_LINE_TERMINATOR,
        )
    except OSError as e:
        raise OutputWriteError(output_path, f"Failed to write {output_path}: {e}") from e
    return output_path


def read_table(path: str | Path) -> list[ExtractionResult]:
    """Read a summary table back into ExtractionResult records.

    Every field is kept as text, so empty item codes stay empty strings.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False, encoding=TABLE_ENCODING)
    return [
        ExtractionResult(item_code=code, source_name=name, status=status)
        for code, name, status in df[list(TABLE_COLUMNS)].itertuples(index=False, name=None)
    ]
