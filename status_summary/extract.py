"""Extract item codes and current statuses from XML documents.

This module provides functions for pulling the identifying item code and the
most recent status out of per-item XML records, and for running that
extraction over every XML file in a directory.

Selection rules:
- Item code: first non-empty ``itemCode`` that is not digits-only, falling
  back to the first non-empty one, then to an empty string
- Status: first ``status`` inside the last ``StatusHistoryRow`` in document
  order
"""

from __future__ import annotations

import sys
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from status_summary.constants import (
    DIGITS_ONLY_PATTERN,
    INPUT_ENCODING,
    ITEM_CODE_TAG,
    STATUS_HISTORY_ROW_TAG,
    STATUS_TAG,
    XML_SUFFIX,
)
from status_summary.models import (
    BatchReport,
    ExtractionFailure,
    ExtractionResult,
    FailureKind,
    SetupError,
)


def local_name(tag: object) -> str | None:
    """Return the tag name without any ``{namespace}`` qualifier.

    Comments and processing instructions have non-string tags and yield None.
    """
    if not isinstance(tag, str):
        return None
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    return tag


def is_digits_only(text: str) -> bool:
    """Check whether text is made only of ASCII digits once stripped."""
    return DIGITS_ONLY_PATTERN.match(text.strip()) is not None


def iter_named(root: ET.Element, name: str) -> Iterator[ET.Element]:
    """Yield elements under root (inclusive) with the given local name, depth-first."""
    for element in root.iter():
        if local_name(element.tag) == name:
            yield element


def collect_item_codes(root: ET.Element) -> list[str]:
    """Collect direct text of every itemCode element in document order.

    Elements without text are skipped.
    """
    return [el.text for el in iter_named(root, ITEM_CODE_TAG) if el.text is not None]


def select_item_code(codes: Iterable[str]) -> str:
    """Pick the most meaningful item code from the candidates.

    Args:
        codes: Candidate codes in document order.

    Returns:
        The first non-empty code that is not digits-only, else the first
        non-empty code, else an empty string.
    """
    non_empty = [code for code in codes if code]
    for code in non_empty:
        if not is_digits_only(code):
            return code
    return non_empty[0] if non_empty else ""


def find_current_status(root: ET.Element, source_name: str) -> str | ExtractionFailure:
    """Read the status of the last StatusHistoryRow in document order.

    Args:
        root: Parsed document root.
        source_name: File name used in failure messages.

    Returns:
        The status text, or an ExtractionFailure when there is no history
        row or the last row has no status text.
    """
    rows = list(iter_named(root, STATUS_HISTORY_ROW_TAG))
    if not rows:
        return ExtractionFailure(
            kind=FailureKind.MISSING_STATUS_HISTORY,
            source_name=source_name,
            message=f"No {STATUS_HISTORY_ROW_TAG} found in file: {source_name}",
        )

    current = rows[-1]
    # First match wins, even when it sits deeper than a later sibling
    status = next(iter_named(current, STATUS_TAG), None)
    if status is None or not status.text:
        return ExtractionFailure(
            kind=FailureKind.MISSING_STATUS,
            source_name=source_name,
            message=(
                f"No {STATUS_TAG} tag found in the last {STATUS_HISTORY_ROW_TAG} "
                f"in file: {source_name}"
            ),
        )
    return status.text


def extract(document_text: str | bytes, source_name: str) -> ExtractionResult | ExtractionFailure:
    """Extract the item code and current status from one XML document.

    Args:
        document_text: Raw XML content.
        source_name: Base file name recorded in the result.

    Returns:
        ExtractionResult on success, ExtractionFailure describing why not.
    """
    try:
        root = ET.fromstring(document_text)
    except ET.ParseError as e:
        return ExtractionFailure(
            kind=FailureKind.PARSE_ERROR,
            source_name=source_name,
            message=f"Failed to parse XML in file {source_name}: {e}",
        )

    item_code = select_item_code(collect_item_codes(root))

    status = find_current_status(root, source_name)
    if isinstance(status, ExtractionFailure):
        return status

    return ExtractionResult(item_code=item_code, source_name=source_name, status=status)


def process_file(path: Path) -> ExtractionResult | ExtractionFailure:
    """Read a single XML file and extract its summary row.

    Read errors are returned as IOFailure instead of raised.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding=INPUT_ENCODING)
    except (OSError, UnicodeDecodeError) as e:
        return ExtractionFailure(
            kind=FailureKind.IO_FAILURE,
            source_name=path.name,
            message=f"Failed to read file {path}: {e}",
        )
    return extract(content, path.name)


def find_candidates(input_dir: Path) -> list[Path]:
    """List the XML files directly inside input_dir, sorted by file name.

    Raises:
        SetupError: If input_dir does not exist, is not a directory, or
            cannot be listed.
    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise SetupError(
            input_dir,
            f"The input directory doesn't exist or is not a directory: {input_dir}",
        )
    try:
        return sorted(
            (p for p in input_dir.iterdir() if p.suffix == XML_SUFFIX and p.is_file()),
            key=lambda p: p.name,
        )
    except OSError as e:
        raise SetupError(input_dir, f"Failed to read input directory {input_dir}: {e}") from e


def process_directory(
    input_dir: Path,
    verbose: bool = False,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> BatchReport:
    """Extract every candidate file in input_dir, isolating per-file failures.

    Args:
        input_dir: Directory holding the XML records.
        verbose: Echo each file and its extracted values to out.
        out: Progress stream (defaults to stdout).
        err: Failure stream (defaults to stderr).

    Returns:
        BatchReport with successes in processing order.

    Raises:
        SetupError: If input_dir is not a usable directory.
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    report = BatchReport()
    for path in find_candidates(input_dir):
        if verbose:
            print(f"Processing file: {path}", file=out)

        outcome = process_file(path)
        report.add(outcome)

        if isinstance(outcome, ExtractionFailure):
            print(f"Error processing file {path}: {outcome}", file=err)
        elif verbose:
            print(f"  Item Code: {outcome.item_code}", file=out)
            print(f"  Status: {outcome.status}", file=out)

    return report
