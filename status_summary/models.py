"""Data models for status summary extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class FailureKind(Enum):
    SETUP_ERROR = "SetupError"
    PARSE_ERROR = "ParseError"
    MISSING_STATUS_HISTORY = "MissingStatusHistory"
    MISSING_STATUS = "MissingStatus"
    IO_FAILURE = "IOFailure"


@dataclass(frozen=True)
class ExtractionResult:
    """Item code and current status extracted from a single XML document."""

    item_code: str
    source_name: str
    status: str

    def to_row(self) -> tuple[str, str, str]:
        """Return the fields in output table column order."""
        return (self.item_code, self.source_name, self.status)


@dataclass(frozen=True)
class ExtractionFailure:
    """Why a single XML document produced no result."""

    kind: FailureKind
    source_name: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass
class BatchReport:
    """Aggregate outcome of processing an input directory."""

    results: list[ExtractionResult] = field(default_factory=list)
    failures: list[ExtractionFailure] = field(default_factory=list)

    def add(self, outcome: ExtractionResult | ExtractionFailure) -> None:
        """Record a per-file outcome, keeping processing order."""
        if isinstance(outcome, ExtractionFailure):
            self.failures.append(outcome)
        else:
            self.results.append(outcome)

    @property
    def succeeded(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed


class StatusSummaryError(Exception):
    """Base class for errors that abort a run."""

    kind: FailureKind

    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(message)
        self.path = str(path)
        self.message = message


class SetupError(StatusSummaryError):
    """The input directory is missing or is not a directory."""

    kind = FailureKind.SETUP_ERROR


class OutputWriteError(StatusSummaryError):
    """The output table could not be written."""

    kind = FailureKind.IO_FAILURE
