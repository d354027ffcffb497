from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning", "information"]


@dataclass
class FastaLensError(Exception):
    message: str
    detail: str | None = None
    code: str = "error"
    severity: Severity = "error"

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


@dataclass
class CatalogReadError(FastaLensError):
    """A path under the catalog root could not be listed or opened."""

    code: str = "catalog_read"


@dataclass
class SequenceParseError(FastaLensError):
    """A sequence file has malformed content."""

    code: str = "sequence_parse"


@dataclass
class FilterInputError(FastaLensError):
    """Typed filter text is not a ``min-max`` pair."""

    code: str = "filter_input"
    severity: Severity = "information"


def format_error(error: BaseException) -> tuple[str, Severity]:
    if isinstance(error, FastaLensError):
        prefix = f"[{error.code}] " if error.code else ""
        return f"{prefix}{error}", error.severity
    return f"{error}", "error"
