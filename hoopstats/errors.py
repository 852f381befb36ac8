"""Error kinds raised while loading rosters, parsing results and answering queries."""

from __future__ import annotations


class StatsError(RuntimeError):
    """Base class for failures that abort a stats run."""


class MalformedRowError(StatsError):
    """Raised when an input row does not match its expected shape."""

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class NonNumericInputError(MalformedRowError, ValueError):
    """Raised when a numeric token or unit string cannot be parsed."""


class MissingFileError(StatsError):
    """Raised when one of the input CSV files is absent."""


class EmptyResultSetError(StatsError):
    """Raised when a query filter leaves nothing to answer with."""


class SkippedRowWarning(UserWarning):
    """Emitted for each malformed row dropped in non-strict mode."""
