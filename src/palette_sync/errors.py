"""Error hierarchy for palette synchronisation."""
from __future__ import annotations


class PaletteSyncError(Exception):
    """Base error for all palette_sync errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(PaletteSyncError):
    """Missing or invalid settings (no stylesheet, no color slugs, ...)."""


class ParseError(PaletteSyncError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        self.line = line
        self.column = column
        super().__init__(message, cause=cause)


class CacheUnavailable(PaletteSyncError):
    """The cache backend could not be reached.

    Never surfaced to callers of the store: it is turned into a cache miss.
    """
