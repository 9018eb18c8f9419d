"""Error taxonomy for movie-tracker.

NotFound is not an exception: lookups return ``None``.
"""

from __future__ import annotations

from pathlib import Path


class MovieTrackerError(Exception):
    """Base class for every error raised by the core."""


class MovieValidationError(MovieTrackerError, ValueError):
    """A title, description or duration is outside its allowed range."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class StorageError(MovieTrackerError):
    """A list file could not be written (or read)."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)
