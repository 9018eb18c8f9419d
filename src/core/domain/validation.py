"""Field validators for user-entered movies.

Each validator returns its input unchanged or raises `MovieValidationError`
with a message ready to show to the user. They are plain callables so the
CLI can hand them to a generic prompt loop.
"""

from __future__ import annotations

from core.errors import MovieValidationError

TITLE_MAX_LENGTH = 99
DESCRIPTION_MAX_LENGTH = 255
DURATION_MIN = 1
DURATION_MAX = 600  # 10 hours


def validate_title(title: str) -> str:
    if not 1 <= len(title) <= TITLE_MAX_LENGTH:
        raise MovieValidationError(
            "title", f"Title must be between 1 and {TITLE_MAX_LENGTH} characters."
        )
    return title


def validate_description(description: str) -> str:
    if not 1 <= len(description) <= DESCRIPTION_MAX_LENGTH:
        raise MovieValidationError(
            "description",
            f"Description must be between 1 and {DESCRIPTION_MAX_LENGTH} characters.",
        )
    return description


def validate_duration(duration: int) -> int:
    if not DURATION_MIN <= duration <= DURATION_MAX:
        raise MovieValidationError(
            "duration",
            f"Duration must be between {DURATION_MIN} and {DURATION_MAX} minutes.",
        )
    return duration


def parse_duration(text: str) -> int:
    """Parse a duration typed by the user (digits only) and range-check it."""

    value = text.strip()
    if not value or not value.isdecimal():
        raise MovieValidationError("duration", "Please enter a valid number.")
    return validate_duration(int(value))
