"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Typed, self-documenting records (Field) without coupling the Core to
  file formats or terminals.
- `model_dump` gives the JSON exporter a stable payload for free.

Note:
- `Movie` only enforces types. Length and range rules live in
  `core.domain.validation` and are applied by the CLI before a movie is
  added; a Catalog stores whatever it is given.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MovieList(str, Enum):
    """The two lists a movie can live in."""

    WATCHED = "watched"
    TO_WATCH = "to-watch"

    def label(self) -> str:
        """Human readable name for menus and messages."""

        return "Watched" if self is MovieList.WATCHED else "To Watch"

    def color(self) -> str:
        """Rich style used when rendering this list."""

        return "green" if self is MovieList.WATCHED else "magenta"

    def default_filename(self) -> str:
        return "watched_movies.txt" if self is MovieList.WATCHED else "to_watch_movies.txt"


class Movie(BaseModel):
    """One movie entry.

    `title` acts as the identity key for search and removal, but uniqueness
    is not enforced: a list may hold the same title twice.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        description="Movie title (1-99 characters when entered by a user).",
    )
    description: str = Field(
        ...,
        description="Free-text description (1-255 characters when entered by a user).",
    )
    duration: int = Field(
        ...,
        description="Running time in minutes (1-600 when entered by a user).",
    )


class SearchHit(BaseModel):
    """A movie together with the list it was found in."""

    model_config = ConfigDict(frozen=True)

    kind: MovieList
    movie: Movie
