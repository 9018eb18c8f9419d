"""In-memory catalog of movies.

A Catalog is one named list (Watched or To Watch). Insertion order is
display order and every operation is a linear scan; personal collections
are small enough that no index is kept.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.domain.models import Movie


class Catalog:
    """Ordered collection of `Movie` records.

    Titles are compared exactly (case-sensitive). Duplicates are allowed
    and the first match wins on `search` and `remove`.
    """

    def __init__(self, movies: Iterable[Movie] | None = None) -> None:
        self._movies: list[Movie] = list(movies or [])

    def add(self, title: str, description: str, duration: int) -> Movie:
        """Append a new movie to the end of the catalog. No validation."""

        movie = Movie(title=title, description=description, duration=duration)
        self._movies.append(movie)
        return movie

    def append(self, movie: Movie) -> None:
        self._movies.append(movie)

    def remove(self, title: str) -> Movie | None:
        """Remove the first movie titled `title`.

        Returns the removed movie, or `None` when nothing matched (the
        catalog is left untouched).
        """

        for index, movie in enumerate(self._movies):
            if movie.title == title:
                return self._movies.pop(index)
        return None

    def search(self, title: str) -> Movie | None:
        for movie in self._movies:
            if movie.title == title:
                return movie
        return None

    def enumerate(self) -> list[Movie]:
        """All movies in insertion order (a copy)."""

        return list(self._movies)

    def __iter__(self) -> Iterator[Movie]:
        return iter(list(self._movies))

    def __len__(self) -> int:
        return len(self._movies)

    def __repr__(self) -> str:
        return f"Catalog({len(self._movies)} movies)"
