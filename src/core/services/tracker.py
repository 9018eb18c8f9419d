"""Movie tracker session.

`MovieTracker` owns the Watched and To Watch catalogs for the lifetime of
the process and writes a list back to its store after every successful
mutation (write-through). The CLI only talks to this object, which keeps
printing and prompting out of the core logic.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

from core.domain.catalog import Catalog
from core.domain.models import Movie, MovieList, SearchHit
from core.errors import StorageError
from core.interfaces.storage import CatalogStore

logger = logging.getLogger(__name__)

# Search order when looking a title up in both lists.
SEARCH_ORDER: tuple[MovieList, ...] = (MovieList.WATCHED, MovieList.TO_WATCH)


@dataclass
class TrackerHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None


class MovieTracker:
    """Owner of both catalogs plus the store they persist to.

    Storage failures never propagate out of this class: they are logged and
    reported through `hooks.warning`, and the in-memory catalogs stay
    authoritative until the next successful save.
    """

    def __init__(self, store: CatalogStore, hooks: TrackerHooks | None = None) -> None:
        self._store = store
        self._hooks = hooks or TrackerHooks()
        self._catalogs: dict[MovieList, Catalog] = {kind: Catalog() for kind in MovieList}
        # Lists whose stored copy could not be read are never written back.
        self._unreadable: set[MovieList] = set()

    def catalog(self, kind: MovieList) -> Catalog:
        return self._catalogs[kind]

    def load_all(self) -> None:
        """Load both catalogs from the store. Called once at startup."""

        for kind in MovieList:
            try:
                self._catalogs[kind] = self._store.load(kind)
            except StorageError as exc:
                self._warn(f"Error: {exc}")
                self._catalogs[kind] = Catalog()
                self._unreadable.add(kind)
            else:
                self._unreadable.discard(kind)

    def save_all(self) -> bool:
        """Save both catalogs. Returns False if any save failed."""

        results = [self._save(kind) for kind in MovieList]
        return all(results)

    def add(self, kind: MovieList, title: str, description: str, duration: int) -> Movie:
        movie = self._catalogs[kind].add(title, description, duration)
        logger.info("Added %r to %s", title, kind.label())
        self._save(kind)
        return movie

    def remove(self, kind: MovieList, title: str) -> Movie | None:
        """Remove the first movie titled `title`; `None` when not found."""

        removed = self._catalogs[kind].remove(title)
        if removed is None:
            logger.info("%r not found in %s", title, kind.label())
            return None
        logger.info("Removed %r from %s", title, kind.label())
        self._save(kind)
        return removed

    def search(self, title: str) -> SearchHit | None:
        """Look `title` up in Watched first, then To Watch."""

        for kind in SEARCH_ORDER:
            movie = self._catalogs[kind].search(title)
            if movie is not None:
                return SearchHit(kind=kind, movie=movie)
        return None

    def list(self, kind: MovieList) -> list[Movie]:
        return self._catalogs[kind].enumerate()

    def _save(self, kind: MovieList) -> bool:
        if kind in self._unreadable:
            self._warn(
                f"{kind.label()} list not saved: {self._store.location(kind)} could not be loaded"
            )
            return False
        try:
            self._store.save(kind, self._catalogs[kind])
        except StorageError as exc:
            self._warn(f"Error: {exc}")
            return False
        return True

    def _warn(self, message: str) -> None:
        if self._hooks.warning:
            self._hooks.warning(message)
        else:
            logger.error(message)


@contextmanager
def session(store: CatalogStore, hooks: TrackerHooks | None = None) -> Iterator[MovieTracker]:
    """Load both lists on entry and save them again on exit."""

    tracker = MovieTracker(store, hooks)
    tracker.load_all()
    try:
        yield tracker
    finally:
        tracker.save_all()
