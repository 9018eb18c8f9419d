"""Pipe-delimited text storage for catalogs.

Format (one file per list, UTF-8, one movie per line):

    <title>|<description>|<duration>\\n

There is no escaping: a `|` or a newline inside a title or description
corrupts that record on reload, and the line is dropped as malformed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.config import AppSettings
from core.domain.catalog import Catalog
from core.domain.models import Movie, MovieList
from core.errors import StorageError
from core.interfaces.storage import CatalogStore

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "|"


def serialize_movie(movie: Movie) -> str:
    return f"{movie.title}{FIELD_DELIMITER}{movie.description}{FIELD_DELIMITER}{movie.duration}\n"


def parse_line(line: str) -> Movie | None:
    """Parse one stored line, or return `None` when it is malformed."""

    fields = line.rstrip("\r\n").split(FIELD_DELIMITER)
    if len(fields) != 3:
        return None

    title, description, raw_duration = fields
    if not title or not description:
        return None
    try:
        duration = int(raw_duration)
    except ValueError:
        return None

    return Movie(title=title, description=description, duration=duration)


def load_catalog(path: Path) -> Catalog:
    """Read a catalog from `path`.

    A missing file is an empty catalog. Malformed lines, including lines
    that are not valid UTF-8, are skipped one by one.
    """

    catalog = Catalog()
    if not path.exists():
        logger.debug("No list file at %s, starting empty", path)
        return catalog

    try:
        with path.open("rb") as handle:
            for lineno, raw in enumerate(handle, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    logger.debug("Skipping undecodable line %d in %s", lineno, path)
                    continue
                if not line.strip():
                    continue
                movie = parse_line(line)
                if movie is None:
                    logger.debug("Skipping malformed line %d in %s", lineno, path)
                    continue
                catalog.append(movie)
    except OSError as exc:
        raise StorageError(path, "Could not read file") from exc

    logger.debug("Loaded %d movies from %s", len(catalog), path)
    return catalog


def save_catalog(catalog: Catalog, path: Path) -> None:
    """Overwrite `path` with every movie of `catalog`, in order."""

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            for movie in catalog:
                handle.write(serialize_movie(movie))
    except OSError as exc:
        raise StorageError(path, "Could not open file for writing") from exc

    logger.debug("Saved %d movies to %s", len(catalog), path)


class PipeFileStore(CatalogStore):
    """`CatalogStore` backed by one text file per list."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def path(self, kind: MovieList) -> Path:
        return self._settings.path_for(kind)

    def load(self, kind: MovieList) -> Catalog:
        return load_catalog(self.path(kind))

    def save(self, kind: MovieList, catalog: Catalog) -> None:
        save_catalog(catalog, self.path(kind))

    def location(self, kind: MovieList) -> str:
        return str(self.path(kind))
