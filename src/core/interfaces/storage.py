"""Catalog storage contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The session object only needs load/save, so tests can swap the file
  store for an in-memory one.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.catalog import Catalog
from core.domain.models import MovieList


@runtime_checkable
class CatalogStore(Protocol):
    """Minimal contract for persisting one catalog per list."""

    def load(self, kind: MovieList) -> Catalog:
        """Return the stored catalog for `kind` (empty when nothing is stored)."""

        ...

    def save(self, kind: MovieList, catalog: Catalog) -> None:
        """Overwrite the stored catalog for `kind`. Raises `StorageError`."""

        ...

    def location(self, kind: MovieList) -> str:
        """Human readable location of the stored catalog (for messages)."""

        ...
