"""Shared fixtures."""

from pathlib import Path

import pytest

from adapters.text_store import PipeFileStore
from core.config import AppSettings
from core.domain.catalog import Catalog
from core.domain.models import MovieList
from core.errors import StorageError


class MemoryStore:
    """CatalogStore keeping serialized copies in memory."""

    def __init__(self):
        self.saved = {kind: [] for kind in MovieList}
        self.save_calls = []

    def load(self, kind):
        return Catalog(self.saved[kind])

    def save(self, kind, catalog):
        self.save_calls.append(kind)
        self.saved[kind] = catalog.enumerate()

    def location(self, kind):
        return f"memory://{kind.value}"


class FailingStore(MemoryStore):
    """Loads fine, never manages to save."""

    def save(self, kind, catalog):
        self.save_calls.append(kind)
        raise StorageError(Path("/readonly") / kind.default_filename(), "Could not open file for writing")


class UnreadableStore(MemoryStore):
    """Watched list cannot be read; To Watch loads fine."""

    def load(self, kind):
        if kind is MovieList.WATCHED:
            raise StorageError(Path("/locked") / kind.default_filename(), "Could not read file")
        return super().load(kind)


@pytest.fixture
def settings(tmp_path):
    return AppSettings(data_dir=tmp_path)


@pytest.fixture
def file_store(settings):
    return PipeFileStore(settings)


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def unreadable_store():
    return UnreadableStore()
