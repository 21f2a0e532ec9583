"""Test fixtures package."""

from .fake_catalog import FakeCatalog, FakeCatalogConnection, FakeCursor, FakePool
from .sqlite_catalog import SQLiteCatalogConnection

__all__ = [
    "FakeCatalog",
    "FakeCatalogConnection",
    "FakeCursor",
    "FakePool",
    "SQLiteCatalogConnection",
]
