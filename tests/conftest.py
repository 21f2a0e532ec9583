"""Shared pytest fixtures for schema-cli tests."""

import pytest

from tests.fixtures import FakeCatalog, FakeCatalogConnection, FakePool


@pytest.fixture
def shop_catalog():
    """Catalog with users and orders linked by fk_orders_user."""
    return FakeCatalog(
        tables={
            "users": [
                ("id", "int4", False),
                ("email", "varchar", True),
            ],
            "orders": [
                ("id", "int4", False),
                ("user_id", "int4", False),
            ],
        },
        foreign_keys=[
            ("fk_orders_user", "orders", "user_id", "users", "id"),
        ],
    )


@pytest.fixture
def shop_connection(shop_catalog):
    return FakeCatalogConnection(shop_catalog)


@pytest.fixture
def empty_connection():
    return FakeCatalogConnection(FakeCatalog())


@pytest.fixture
def wide_catalog():
    """Catalog with more tables than pool connections, for concurrency tests."""
    tables = {}
    foreign_keys = []
    for i in range(12):
        name = f"t{i:02d}"
        tables[name] = [("id", "int8", False), ("payload", "jsonb", True)]
        if i:
            tables[name].append(("parent_id", "int8", True))
            foreign_keys.append((f"fk_{name}_parent", name, "parent_id", f"t{i - 1:02d}", "id"))
    return FakeCatalog(tables=tables, foreign_keys=foreign_keys)


@pytest.fixture
def wide_pool(wide_catalog):
    return FakePool(wide_catalog, maxconn=4)
