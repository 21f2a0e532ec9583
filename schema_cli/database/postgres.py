"""PostgreSQL connection management for discovery runs."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

import psycopg2
from psycopg2 import extensions
from psycopg2.pool import ThreadedConnectionPool

from ..config import DiscoveryConfig
from .errors import CatalogQueryError

logger = logging.getLogger(__name__)


def _connect_kwargs(config: DiscoveryConfig) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {"dsn": config.database_url}
    if config.statement_timeout_ms:
        kwargs["options"] = f"-c statement_timeout={config.statement_timeout_ms}"
    return kwargs


@contextmanager
def connect(config: DiscoveryConfig) -> Iterator[Any]:
    """Open one read-only connection for a discovery run.

    The session runs at REPEATABLE READ, so every catalog query issued on it
    sees the same snapshot.
    """
    logger.debug("Connecting to %s", config.masked_url())
    try:
        connection = psycopg2.connect(**_connect_kwargs(config))
    except psycopg2.Error as e:
        raise CatalogQueryError(
            f"Could not connect to database: {e}",
            details={"database_url": config.masked_url()},
        ) from e

    try:
        connection.set_session(
            isolation_level=extensions.ISOLATION_LEVEL_REPEATABLE_READ,
            readonly=True,
        )
    except psycopg2.Error as e:
        connection.close()
        raise CatalogQueryError(
            f"Could not configure read-only session: {e}",
            details={"database_url": config.masked_url()},
        ) from e

    try:
        yield connection
    finally:
        if not connection.closed:
            connection.rollback()
        connection.close()


@contextmanager
def connection_pool(config: DiscoveryConfig) -> Iterator[ThreadedConnectionPool]:
    """Open a thread-safe pool of up to ``config.pool_size`` connections."""
    logger.debug("Opening pool of %d connections to %s", config.pool_size, config.masked_url())
    try:
        pool = ThreadedConnectionPool(1, config.pool_size, **_connect_kwargs(config))
    except psycopg2.Error as e:
        raise CatalogQueryError(
            f"Could not connect to database: {e}",
            details={"database_url": config.masked_url()},
        ) from e

    try:
        yield pool
    finally:
        pool.closeall()


@contextmanager
def pooled_connection(pool: Any) -> Iterator[Any]:
    """Check a connection out of a pool and always return it."""
    try:
        connection = pool.getconn()
    except psycopg2.Error as e:
        raise CatalogQueryError(f"Could not check out a pooled connection: {e}") from e

    try:
        yield connection
    finally:
        pool.putconn(connection)
