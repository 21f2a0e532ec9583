"""Schema discovery: assembles tables, columns and relationships into a snapshot."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple

from .catalog import list_tables
from .columns import resolve_columns
from .models import Metadata, Relationship, Table, Column
from .postgres import pooled_connection
from .relationship import resolve_relationships

logger = logging.getLogger(__name__)


def discover(connection: Any, namespace: str = "public") -> Metadata:
    """Discover every table in a namespace on a single connection.

    Tables are listed once, then each table's columns and outgoing
    relationships are resolved one query at a time. Results are accumulated
    locally and only returned once every query has succeeded; the first
    failure propagates unchanged and nothing is returned.

    Args:
        connection: Live DB-API connection
        namespace: Schema name to introspect

    Returns:
        Metadata snapshot with tables in catalog order

    Raises:
        CatalogQueryError: If any catalog query fails
    """
    tables = [Table(tablename=name) for name in list_tables(connection, namespace)]
    logger.info("Found %d tables in namespace '%s'", len(tables), namespace)

    for table in tables:
        table.columns = resolve_columns(table.tablename, connection, namespace)

    relationships: Dict[str, List[Relationship]] = {}
    for table in tables:
        relationships[table.tablename] = resolve_relationships(table.tablename, connection, namespace)

    metadata = Metadata(tables=tables, relationships=relationships)
    _log_summary(metadata, namespace)
    return metadata


def discover_concurrent(pool: Any, namespace: str = "public", max_workers: Optional[int] = None) -> Metadata:
    """Discover a namespace resolving tables in parallel.

    Each in-flight table gets its own connection checked out of ``pool``
    (anything with ``getconn``/``putconn``, e.g. psycopg2's
    ``ThreadedConnectionPool``). ``max_workers`` defaults to the pool's
    ``maxconn`` and must not exceed it. The snapshot is identical to
    ``discover``'s, tables in catalog order.
    """
    with pooled_connection(pool) as connection:
        table_names = list_tables(connection, namespace)
    logger.info("Found %d tables in namespace '%s'", len(table_names), namespace)

    def resolve(table_name: str) -> Tuple[List[Column], List[Relationship]]:
        with pooled_connection(pool) as conn:
            return (
                resolve_columns(table_name, conn, namespace),
                resolve_relationships(table_name, conn, namespace),
            )

    # map() yields in submission order and re-raises the first failure
    workers = max_workers or getattr(pool, "maxconn", None)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        resolved = list(executor.map(resolve, table_names))

    tables = []
    relationships: Dict[str, List[Relationship]] = {}
    for table_name, (columns, table_relationships) in zip(table_names, resolved):
        tables.append(Table(tablename=table_name, columns=columns))
        relationships[table_name] = table_relationships

    metadata = Metadata(tables=tables, relationships=relationships)
    _log_summary(metadata, namespace)
    return metadata


def _log_summary(metadata: Metadata, namespace: str) -> None:
    logger.info(
        "Discovered %d tables, %d columns, %d relationships in '%s'",
        len(metadata.tables),
        sum(len(t.columns) for t in metadata.tables),
        len(metadata.all_relationships()),
        namespace,
    )
