"""Catalog queries issued against a live PostgreSQL connection.

Every function takes a DB-API connection, runs one parameterized query and
returns plain tuples. Driver failures and rows of unexpected shape are raised
as ``CatalogQueryError``.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

import psycopg2
from psycopg2 import extensions

from .errors import CatalogQueryError

logger = logging.getLogger(__name__)


TABLES_QUERY = """
    SELECT tablename
    FROM pg_catalog.pg_tables
    WHERE schemaname = %s
    ORDER BY tablename
"""

COLUMNS_QUERY = """
    SELECT
        column_name,
        udt_name,
        is_nullable = 'YES' AS nullable
    FROM information_schema.columns
    WHERE table_schema = %s
      AND table_name = %s
    ORDER BY ordinal_position
"""

# Referencing and referenced columns are paired by position in the unique
# key, so composite keys yield one row per column pair. The referenced table
# may live in any schema.
FOREIGN_KEYS_QUERY = """
    SELECT
        kcu.constraint_name,
        kcu.table_name AS source_table,
        kcu.column_name AS source_column,
        ukcu.table_name AS foreign_table,
        ukcu.column_name AS foreign_column
    FROM information_schema.referential_constraints rc
    JOIN information_schema.key_column_usage kcu
      ON kcu.constraint_schema = rc.constraint_schema
      AND kcu.constraint_name = rc.constraint_name
    JOIN information_schema.key_column_usage ukcu
      ON ukcu.constraint_schema = rc.unique_constraint_schema
      AND ukcu.constraint_name = rc.unique_constraint_name
      AND ukcu.ordinal_position = kcu.position_in_unique_constraint
    WHERE kcu.table_schema = %s
      AND kcu.table_name = %s
    ORDER BY kcu.constraint_name, kcu.ordinal_position
"""


def _execute(connection: Any, sql: str, params: Sequence[Any], label: str) -> List[tuple]:
    logger.debug("Running %s query with params %s", label, params)
    try:
        with connection.cursor() as cursor:
            cursor.execute(sql, params)
            rows = cursor.fetchall()
    except extensions.QueryCanceledError as e:
        raise CatalogQueryError(
            f"Catalog query '{label}' timed out: {e}",
            details={"query": label, "params": list(params), "timeout": True},
        ) from e
    except psycopg2.Error as e:
        raise CatalogQueryError(
            f"Catalog query '{label}' failed: {e}",
            details={"query": label, "params": list(params)},
        ) from e

    logger.debug("%s query returned %d rows", label, len(rows))
    return rows


def _decode(rows: List[tuple], types: Tuple[type, ...], label: str) -> List[tuple]:
    """Check every row has the expected width and value types."""
    decoded = []
    for index, row in enumerate(rows):
        if not isinstance(row, (tuple, list)) or len(row) != len(types):
            raise CatalogQueryError(
                f"Unexpected row shape from '{label}' query at row {index}: {row!r}",
                details={"query": label, "row": index, "expected_width": len(types)},
            )
        for value, expected in zip(row, types):
            if not isinstance(value, expected):
                raise CatalogQueryError(
                    f"Unexpected value {value!r} from '{label}' query at row {index}, "
                    f"expected {expected.__name__}",
                    details={"query": label, "row": index},
                )
        decoded.append(tuple(row))
    return decoded


def list_tables(connection: Any, namespace: str = "public") -> List[str]:
    """Get all table names in a namespace, in catalog order."""
    rows = _execute(connection, TABLES_QUERY, (namespace,), "tables")
    return [row[0] for row in _decode(rows, (str,), "tables")]


def list_columns(connection: Any, table_name: str, namespace: str = "public") -> List[Tuple[str, str, bool]]:
    """Get (column_name, raw_type_name, is_nullable) triples for a table."""
    rows = _execute(connection, COLUMNS_QUERY, (namespace, table_name), "columns")
    return _decode(rows, (str, str, bool), "columns")


def list_outgoing_foreign_keys(
    connection: Any,
    table_name: str,
    namespace: str = "public",
) -> List[Tuple[str, str, str, str, str]]:
    """Get foreign-key edges whose source table is ``table_name``.

    Rows are (constraint_name, source_table, source_column, foreign_table,
    foreign_column).
    """
    rows = _execute(connection, FOREIGN_KEYS_QUERY, (namespace, table_name), "foreign_keys")
    return _decode(rows, (str, str, str, str, str), "foreign_keys")


def ping(connection: Any) -> Optional[str]:
    """Return the server version string, or raise CatalogQueryError."""
    rows = _execute(connection, "SELECT version()", (), "version")
    return rows[0][0] if rows else None
