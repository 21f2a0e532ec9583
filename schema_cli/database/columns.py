"""Column resolution for a single table."""

import logging
from typing import Any, List, Optional

from .catalog import list_columns
from .models import Column
from .type_mappers import TypeMapper, PostgresTypeMapper

logger = logging.getLogger(__name__)


def resolve_columns(
    table_name: str,
    connection: Any,
    namespace: str = "public",
    type_mapper: Optional[TypeMapper] = None,
) -> List[Column]:
    """Get all columns for a table, with canonical data types.

    Args:
        table_name: Table name
        connection: Live DB-API connection
        namespace: Schema the table lives in
        type_mapper: Mapper used for raw type names (default: PostgreSQL)

    Returns:
        List of Column objects in catalog order (empty for a table with no columns)

    Raises:
        CatalogQueryError: If the query fails or returns malformed rows
    """
    mapper = type_mapper or PostgresTypeMapper()

    columns = []
    for name, raw_type, nullable in list_columns(connection, table_name, namespace):
        dtype = mapper.canonicalize(raw_type)
        if dtype.is_other:
            logger.warning("Unrecognized type '%s' for column %s.%s", raw_type, table_name, name)
        columns.append(Column(name=name, dtype=dtype, nullable=nullable))

    return columns
