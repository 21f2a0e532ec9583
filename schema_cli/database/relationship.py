"""Foreign-key relationship resolution for a single table."""

from typing import Any, List

from .catalog import list_outgoing_foreign_keys
from .models import Relationship


def resolve_relationships(table_name: str, connection: Any, namespace: str = "public") -> List[Relationship]:
    """Get the outgoing foreign-key relationships of a table.

    One record is returned per (constraint, source column, foreign column);
    a composite key yields several records sharing its constraint name.
    Tables with no foreign keys get an empty list.

    Raises:
        CatalogQueryError: If the query fails or returns malformed rows
    """
    return [
        Relationship(
            constraint_name=constraint_name,
            source_table_name=source_table,
            source_column_name=source_column,
            foreign_table_name=foreign_table,
            foreign_column_name=foreign_column,
        )
        for constraint_name, source_table, source_column, foreign_table, foreign_column
        in list_outgoing_foreign_keys(connection, table_name, namespace)
    ]
