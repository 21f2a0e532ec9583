"""Database schema discovery module for schema-cli.

This module reads a PostgreSQL catalog and builds a typed snapshot of its
tables, columns and foreign-key relationships.
"""

from .models import Column, Table, Relationship, Metadata
from .type_mappers import TypeKind, ColumnDataType, TypeMapper, PostgresTypeMapper, canonicalize
from .errors import SchemaCLIError, CatalogQueryError
from .columns import resolve_columns
from .relationship import resolve_relationships
from .introspector import discover, discover_concurrent

__all__ = [
    # Data models
    "Column",
    "Table",
    "Relationship",
    "Metadata",
    # Type taxonomy
    "TypeKind",
    "ColumnDataType",
    "TypeMapper",
    "PostgresTypeMapper",
    "canonicalize",
    # Errors
    "SchemaCLIError",
    "CatalogQueryError",
    # Resolvers
    "resolve_columns",
    "resolve_relationships",
    "discover",
    "discover_concurrent",
]
