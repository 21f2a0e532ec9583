"""Canonical column types and raw catalog type name mapping."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class TypeKind(str, Enum):
    """Engine-agnostic column type buckets."""
    INT = "int"
    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    BINARY = "binary"
    JSON = "json"
    JSONB = "jsonb"
    UUID = "uuid"
    ARRAY = "array"
    OTHER = "other"


@dataclass(frozen=True)
class ColumnDataType:
    """Canonical type of a column.

    ``raw_name`` is only carried by the ``OTHER`` escape variant and holds the
    unrecognized catalog type name exactly as the catalog reported it.
    """
    kind: TypeKind
    raw_name: Optional[str] = None

    @classmethod
    def other(cls, raw_name: str) -> "ColumnDataType":
        return cls(kind=TypeKind.OTHER, raw_name=raw_name)

    @property
    def is_other(self) -> bool:
        return self.kind is TypeKind.OTHER

    def __str__(self) -> str:
        if self.is_other:
            return f"Other({self.raw_name})"
        return self.kind.value


class TypeMapper:
    """Exact-match lookup from raw catalog type names to canonical types.

    Subclasses provide ``TYPE_MAP``. Matching is case-sensitive and never
    fails: names missing from the table become ``ColumnDataType.other``.
    """

    TYPE_MAP: Dict[str, TypeKind] = {}

    def canonicalize(self, raw_type_name: str) -> ColumnDataType:
        kind = self.TYPE_MAP.get(raw_type_name)
        if kind is None:
            return ColumnDataType.other(raw_type_name)
        return ColumnDataType(kind=kind)


class PostgresTypeMapper(TypeMapper):
    """Type mapper for PostgreSQL catalog type names.

    Covers both the short ``udt_name`` spellings (``int4``, ``varchar``) and
    the long ``data_type`` spellings (``integer``, ``character varying``).
    """

    TYPE_MAP = {
        # Integer family
        "int2": TypeKind.INT,
        "int4": TypeKind.INT,
        "int8": TypeKind.INT,
        "smallint": TypeKind.INT,
        "integer": TypeKind.INT,
        "bigint": TypeKind.INT,

        # Character types
        "varchar": TypeKind.STRING,
        "character varying": TypeKind.STRING,
        "bpchar": TypeKind.STRING,
        "char": TypeKind.STRING,
        "character": TypeKind.STRING,
        "text": TypeKind.TEXT,

        "bool": TypeKind.BOOLEAN,
        "boolean": TypeKind.BOOLEAN,

        # Date/Time types
        "date": TypeKind.DATE,
        "timestamp": TypeKind.DATETIME,
        "timestamptz": TypeKind.DATETIME,
        "timestamp without time zone": TypeKind.DATETIME,
        "timestamp with time zone": TypeKind.DATETIME,
        "time": TypeKind.TIME,
        "timetz": TypeKind.TIME,
        "time without time zone": TypeKind.TIME,
        "time with time zone": TypeKind.TIME,

        # Floating point and exact numerics
        "float4": TypeKind.FLOAT,
        "real": TypeKind.FLOAT,
        "float8": TypeKind.DOUBLE,
        "double precision": TypeKind.DOUBLE,
        "numeric": TypeKind.DECIMAL,
        "decimal": TypeKind.DECIMAL,

        "bytea": TypeKind.BINARY,
        "json": TypeKind.JSON,
        "jsonb": TypeKind.JSONB,
        "uuid": TypeKind.UUID,

        # Arrays: information_schema reports ARRAY, udt_name uses a leading underscore
        "ARRAY": TypeKind.ARRAY,
        "int4[]": TypeKind.ARRAY,
        "int8[]": TypeKind.ARRAY,
        "text[]": TypeKind.ARRAY,
        "varchar[]": TypeKind.ARRAY,
        "_int4": TypeKind.ARRAY,
        "_int8": TypeKind.ARRAY,
        "_text": TypeKind.ARRAY,
        "_varchar": TypeKind.ARRAY,
    }


_default_mapper = PostgresTypeMapper()


def canonicalize(raw_type_name: str) -> ColumnDataType:
    """Map a raw PostgreSQL type name to its canonical column type."""
    return _default_mapper.canonicalize(raw_type_name)
