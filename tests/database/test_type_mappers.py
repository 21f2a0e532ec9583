"""Tests for the canonical column type taxonomy."""

import pytest

from schema_cli.database.type_mappers import (
    ColumnDataType,
    PostgresTypeMapper,
    TypeKind,
    TypeMapper,
    canonicalize,
)


KNOWN_TYPES = [
    ("int2", TypeKind.INT),
    ("int4", TypeKind.INT),
    ("int8", TypeKind.INT),
    ("smallint", TypeKind.INT),
    ("integer", TypeKind.INT),
    ("bigint", TypeKind.INT),
    ("varchar", TypeKind.STRING),
    ("character varying", TypeKind.STRING),
    ("bpchar", TypeKind.STRING),
    ("char", TypeKind.STRING),
    ("character", TypeKind.STRING),
    ("text", TypeKind.TEXT),
    ("bool", TypeKind.BOOLEAN),
    ("boolean", TypeKind.BOOLEAN),
    ("date", TypeKind.DATE),
    ("timestamp", TypeKind.DATETIME),
    ("timestamptz", TypeKind.DATETIME),
    ("timestamp without time zone", TypeKind.DATETIME),
    ("timestamp with time zone", TypeKind.DATETIME),
    ("time", TypeKind.TIME),
    ("timetz", TypeKind.TIME),
    ("time without time zone", TypeKind.TIME),
    ("time with time zone", TypeKind.TIME),
    ("float4", TypeKind.FLOAT),
    ("real", TypeKind.FLOAT),
    ("float8", TypeKind.DOUBLE),
    ("double precision", TypeKind.DOUBLE),
    ("numeric", TypeKind.DECIMAL),
    ("decimal", TypeKind.DECIMAL),
    ("bytea", TypeKind.BINARY),
    ("json", TypeKind.JSON),
    ("jsonb", TypeKind.JSONB),
    ("uuid", TypeKind.UUID),
    ("ARRAY", TypeKind.ARRAY),
    ("int4[]", TypeKind.ARRAY),
    ("int8[]", TypeKind.ARRAY),
    ("text[]", TypeKind.ARRAY),
    ("varchar[]", TypeKind.ARRAY),
    ("_int4", TypeKind.ARRAY),
    ("_int8", TypeKind.ARRAY),
    ("_text", TypeKind.ARRAY),
    ("_varchar", TypeKind.ARRAY),
]


class TestKnownTypes:
    """Every known raw name maps to its documented variant."""

    @pytest.mark.parametrize("raw_name,kind", KNOWN_TYPES)
    def test_known_type(self, raw_name, kind):
        assert canonicalize(raw_name) == ColumnDataType(kind=kind)

    def test_table_covers_every_known_name(self):
        """The test table and the mapper stay in sync."""
        assert {name for name, _ in KNOWN_TYPES} == set(PostgresTypeMapper.TYPE_MAP)

    def test_known_types_carry_no_raw_name(self):
        assert canonicalize("int4").raw_name is None
        assert not canonicalize("int4").is_other

    def test_json_and_jsonb_are_distinct(self):
        assert canonicalize("json") != canonicalize("jsonb")

    def test_string_and_text_are_distinct(self):
        assert canonicalize("varchar").kind is TypeKind.STRING
        assert canonicalize("text").kind is TypeKind.TEXT


class TestOtherTypes:
    """Unknown names land in OTHER with the raw string preserved."""

    @pytest.mark.parametrize("raw_name", [
        "",
        "INT4",
        "Varchar",
        " int4",
        "int4 ",
        "float4[]",
        "_uuid",
        "tsvector",
        "geometry",
        "character varying(255)",
        "ünïcode_type",
    ])
    def test_unknown_type_preserved(self, raw_name):
        result = canonicalize(raw_name)

        assert result.kind is TypeKind.OTHER
        assert result.is_other
        assert result.raw_name == raw_name
        assert result == ColumnDataType.other(raw_name)

    def test_matching_is_case_sensitive(self):
        """'array' is unknown even though 'ARRAY' is known."""
        assert canonicalize("ARRAY").kind is TypeKind.ARRAY
        assert canonicalize("array") == ColumnDataType.other("array")


class TestColumnDataType:
    """Test ColumnDataType value behavior."""

    def test_str_of_known_type(self):
        assert str(ColumnDataType(TypeKind.DATETIME)) == "datetime"

    def test_str_of_other_type(self):
        assert str(ColumnDataType.other("citext")) == "Other(citext)"

    def test_is_hashable(self):
        kinds = {canonicalize("int4"), canonicalize("int8"), canonicalize("text")}
        assert kinds == {ColumnDataType(TypeKind.INT), ColumnDataType(TypeKind.TEXT)}


class TestTypeMapperExtension:
    """A subclass extends the lookup table without other changes."""

    def test_subclass_adds_raw_name(self):
        class CitextTypeMapper(PostgresTypeMapper):
            TYPE_MAP = {**PostgresTypeMapper.TYPE_MAP, "citext": TypeKind.TEXT}

        mapper = CitextTypeMapper()

        assert mapper.canonicalize("citext") == ColumnDataType(TypeKind.TEXT)
        assert mapper.canonicalize("int4") == ColumnDataType(TypeKind.INT)
        assert canonicalize("citext").is_other

    def test_empty_mapper_maps_everything_to_other(self):
        mapper = TypeMapper()

        assert mapper.canonicalize("int4") == ColumnDataType.other("int4")
