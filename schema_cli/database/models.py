"""Schema snapshot data models."""

from typing import Optional, List, Dict, Any
from dataclasses import dataclass, field

from .type_mappers import ColumnDataType


@dataclass(frozen=True)
class Column:
    """Represents a database column."""
    name: str
    dtype: ColumnDataType
    nullable: bool

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "type": self.dtype.kind.value,
            "nullable": self.nullable,
        }
        if self.dtype.is_other:
            data["raw_type"] = self.dtype.raw_name
        return data


@dataclass(frozen=True)
class Relationship:
    """One single-column foreign-key edge.

    Composite keys surface as several records sharing ``constraint_name``.
    """
    constraint_name: str
    source_table_name: str
    source_column_name: str
    foreign_table_name: str
    foreign_column_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "constraint_name": self.constraint_name,
            "source_table_name": self.source_table_name,
            "source_column_name": self.source_column_name,
            "foreign_table_name": self.foreign_table_name,
            "foreign_column_name": self.foreign_column_name,
        }


@dataclass
class Table:
    """Represents a database table."""
    tablename: str
    columns: List[Column] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tablename": self.tablename,
            "columns": [c.to_dict() for c in self.columns],
        }


@dataclass
class Metadata:
    """Complete schema snapshot produced by one discovery run."""
    tables: List[Table] = field(default_factory=list)
    relationships: Dict[str, List[Relationship]] = field(default_factory=dict)

    def get_table(self, table_name: str) -> Optional[Table]:
        """Find a table by name."""
        for table in self.tables:
            if table.tablename == table_name:
                return table
        return None

    def all_relationships(self) -> List[Relationship]:
        """Get every relationship, in table order."""
        result = []
        for table in self.tables:
            result.extend(self.relationships.get(table.tablename, []))
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tables": [t.to_dict() for t in self.tables],
            "relationships": {
                name: [r.to_dict() for r in rels]
                for name, rels in self.relationships.items()
            },
        }
