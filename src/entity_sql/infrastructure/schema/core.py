"""Core schema descriptor types for entity-sql.

``EntityTable`` and ``EntityColumn`` are request-scoped, read-only values
derived from an entity class (structure only) or instance (structure and
live values).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

from entity_sql.exceptions import ColumnNotFoundError


class ValueKind(Enum):
    """Semantic kind of a column value; drives type names and quoting."""

    INTEGER = "integer"
    LONG = "long"
    TEXT = "text"
    BOOLEAN = "boolean"
    FLOAT = "float"
    NULL = "null"


@dataclass(frozen=True)
class TypedValue:
    """A scalar tagged with its value kind."""

    kind: ValueKind
    raw: Any = None

    @classmethod
    def of(cls, kind: ValueKind, raw: Any) -> "TypedValue":
        """Wrap ``raw`` as ``kind``; absent values always become NULL."""
        if raw is None:
            return cls(ValueKind.NULL)
        return cls(kind, raw)

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL


NULL = TypedValue(ValueKind.NULL)


@dataclass(frozen=True)
class EntityColumn:
    """Definition of a single column, with its current value."""

    name: str
    kind: ValueKind
    value: TypedValue = NULL
    is_primary_key: bool = False
    is_insertable: bool = True
    is_nullable: bool = True
    is_generated: bool = False
    length: Optional[int] = None
    field_name: str = ""


@dataclass(frozen=True)
class EntityTable:
    """Table description: name plus columns in declaration order."""

    name: str
    columns: Tuple[EntityColumn, ...]

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def has_column(self, name: str) -> bool:
        return any(c.name == name for c in self.columns)

    def get_column(self, name: str) -> EntityColumn:
        """Look up a column by name.

        Raises:
            ColumnNotFoundError: If the table has no such column
        """
        for column in self.columns:
            if column.name == name:
                return column
        raise ColumnNotFoundError(name, self.name)

    def insertable_columns(self) -> List[EntityColumn]:
        return [c for c in self.columns if c.is_insertable]

    def primary_key_columns(self) -> List[EntityColumn]:
        return [c for c in self.columns if c.is_primary_key]

    def non_primary_key_columns(self) -> List[EntityColumn]:
        return [c for c in self.columns if not c.is_primary_key]


__all__ = [
    "ValueKind",
    "TypedValue",
    "NULL",
    "EntityColumn",
    "EntityTable",
]
