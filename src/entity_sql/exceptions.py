"""Exceptions raised while deriving entity schemas and rendering SQL.

Every error is raised before any statement text is returned, so callers never
receive partially rendered SQL.
"""

from typing import Dict, Optional


class EntitySqlError(Exception):
    """Base exception for entity-sql errors."""

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "message": str(self),
        }


class SchemaDerivationError(EntitySqlError):
    """Raised when an entity class cannot be described as a table.

    Covers undeclared entities, entities without persistent columns,
    duplicate column names, unmappable field types and operations that need
    exactly one primary-key column on an entity declaring zero or several.
    """

    def __init__(self, message: str, entity: Optional[str] = None):
        self.entity = entity
        super().__init__(message)


class UnsupportedTypeError(EntitySqlError):
    """Raised when a value kind has no data type entry in the active dialect."""

    def __init__(self, kind: object, dialect: str):
        self.kind = kind
        self.dialect = dialect
        label = getattr(kind, "value", kind)
        super().__init__(f"Unsupported value kind '{label}' for dialect '{dialect}'")


class ColumnNotFoundError(EntitySqlError):
    """Raised when a filter or where-group references an unknown column."""

    def __init__(self, column: str, table: str):
        self.column = column
        self.table = table
        super().__init__(f"Column '{column}' not found on table '{table}'")

    def to_dict(self) -> Dict[str, str]:
        data = super().to_dict()
        data.update({"column": self.column, "table": self.table})
        return data


class ColumnInvalidError(EntitySqlError):
    """Raised when an UPDATE/DELETE target has no primary-key value."""

    def __init__(self, message: str, table: str, column: Optional[str] = None):
        self.table = table
        self.column = column
        super().__init__(message)


class ValueRenderError(EntitySqlError, ValueError):
    """Raised when a raw value cannot be rendered exactly as its kind's literal.

    Covers non-numeric input and fractional values for integer kinds, and
    non-finite floats, which have no SQL literal form.
    """

    def __init__(self, kind: object, raw: object, reason: str):
        self.kind = kind
        self.raw = raw
        label = getattr(kind, "value", kind)
        super().__init__(f"Cannot render {type(raw).__name__} as {label}: {reason}")


__all__ = [
    "EntitySqlError",
    "SchemaDerivationError",
    "UnsupportedTypeError",
    "ColumnNotFoundError",
    "ColumnInvalidError",
    "ValueRenderError",
]
