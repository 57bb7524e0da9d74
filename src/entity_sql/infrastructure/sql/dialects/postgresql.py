"""
PostgreSQL-specific SQL dialect implementation.

Provides PostgreSQL type names (including ``boolean`` and
``double precision``) and identity column syntax.
"""

from typing import List

from entity_sql.infrastructure.schema.core import ValueKind

from .base import DataTypeEntry, Dialect


class PostgreSQLDialect(Dialect):
    """PostgreSQL SQL dialect implementation."""

    name = "postgresql"

    def data_type_entries(self) -> List[DataTypeEntry]:
        return [
            DataTypeEntry(ValueKind.INTEGER, "integer", quote_required=False),
            DataTypeEntry(ValueKind.LONG, "bigint", quote_required=False),
            DataTypeEntry(ValueKind.TEXT, "varchar({length})", quote_required=True),
            DataTypeEntry(ValueKind.BOOLEAN, "boolean", quote_required=False),
            DataTypeEntry(ValueKind.FLOAT, "double precision", quote_required=False),
        ]

    def auto_increment_phrase(self) -> str:
        """Identity columns use the SQL-standard syntax."""
        return "GENERATED BY DEFAULT AS IDENTITY"

    def requires_explicit_not_null_on_identity(self) -> bool:
        # Identity columns are implicitly NOT NULL in PostgreSQL
        return False
