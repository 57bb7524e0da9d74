"""MySQL SQL dialect: backtick identifiers and ``tinyint(1)`` booleans."""

from typing import List

from entity_sql.infrastructure.schema.core import TypedValue, ValueKind

from ..core.identifier import quote_literal
from .base import DataTypeEntry, Dialect


class MySQLDialect(Dialect):
    """MySQL SQL dialect implementation."""

    name = "mysql"
    identifier_quote = "`"

    def data_type_entries(self) -> List[DataTypeEntry]:
        return [
            DataTypeEntry(ValueKind.INTEGER, "int", quote_required=False),
            DataTypeEntry(ValueKind.LONG, "bigint", quote_required=False),
            DataTypeEntry(ValueKind.TEXT, "varchar({length})", quote_required=True),
            DataTypeEntry(ValueKind.BOOLEAN, "tinyint(1)", quote_required=False),
            DataTypeEntry(ValueKind.FLOAT, "double", quote_required=False),
        ]

    def quote_text(self, raw: object) -> str:
        # Backslash is an escape character inside MySQL string literals.
        return quote_literal(str(raw).replace("\\", "\\\\"), self.value_quote)

    def render_unquoted(self, value: TypedValue) -> str:
        rendered = super().render_unquoted(value)
        if value.kind is ValueKind.BOOLEAN:
            return "1" if rendered == "TRUE" else "0"
        return rendered
