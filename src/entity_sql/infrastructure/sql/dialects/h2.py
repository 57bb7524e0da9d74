"""H2 SQL dialect: the default target."""

from typing import List

from entity_sql.infrastructure.schema.core import ValueKind

from .base import DataTypeEntry, Dialect


class H2Dialect(Dialect):
    """H2 dialect: ANSI quoting, ``int``/``bigint``/``varchar`` types."""

    name = "h2"

    def data_type_entries(self) -> List[DataTypeEntry]:
        return [
            DataTypeEntry(ValueKind.INTEGER, "int", quote_required=False),
            DataTypeEntry(ValueKind.LONG, "bigint", quote_required=False),
            DataTypeEntry(ValueKind.TEXT, "varchar({length})", quote_required=True),
        ]
