"""DDL SQL generation for entity classes.

Renders CREATE TABLE and DROP TABLE statements from the same schema
descriptors the DML builder uses, so column names, types and key markers stay
consistent between the two.
"""

from __future__ import annotations

from typing import List

from entity_sql.config import get_settings
from entity_sql.infrastructure.schema.core import EntityColumn
from entity_sql.infrastructure.schema.registry import describe_empty
from entity_sql.utils.logging import get_logger

from ..dialects.base import Dialect

logger = get_logger(__name__)


class DdlQueryBuilder:
    """Builder for CREATE TABLE / DROP TABLE statements."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect
        self.terminator = get_settings().statement_terminator

    def _column_definition(self, col: EntityColumn) -> str:
        """Render ``"name" type [NOT NULL] [identity]`` for one column."""
        parts: List[str] = [
            self.dialect.quote_identifier(col.name),
            self.dialect.data_type_full_name(col.kind, col.length),
        ]
        identity = col.is_primary_key and col.is_generated
        if not col.is_nullable and (
            not identity or self.dialect.requires_explicit_not_null_on_identity()
        ):
            parts.append(self.dialect.null_phrase(False))
        if col.is_generated:
            parts.append(self.dialect.auto_increment_phrase())
        return " ".join(parts)

    def build_create_table_query(self, entity_cls: type) -> str:
        """Generate the CREATE TABLE statement of an entity class.

        Raises:
            UnsupportedTypeError: If a column kind has no type in the dialect
        """
        table = describe_empty(entity_cls)
        definitions = [self._column_definition(c) for c in table.columns]

        keys = [c.name for c in table.primary_key_columns()]
        if keys:
            definitions.append(self.dialect.primary_key_phrase(keys))

        sql = (
            f"{self.dialect.create_table_phrase()} "
            f"{self.dialect.quote_identifier(table.name)} ({', '.join(definitions)})"
        )
        logger.debug("sql.statement_built", statement="create_table", table=table.name)
        return f"{sql}{self.terminator}"

    def build_drop_table_query(self, entity_cls: type) -> str:
        """Generate the DROP TABLE statement of an entity class."""
        table = describe_empty(entity_cls)
        sql = f"{self.dialect.drop_table_phrase()} {self.dialect.quote_identifier(table.name)}"
        logger.debug("sql.statement_built", statement="drop_table", table=table.name)
        return f"{sql}{self.terminator}"


__all__ = [
    "DdlQueryBuilder",
]
