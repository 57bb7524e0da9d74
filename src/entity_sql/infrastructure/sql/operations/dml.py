"""
DML statement builders.

Builds INSERT, SELECT, UPDATE and DELETE statements from entity classes and
instances. Every value passes through the dialect's typed quoting path.

Example:
    >>> from entity_sql import QueryBuilder, create_dialect
    >>> builder = QueryBuilder(create_dialect("h2"))
    >>> builder.build_select_query(Person, ["email"], [{"id": 1}])
    'SELECT "email" FROM "users" WHERE ("id" = 1);'
"""

from typing import Any, List, Optional, Sequence

from entity_sql.config import get_settings
from entity_sql.exceptions import (
    ColumnInvalidError,
    ColumnNotFoundError,
    SchemaDerivationError,
)
from entity_sql.infrastructure.schema.core import EntityColumn, EntityTable
from entity_sql.infrastructure.schema.registry import describe_empty, describe_populated
from entity_sql.utils.logging import get_logger

from ..clauses.where import WhereClauseComposer, WhereGroup
from ..dialects.base import Dialect

logger = get_logger(__name__)


class QueryBuilder:
    """
    High-level builder for single-table DML statements.

    Args:
        dialect: SQL dialect to use for statement generation
    """

    def __init__(self, dialect: Dialect):
        self.dialect = dialect
        self.where = WhereClauseComposer(dialect)
        self.terminator = get_settings().statement_terminator

    def build_insert_query(self, entity: Any) -> str:
        """
        Build an INSERT statement from an entity instance.

        Only insertable columns are listed, in declaration order. A generated
        primary key without a value is left to the database.

        Raises:
            SchemaDerivationError: If no insertable column remains
        """
        table = describe_populated(entity)
        columns = table.insertable_columns()
        if not columns:
            raise SchemaDerivationError(
                f"Entity for table '{table.name}' has no insertable columns",
                entity=type(entity).__name__,
            )

        column_list = self.dialect.quote_identifiers(c.name for c in columns)
        value_list = self.dialect.quote_values(c.value for c in columns)
        sql = (
            f"INSERT INTO {self.dialect.quote_identifier(table.name)} "
            f"({column_list}) VALUES ({value_list})"
        )
        return self._finish("insert", table, sql)

    def build_select_query(
        self,
        entity_cls: type,
        columns: Optional[Sequence[str]] = None,
        where: Optional[Sequence[WhereGroup]] = None,
    ) -> str:
        """
        Build a SELECT statement for an entity class.

        Args:
            entity_cls: Registered entity class
            columns: Column names to select, in output order (default ``*``);
                a single name may be passed as a plain string
            where: Where groups, AND within a group and OR across groups

        Raises:
            ColumnNotFoundError: If a selected or filtered column does not exist
        """
        table = describe_empty(entity_cls)
        if isinstance(columns, str):
            columns = [columns]
        try:
            if columns:
                selected = self.dialect.quote_identifiers(
                    table.get_column(name).name for name in columns
                )
            else:
                selected = "*"
            clause = self.where.compose(table, where)
        except ColumnNotFoundError as e:
            logger.warning(
                "sql.column_not_found",
                statement="select",
                table=table.name,
                column=e.column,
            )
            raise

        sql = f"SELECT {selected} FROM {self.dialect.quote_identifier(table.name)}"
        if clause:
            sql = f"{sql} WHERE {clause}"
        return self._finish("select", table, sql)

    def build_update_query(self, entity: Any) -> str:
        """
        Build an UPDATE statement targeting the entity's primary key.

        Every non-key column is assigned, in declaration order.

        Raises:
            SchemaDerivationError: If the entity does not declare exactly one key column
            ColumnInvalidError: If the key column has no value
        """
        table = describe_populated(entity)
        pk = self._require_primary_key(table, "update")

        assignments = ", ".join(
            self._assignment(c) for c in table.non_primary_key_columns()
        )
        if not assignments:
            raise SchemaDerivationError(
                f"Table '{table.name}' has no columns to update",
                entity=type(entity).__name__,
            )
        sql = (
            f"UPDATE {self.dialect.quote_identifier(table.name)} "
            f"SET {assignments} WHERE ({self._assignment(pk)})"
        )
        return self._finish("update", table, sql)

    def build_delete_query(self, entity: Any) -> str:
        """
        Build a DELETE statement targeting the entity's primary key.

        Raises:
            SchemaDerivationError: If the entity does not declare exactly one key column
            ColumnInvalidError: If the key column has no value
        """
        table = describe_populated(entity)
        pk = self._require_primary_key(table, "delete")
        sql = (
            f"DELETE FROM {self.dialect.quote_identifier(table.name)} "
            f"WHERE ({self._assignment(pk)})"
        )
        return self._finish("delete", table, sql)

    def _assignment(self, column: EntityColumn) -> str:
        return (
            f"{self.dialect.quote_identifier(column.name)} = "
            f"{self.dialect.quote_value(column.value)}"
        )

    def _require_primary_key(self, table: EntityTable, statement: str) -> EntityColumn:
        keys: List[EntityColumn] = table.primary_key_columns()
        if len(keys) != 1:
            logger.warning(
                "sql.primary_key_count_invalid",
                statement=statement,
                table=table.name,
                primary_keys=[k.name for k in keys],
            )
            raise SchemaDerivationError(
                f"{statement.upper()} on '{table.name}' requires exactly one primary "
                f"key column, found {len(keys)}",
                entity=table.name,
            )

        pk = keys[0]
        if pk.value.is_null:
            logger.warning(
                "sql.primary_key_missing",
                statement=statement,
                table=table.name,
                column=pk.name,
            )
            raise ColumnInvalidError(
                f"{statement.upper()} on '{table.name}' requires a value for "
                f"primary key '{pk.name}'",
                table=table.name,
                column=pk.name,
            )
        return pk

    def _finish(self, statement: str, table: EntityTable, sql: str) -> str:
        logger.debug(
            "sql.statement_built",
            statement=statement,
            table=table.name,
            dialect=self.dialect.name,
        )
        return f"{sql}{self.terminator}"
