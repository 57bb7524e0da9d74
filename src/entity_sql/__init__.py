"""entity-sql: render SQL statements from declared entity classes.

Usage:
    >>> from entity_sql import QueryBuilder, column, create_dialect, entity
    >>> @entity(name="users")
    ... class Person:
    ...     id: Optional[int] = column(primary_key=True, generated=True)
    ...     email: Optional[str] = column(nullable=False)
    >>> print(QueryBuilder(create_dialect("h2")).build_insert_query(Person(email="a@b.com")))
    INSERT INTO "users" ("email") VALUES ('a@b.com');
"""

from entity_sql.exceptions import (
    ColumnInvalidError,
    ColumnNotFoundError,
    EntitySqlError,
    SchemaDerivationError,
    UnsupportedTypeError,
    ValueRenderError,
)
from entity_sql.infrastructure.schema import (
    EntityColumn,
    EntityTable,
    TypedValue,
    ValueKind,
    column,
    describe_empty,
    describe_populated,
    entity,
    transient,
)
from entity_sql.infrastructure.sql import (
    DdlQueryBuilder,
    Dialect,
    H2Dialect,
    MySQLDialect,
    PostgreSQLDialect,
    QueryBuilder,
    WhereClauseComposer,
    create_dialect,
)

__version__ = "0.1.0"

__all__ = [
    "EntitySqlError",
    "SchemaDerivationError",
    "UnsupportedTypeError",
    "ColumnNotFoundError",
    "ColumnInvalidError",
    "ValueRenderError",
    "ValueKind",
    "TypedValue",
    "EntityColumn",
    "EntityTable",
    "column",
    "transient",
    "entity",
    "describe_empty",
    "describe_populated",
    "Dialect",
    "H2Dialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "create_dialect",
    "WhereClauseComposer",
    "QueryBuilder",
    "DdlQueryBuilder",
]
