"""
SQL module for dialect-driven statement generation.

This module provides reusable utilities for building SQL statements with
proper identifier/value quoting and dialect-specific syntax.
"""

from .clauses.where import WhereClauseComposer
from .core.identifier import quote_identifier, quote_literal
from .dialects import (
    DataTypeEntry,
    Dialect,
    H2Dialect,
    MySQLDialect,
    PostgreSQLDialect,
    create_dialect,
)
from .operations.ddl import DdlQueryBuilder
from .operations.dml import QueryBuilder

__all__ = [
    "quote_identifier",
    "quote_literal",
    "DataTypeEntry",
    "Dialect",
    "H2Dialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "create_dialect",
    "WhereClauseComposer",
    "QueryBuilder",
    "DdlQueryBuilder",
]
