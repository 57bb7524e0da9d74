"""
SQL identifier and literal quoting utilities.

Provides functions for wrapping table/column names and text literals in their
delimiters. Embedded delimiters are escaped by doubling them, so no rendered
name or value can terminate its own quoting.
"""

from typing import Iterable


def quote_identifier(name: str, delimiter: str = '"') -> str:
    """
    Quote a SQL identifier (table or column name).

    Args:
        name: The identifier to quote
        delimiter: Identifier delimiter ('"' for ANSI, '`' for MySQL)

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("nick_name")
        '"nick_name"'
        >>> quote_identifier('column"name')
        '"column""name"'
        >>> quote_identifier("users", delimiter="`")
        '`users`'
    """
    escaped = name.replace(delimiter, delimiter * 2)
    return f"{delimiter}{escaped}{delimiter}"


def quote_literal(value: object, delimiter: str = "'") -> str:
    """
    Quote a text literal.

    Examples:
        >>> quote_literal("Ann")
        "'Ann'"
        >>> quote_literal("O'Brien")
        "'O''Brien'"
    """
    escaped = str(value).replace(delimiter, delimiter * 2)
    return f"{delimiter}{escaped}{delimiter}"


def join_sql(parts: Iterable[str], separator: str = ", ") -> str:
    """Join already-rendered SQL fragments."""
    return separator.join(parts)
