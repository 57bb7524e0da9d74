"""Core SQL utilities package."""

from .identifier import join_sql, quote_identifier, quote_literal

__all__ = [
    "quote_identifier",
    "quote_literal",
    "join_sql",
]
