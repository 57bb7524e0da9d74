"""SQL clause composers."""

from .where import WhereClauseComposer, WhereGroup

__all__ = [
    "WhereClauseComposer",
    "WhereGroup",
]
