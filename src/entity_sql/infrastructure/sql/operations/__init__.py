"""Statement builders."""

from .ddl import DdlQueryBuilder
from .dml import QueryBuilder

__all__ = [
    "DdlQueryBuilder",
    "QueryBuilder",
]
