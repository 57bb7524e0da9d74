"""SQL dialects and the dialect factory."""

from typing import Dict, List, Optional, Type

from entity_sql.config import get_settings

from .base import DataTypeEntry, DataTypeRegistry, Dialect
from .h2 import H2Dialect
from .mysql import MySQLDialect
from .postgresql import PostgreSQLDialect

_DIALECTS: Dict[str, Type[Dialect]] = {
    H2Dialect.name: H2Dialect,
    PostgreSQLDialect.name: PostgreSQLDialect,
    MySQLDialect.name: MySQLDialect,
}


def create_dialect(name: Optional[str] = None) -> Dialect:
    """Create a dialect by name, defaulting to the configured one.

    Args:
        name: Dialect name ("h2", "postgresql", "mysql"), case-insensitive

    Returns:
        A new dialect instance

    Raises:
        ValueError: If no dialect is registered under the name
    """
    key = (name or get_settings().dialect).strip().lower()
    if key not in _DIALECTS:
        raise ValueError(
            f"Unknown SQL dialect '{key}'. Available: {available_dialects()}"
        )
    return _DIALECTS[key]()


def available_dialects() -> List[str]:
    return sorted(_DIALECTS)


__all__ = [
    "DataTypeEntry",
    "DataTypeRegistry",
    "Dialect",
    "H2Dialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "available_dialects",
    "create_dialect",
]
