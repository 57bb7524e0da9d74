"""Pytest configuration shared by the entity-sql test suites."""

from __future__ import annotations

from typing import Generator

import pytest

from entity_sql.config import get_settings
from entity_sql.infrastructure.sql.dialects import (
    H2Dialect,
    MySQLDialect,
    PostgreSQLDialect,
)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from the developer's environment and the settings cache."""
    for name in (
        "LOG_LEVEL",
        "ENTITY_SQL_DIALECT",
        "ENTITY_SQL_DEFAULT_TEXT_LENGTH",
        "ENTITY_SQL_STATEMENT_TERMINATOR",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def h2() -> H2Dialect:
    return H2Dialect()


@pytest.fixture
def postgresql() -> PostgreSQLDialect:
    return PostgreSQLDialect()


@pytest.fixture
def mysql() -> MySQLDialect:
    return MySQLDialect()
