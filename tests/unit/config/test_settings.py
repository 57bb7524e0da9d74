"""Unit tests for entity-sql settings."""

import pytest
from pydantic import ValidationError

from entity_sql.config import get_settings


@pytest.mark.unit
class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.dialect == "h2"
        assert settings.default_text_length == 255
        assert settings.statement_terminator == ";"
        assert settings.LOG_LEVEL == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ENTITY_SQL_DIALECT", " MySQL ")
        monkeypatch.setenv("ENTITY_SQL_DEFAULT_TEXT_LENGTH", "32")
        settings = get_settings()
        assert settings.dialect == "mysql"
        assert settings.default_text_length == 32

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()

    def test_invalid_length(self, monkeypatch):
        """Lengths must be positive."""
        monkeypatch.setenv("ENTITY_SQL_DEFAULT_TEXT_LENGTH", "0")
        with pytest.raises(ValidationError):
            get_settings()
