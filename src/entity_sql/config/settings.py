"""
Configuration management for entity-sql.

This module provides environment-based configuration using Pydantic BaseSettings.
Only rendering concerns are configurable: the default dialect, the default
length of bounded text columns, the statement terminator and the log level.
"""

import os
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger(__name__)

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("ENTITY_SQL_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Fields (environment variable names):
    - LOG_LEVEL: Logging level (uppercase)
    - ENTITY_SQL_DIALECT: Dialect used when none is requested explicitly
    - ENTITY_SQL_DEFAULT_TEXT_LENGTH: Length substituted into bounded text types
    - ENTITY_SQL_STATEMENT_TERMINATOR: Separator appended to every statement
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    dialect: str = Field(
        default="h2",
        validation_alias="ENTITY_SQL_DIALECT",
        description="Default SQL dialect name",
    )
    default_text_length: int = Field(
        default=255,
        gt=0,
        validation_alias="ENTITY_SQL_DEFAULT_TEXT_LENGTH",
        description="Length used for text columns that declare none",
    )
    statement_terminator: str = Field(
        default=";",
        validation_alias="ENTITY_SQL_STATEMENT_TERMINATOR",
        description="Statement separator appended to rendered SQL",
    )

    @field_validator("dialect")
    @classmethod
    def normalize_dialect(cls, value: str) -> str:
        """Dialect names are matched case-insensitively."""
        return value.strip().lower()

    model_config = SettingsConfigDict(
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded once and reused across
    the application lifecycle.

    Returns:
        Settings instance with loaded configuration
    """
    settings = Settings()
    logger.debug(
        "configuration.loaded",
        dialect=settings.dialect,
        default_text_length=settings.default_text_length,
    )
    return settings
