"""Configuration management for transmem.

Handles the store location, base language, and logging settings using
Pydantic Settings. Supports environment variables and .env files.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Loads configuration from environment variables or .env file.
    All settings can be overridden via environment variables with TRANSMEM_ prefix.

    Example .env file:
        TRANSMEM_DB_PATH=~/translations/appigo-translations.sqlitedb
        TRANSMEM_LOG_LEVEL=INFO

    Example usage:
        >>> settings = Settings()
        >>> print(settings.db_path)
        appigo-translations.sqlitedb
    """

    # Storage
    db_path: str = Field(
        default="appigo-translations.sqlitedb",
        description="Path to the translation memory SQLite file",
        json_schema_extra={"env": "TRANSMEM_DB_PATH"},
    )

    base_language: str = Field(
        default="en",
        description="Language code of the source strings",
        min_length=2,
        json_schema_extra={"env": "TRANSMEM_BASE_LANGUAGE"},
    )

    # Interactive shell
    banner_text: str = Field(
        default="Todo Translation",
        description="Title shown when the interactive shell starts",
        json_schema_extra={"env": "TRANSMEM_BANNER_TEXT"},
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        json_schema_extra={"env": "TRANSMEM_LOG_LEVEL"},
    )

    # Model configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRANSMEM_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging for command-line use.

    Args:
        level: Logging level; defaults to the configured log_level
    """
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(level=level, format="%(message)s", force=True)
