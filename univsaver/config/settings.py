"""
Configuration Management for uNivUSaver

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Nothing here changes what a command does to the data; these settings
only shape how the console output and the logs look.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from univsaver.models.transaction import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_DATETIME_FORMAT,
)


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from UNIVSAVER_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="UNIVSAVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Identity
    app_name: str = Field(
        default="uNivUSaver",
        description="Name shown in the greeting"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG logging)"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level for the structured logs written to stderr"
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON instead of key=value console lines"
    )

    # Console output
    output_prefix: str = Field(
        default="\t",
        description="Prefix written before every feedback line"
    )
    separator: str = Field(
        default="-------------------------------------",
        description="Line printed above and below every command result"
    )
    currency_symbol: str = Field(
        default=DEFAULT_CURRENCY_SYMBOL,
        max_length=5,
        description="Symbol shown in front of amounts"
    )

    # Date handling
    date_format: str = Field(
        default="%Y-%m-%d",
        description="strptime format for dates (d/, f/, t/)"
    )
    datetime_format: str = Field(
        default=DEFAULT_DATETIME_FORMAT,
        description="strptime format for a date with a time of day (d/)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, taking debug mode into account."""
        if self.debug_mode:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return AppSettings()
