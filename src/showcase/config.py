"""
Configuration management for Showcase.
"""

import warnings
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://jsonplaceholder.typicode.com/posts"

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def normalize_log_level(level: str) -> str:
    """Return ``level`` upper-cased, or raise ValueError for an unknown level."""
    normalized = level.strip().upper()
    if normalized not in VALID_LEVELS:
        raise ValueError(f"Invalid log level '{level}'. Must be one of: {', '.join(VALID_LEVELS)}")
    return normalized


class Settings(BaseSettings):
    """Application settings."""

    # Logging settings
    log_level: str = Field(default="INFO", json_schema_extra={"env": "SHOWCASE_LOG_LEVEL"})
    log_file: Optional[str] = Field(default=None, json_schema_extra={"env": "SHOWCASE_LOG_FILE"})

    # Fetch settings
    api_url: str = Field(default=DEFAULT_API_URL, json_schema_extra={"env": "SHOWCASE_API_URL"})
    preview_count: int = Field(default=3, ge=0, json_schema_extra={"env": "SHOWCASE_PREVIEW_COUNT"})

    # Run settings
    delay_ms: int = Field(default=1000, ge=0, json_schema_extra={"env": "SHOWCASE_DELAY_MS"})
    factorial_input: int = Field(default=5, json_schema_extra={"env": "SHOWCASE_FACTORIAL_INPUT"})

    # Demo user
    user_name: str = Field(default="Alice", json_schema_extra={"env": "SHOWCASE_USER_NAME"})
    user_age: int = Field(default=28, json_schema_extra={"env": "SHOWCASE_USER_AGE"})
    user_email: str = Field(default="alice@example.com", json_schema_extra={"env": "SHOWCASE_USER_EMAIL"})
    new_email: str = Field(default="newalice@example.com", json_schema_extra={"env": "SHOWCASE_NEW_EMAIL"})

    model_config = SettingsConfigDict(
        env_prefix="SHOWCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unexpected environment variables
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        return normalize_log_level(value)


def load_settings() -> Settings:
    """Build Settings from the environment, or warn and fall back to defaults.

    A malformed environment must not break imports.
    """
    try:
        return Settings()
    except Exception as e:
        warnings.warn(f"Failed to load settings: {e}. Using default configuration.")
        return Settings.model_construct()


settings: Settings = load_settings()
