"""Service configuration with pydantic-settings.

Requires: REDIS_URL
Optional: SERVICE_NAME, LOG_FORMAT, LOG_LEVEL, STORE_TIMEOUT_SECONDS,
STORE_KEY_PREFIX

The CLI reads HANDOVER_API_URL on its own (see handover.cli.client).

Usage:
    from handover.config import get_settings

    settings = get_settings()
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Handover service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Required ===

    redis_url: str = Field(
        ...,
        description="Redis connection URL for the document store",
        examples=["redis://redis:6379/0"],
    )

    # === Optional fields with defaults ===

    # Logging configuration
    service_name: str = Field(
        default="handover",
        description="Service name for structured logging",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # Document store
    store_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Socket timeout for every store call, in seconds",
    )
    store_key_prefix: str = Field(
        default="handover",
        min_length=1,
        description="Prefix for every key written to Redis",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Validates required env vars on first call.
    Raises ValidationError if REDIS_URL is missing.
    """
    return Settings()
