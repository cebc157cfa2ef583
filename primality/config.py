"""
Benchmark Configuration

Environment-based settings for the primality benchmark. The defaults
reproduce the fixed input and witness count of the benchmark.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NUMBER = 3632514097
DEFAULT_ITERATIONS = 10


class Settings(BaseSettings):
    """Application settings from PRIMALITY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRIMALITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Benchmark input
    number: int = Field(
        default=DEFAULT_NUMBER,
        ge=0,
        description="Integer tested by both algorithms"
    )

    iterations: int = Field(
        default=DEFAULT_ITERATIONS,
        ge=0,
        description="Miller-Rabin witness count (k)"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    log_format: str = Field(
        default="text",
        description="Log format: json or text"
    )

    # Application
    app_name: str = Field(default="primality-bench")

    app_version: str = Field(default="0.1.0")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in ("json", "text"):
            raise ValueError('log_format must be "json" or "text"')
        return fmt


# Global settings instance, created on first use
_settings = None


def get_settings() -> Settings:
    """Get application settings."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
