"""
Configuration management for doctext.

Uses Pydantic Settings for type-safe configuration loading from environment variables.
Only the callers of the parser (upload adapter and CLI) are configurable;
the parse core itself takes no settings.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Variables use the DOCTEXT_ prefix, e.g. DOCTEXT_MAX_FILE_SIZE_MB=20.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_file_size_mb: float = Field(
        default=50.0,
        ge=0.1,
        le=1024.0,
        description="Maximum accepted upload size in megabytes",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the command line tool",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only level names the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @property
    def max_file_size_bytes(self) -> int:
        """Upload size limit in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once.
    """
    return Settings()
