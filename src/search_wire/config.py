"""Centralized configuration for search-wire using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``SEARCH_WIRE_*`` environment variables.

    Decode limits guard against corrupt length prefixes allocating huge
    buffers; everything else tunes logging and output formatting.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_WIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON log lines")

    # Observability
    service_name: str = Field(default="search-wire", min_length=1, description="Service name for traces and metrics")

    # Decode limits
    max_string_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1,
        description="Largest UTF-8 string (in bytes) accepted while decoding",
    )
    max_array_size: int = Field(
        default=65536,
        ge=0,
        description="Largest element count accepted for a length-prefixed array",
    )

    # Document output
    pretty_json: bool = Field(default=False, description="Indent rendered JSON documents by default")

    def get_log_level(self) -> str:
        """Return the log level normalized for the logging module."""
        return self.log_level.strip().upper() or "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
