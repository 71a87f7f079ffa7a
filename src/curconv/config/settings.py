# src/curconv/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file.

The API key is deliberately not a field here: it is re-read from the
credential store before every request so it can be rotated between commands.

Files that USE this module:
- curconv.app (logging configuration)
- curconv.adapters.providers.exchangerate_api (base URL and HTTP timeout)
- curconv.adapters.persistence.credential_store (config dir and env var name)
- curconv.application.commands (default base currency)

Files that this module USES:
- None
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Level names for log_level validation
from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Exchange rate API ---
    api_base_url: str = Field(
        default="https://v6.exchangerate-api.com/v6", alias="EXCHANGERATE_API_URL"
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Credential ---
    credential_env_var: str = Field(default="API_KEY", alias="CURCONV_CREDENTIAL_ENV")
    config_dir: Optional[Path] = Field(default=None, alias="CURCONV_CONFIG_DIR")

    # --- Commands ---
    default_base_currency: str = Field(default="USD", alias="DEFAULT_BASE_CURRENCY")

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be joined with a single '/'."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("EXCHANGERATE_API_URL must be an http(s) URL")
        return v

    @field_validator("default_base_currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


# Global settings instance
settings = Settings()
