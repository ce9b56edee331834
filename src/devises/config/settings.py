# src/devises/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables with validation and an optional .env file.

Files that USE this module:
- devises.app (loads settings for logging and wiring)
- devises.adapters.providers.currencylayer (API URL, key and timeout)
- devises.adapters.persistence.seed_data (optional dataset override)

Files that this module USES:
- devises.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from pathlib import Path  # Object-oriented filesystem paths
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from devises.shared.validators import validate_access_key  # Validate API access key format

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Local store ---
    database_path: Path = Field(default=Path("./data/currencies.db"), alias="DATABASE_PATH")
    seed_dataset_path: Optional[Path] = Field(default=None, alias="SEED_DATASET_PATH")

    # --- Exchange API ---
    exchange_api_url: str = Field(default="http://apilayer.net/api", alias="EXCHANGE_API_URL")
    exchange_api_key: str = Field(default="", alias="EXCHANGE_API_KEY")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_console: bool = Field(default=True, alias="DEVISES_LOG_CONSOLE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def live_url(self) -> str:
        """Endpoint returning live quotes."""
        return f"{self.exchange_api_url.rstrip('/')}/live"

    @field_validator("exchange_api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate API base URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("EXCHANGE_API_URL must start with http:// or https://")
        return v

    @field_validator("exchange_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format."""
        if not validate_access_key(v):
            raise ValueError("Invalid EXCHANGE_API_KEY format")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level


# Global settings instance
settings = Settings()
