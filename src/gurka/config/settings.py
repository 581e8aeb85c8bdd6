"""Runtime configuration loaded with Pydantic Settings.

Values come from ``GURKA_*`` environment variables or a ``.env`` file in the
working directory. Every field has a default, so a bare invocation needs no
configuration at all.

Example:
    >>> from gurka.config import get_settings
    >>> get_settings().locations_file
    PosixPath('locations.toml')
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gurka.clients.metno.constants import DEFAULT_USER_AGENT, FORECAST_ENDPOINT

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings for a single gurka run.

    Example .env file:
        GURKA_LOCATIONS_FILE=/home/me/.config/gurka/locations.toml
        GURKA_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="GURKA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    locations_file: Path = Field(
        default=Path("locations.toml"),
        description="TOML file mapping location names to coordinates",
    )
    api_url: str = Field(
        default=FORECAST_ENDPOINT,
        description="Locationforecast endpoint URL",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every forecast request",
    )
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (None waits indefinitely)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for diagnostics written to stderr",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Ensure endpoint starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return level


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the Settings singleton.

    Returns:
        Settings instance loaded from environment variables/.env file.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


__all__ = ["Settings", "get_settings", "reset_settings"]
