"""Application configuration."""

import os
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from photo_album_showcase.adapters.photos_client import (
    DEFAULT_TIMEOUT_SECONDS,
    PHOTOS_URL,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from PHOTOS_* environment variables."""

    api_url: str = PHOTOS_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: LogLevel = "WARNING"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="PHOTOS_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def parse_csv_values(raw: str | None) -> list[str] | None:
    """Split a comma-separated flag value; empty means no filter."""
    if not raw:
        return None
    return raw.split(",")
