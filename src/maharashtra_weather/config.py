"""
Application settings.

Values come from ``MAHARASHTRA_WEATHER_*`` environment variables or a local
``.env`` file; every field has a working default.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI, web page and build flow."""

    model_config = SettingsConfigDict(
        env_prefix="MAHARASHTRA_WEATHER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "maharashtra-weather"
    app_env: str = "development"
    debug: bool = False

    api_port: int = Field(default=8000, ge=1, le=65535)
    default_city: str = "mumbai"
    site_dir: Path = Path("site")

    open_meteo_url: str = "https://api.open-meteo.com/v1/forecast"
    # None leaves the timeout to the transport
    request_timeout: float | None = None


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
