"""
Application settings.

Loaded with pydantic-settings from environment variables, then ``.env`` in
the working directory, then ``~/.config/weather_util/config.env``. Variable
names are the upper-cased field names (``API_KEY``, ``ZIPCODE``, ...).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_util.datasources.openweather.client import DEFAULT_ENDPOINT, DEFAULT_PATH

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "weather_util" / "config.env"


class Settings(BaseSettings):
    """Runtime configuration for the CLI and the OpenWeatherMap client."""

    model_config = SettingsConfigDict(
        # later files take priority
        env_file=(DEFAULT_CONFIG_FILE, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "weather-util"
    debug: bool = False
    log_level: str = "WARNING"

    api_key: str | None = None
    api_endpoint: str = DEFAULT_ENDPOINT
    api_path: str = DEFAULT_PATH

    # Default location query
    zipcode: str | None = None
    country_code: str | None = None
    city_name: str | None = None
    lat: float | None = Field(default=None, ge=-90, le=90)
    lon: float | None = Field(default=None, ge=-180, le=180)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached after first load)."""
    return Settings()
