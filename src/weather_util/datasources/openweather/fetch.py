"""Current weather and 5 day / 3 hour forecast from OpenWeatherMap."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from weather_util.datasources.openweather.client import (
    DEFAULT_ENDPOINT,
    DEFAULT_PATH,
    FORECAST_COMMAND,
    WEATHER_COMMAND,
    WeatherAPIError,
    build_url,
)
from weather_util.parsing import parse_weather_data, parse_weather_forecast
from weather_util.services.http import session

if TYPE_CHECKING:
    from weather_util.datasources.openweather.client import WeatherLocation
    from weather_util.schemas import ForecastSet, WeatherSnapshot

logger = logging.getLogger(__name__)


def _get_json(
    command: str,
    location: WeatherLocation,
    api_key: str | None,
    endpoint: str,
    path: str,
) -> dict[str, Any]:
    if not api_key:
        # fail early instead of letting the provider answer 401
        msg = "API_KEY not set"
        raise WeatherAPIError(msg)

    url = build_url(command, endpoint, path)
    query = location.query_params()
    logger.debug("GET %s %s", url, query)

    try:
        resp = session.get(url, params={**query, "appid": api_key})
    except requests.RequestException as exc:
        msg = f"Request error for {url}: {exc}"
        raise WeatherAPIError(msg) from exc

    if resp.status_code >= 400:
        snippet = (resp.text or "")[:300]
        msg = f"HTTP {resp.status_code} for {url} ({query}). Body: {snippet}"
        raise WeatherAPIError(msg)

    try:
        data = resp.json()
    except ValueError as exc:
        msg = f"Invalid JSON from {url}: {exc}"
        raise WeatherAPIError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Unexpected API shape from {url}: expected an object, got {type(data).__name__}"
        raise WeatherAPIError(msg)

    logger.debug("Received %d top-level keys from %s", len(data), url)
    return data


def fetch_weather(
    location: WeatherLocation,
    api_key: str | None,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    path: str = DEFAULT_PATH,
) -> dict[str, Any]:
    """
    Fetch the raw current-weather payload.

    Args:
        location: Location query (zipcode, city name, or lat/lon).
        api_key: OpenWeatherMap API key.
        endpoint: API host.
        path: API path prefix, e.g. ``data/2.5/``.

    Returns:
        Raw API response dict.

    Raises:
        WeatherAPIError: On missing key, network, HTTP or JSON failures.
    """
    return _get_json(WEATHER_COMMAND, location, api_key, endpoint, path)


def fetch_forecast(
    location: WeatherLocation,
    api_key: str | None,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    path: str = DEFAULT_PATH,
) -> dict[str, Any]:
    """Fetch the raw 5 day / 3 hour forecast payload. Same arguments as ``fetch_weather``."""
    return _get_json(FORECAST_COMMAND, location, api_key, endpoint, path)


def get_weather_data(
    location: WeatherLocation,
    api_key: str | None,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    path: str = DEFAULT_PATH,
) -> WeatherSnapshot:
    """Fetch and validate current weather."""
    payload = fetch_weather(location, api_key, endpoint=endpoint, path=path)
    return parse_weather_data(payload)


def get_weather_forecast(
    location: WeatherLocation,
    api_key: str | None,
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    path: str = DEFAULT_PATH,
) -> ForecastSet:
    """Fetch and validate the forecast."""
    payload = fetch_forecast(location, api_key, endpoint=endpoint, path=path)
    return parse_weather_forecast(payload)
