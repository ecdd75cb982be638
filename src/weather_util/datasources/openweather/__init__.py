"""OpenWeatherMap data source.

Fetches current conditions and the 5 day / 3 hour forecast (API key required).

Public API:
  - client: WeatherLocation, WeatherAPIError, API constants
  - fetch: fetch_weather / fetch_forecast (raw dicts),
           get_weather_data / get_weather_forecast (validated models)
"""

from weather_util.datasources.openweather.client import (
    DEFAULT_ENDPOINT,
    DEFAULT_PATH,
    WeatherAPIError,
    WeatherLocation,
    build_url,
)
from weather_util.datasources.openweather.fetch import (
    fetch_forecast,
    fetch_weather,
    get_weather_data,
    get_weather_forecast,
)

__all__ = [
    "DEFAULT_ENDPOINT",
    "DEFAULT_PATH",
    "WeatherAPIError",
    "WeatherLocation",
    "build_url",
    "fetch_forecast",
    "fetch_weather",
    "get_weather_data",
    "get_weather_forecast",
]
