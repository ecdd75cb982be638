"""OpenWeatherMap API constants and the location query model.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from weather_util.units import Latitude, Longitude  # noqa: TC001

DEFAULT_ENDPOINT = "api.openweathermap.org"
DEFAULT_PATH = "data/2.5/"

WEATHER_COMMAND = "weather"
FORECAST_COMMAND = "forecast"


class WeatherAPIError(RuntimeError):
    """Transport-level failure talking to the provider (HTTP, JSON, auth)."""


def build_url(command: str, endpoint: str = DEFAULT_ENDPOINT, path: str = DEFAULT_PATH) -> str:
    """Join endpoint, API path and command into a full https URL."""
    path = path.strip("/")
    prefix = f"https://{endpoint.strip('/')}"
    return f"{prefix}/{path}/{command}" if path else f"{prefix}/{command}"


class WeatherLocation(BaseModel):
    """Where to query weather for.

    Give a zipcode (optionally with a country code), a city name, or a
    lat/lon pair. When several are set, zipcode wins over city name, which
    wins over coordinates.
    """

    model_config = ConfigDict(frozen=True)

    zipcode: str | None = None
    country_code: str | None = None
    city_name: str | None = None
    lat: Latitude | None = None
    lon: Longitude | None = None

    @model_validator(mode="after")
    def _check_query(self) -> WeatherLocation:
        if (self.lat is None) != (self.lon is None):
            msg = "lat and lon must be given together"
            raise ValueError(msg)
        if self.zipcode is None and self.city_name is None and self.lat is None:
            msg = "a zipcode, city name, or lat/lon pair is required"
            raise ValueError(msg)
        return self

    def query_params(self) -> dict[str, str]:
        """Provider query parameters selecting this location."""
        if self.zipcode is not None:
            if self.country_code:
                return {"zip": f"{self.zipcode},{self.country_code}"}
            return {"zip": self.zipcode}
        if self.city_name is not None:
            return {"q": self.city_name}
        return {"lat": str(self.lat), "lon": str(self.lon)}
