"""
Domain models for weather util.

Pydantic models for the OpenWeatherMap "current weather" and "5 day / 3 hour
forecast" payloads. Scalars are validated as each field is parsed (see
``weather_util.units`` and ``weather_util.timestamp``), so a constructed
model never holds an out-of-range value. All models are frozen.

Use ``weather_util.parsing`` to build these from raw payloads; it converts
pydantic's ``ValidationError`` into the ``weather_util.errors`` taxonomy.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weather_util.errors import EmptyConditionList
from weather_util.timestamp import EpochTimestamp, UtcOffset  # noqa: TC001
from weather_util.units import Latitude, Longitude, Temperature  # noqa: TC001


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, allow_inf_nan=False)


# =============================================================================
# Current conditions
# =============================================================================


class Coord(_Frozen):
    """Geographic coordinates of the observation."""

    lon: Longitude
    lat: Latitude


class WeatherCond(_Frozen):
    """A single condition descriptor, e.g. ``Clouds`` / ``broken clouds``."""

    main: str
    description: str


class WeatherMain(_Frozen):
    """Main-condition aggregates."""

    temp: Temperature
    feels_like: Temperature
    temp_min: Temperature
    temp_max: Temperature
    pressure: float = Field(..., ge=0, description="Atmospheric pressure, hPa")
    humidity: int = Field(..., ge=0, le=100, description="Relative humidity, %")


class Wind(_Frozen):
    """Wind speed (m/s) and optional direction (degrees)."""

    speed: float = Field(..., ge=0)
    deg: float | None = Field(default=None, ge=0, le=360)


class Sys(_Frozen):
    """Country and sun times."""

    country: str | None = None
    sunrise: EpochTimestamp
    sunset: EpochTimestamp


class WeatherSnapshot(_Frozen):
    """Current weather at one location.

    ``timezone`` is the location's UTC offset in seconds; all local-time
    rendering threads it explicitly.
    """

    coord: Coord
    weather: tuple[WeatherCond, ...]
    base: str | None = None
    main: WeatherMain
    visibility: float | None = None
    wind: Wind
    dt: EpochTimestamp
    sys: Sys
    timezone: UtcOffset
    name: str

    @field_validator("weather")
    @classmethod
    def _require_conditions(cls, value: tuple[WeatherCond, ...]) -> tuple[WeatherCond, ...]:
        if not value:
            raise EmptyConditionList
        return value

    @property
    def primary_condition(self) -> WeatherCond:
        """First (primary) condition descriptor."""
        return self.weather[0]

    @property
    def utc_offset(self) -> int:
        """Location UTC offset in seconds east of UTC."""
        return self.timezone


# =============================================================================
# Forecast
# =============================================================================


class ForecastMain(_Frozen):
    """Temperature aggregate for one forecast sample point."""

    temp: Temperature
    temp_min: Temperature
    temp_max: Temperature
    feels_like: Temperature | None = None
    pressure: float | None = None
    sea_level: float | None = None
    grnd_level: float | None = None
    humidity: int | None = Field(default=None, ge=0, le=100)


class ForecastSample(_Frozen):
    """A forecast sample: an instant plus its temperature aggregate."""

    dt: EpochTimestamp
    main: ForecastMain


class ForecastCity(_Frozen):
    """Forecast location metadata; ``timezone`` is the shared UTC offset."""

    timezone: UtcOffset
    sunrise: EpochTimestamp
    sunset: EpochTimestamp
    name: str | None = None
    country: str | None = None


class ForecastSet(_Frozen):
    """Ordered forecast samples for a single location.

    Serialized under the provider's ``list`` key; exposed as ``samples`` to
    avoid shadowing the builtin.
    """

    samples: tuple[ForecastSample, ...] = Field(..., alias="list")
    city: ForecastCity

    @property
    def utc_offset(self) -> int:
        """Location UTC offset in seconds east of UTC."""
        return self.city.timezone
