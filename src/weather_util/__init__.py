"""Weather Util - current conditions and daily forecast from OpenWeatherMap.

Architecture::

    units.py        Validated scalars (Latitude, Longitude, Temperature in Kelvin)
    timestamp.py    Epoch seconds <-> UTC datetimes, local rendering at a UTC offset
    schemas.py      Pydantic models for the current-weather and forecast payloads
    parsing.py      Payload -> model, translating failures into errors.py
    analysis/       Pure reductions (forecast samples -> daily high/low)
    renderers/      Models -> display lines, written into a caller-owned sink
    datasources/    OpenWeatherMap HTTP client
    config.py       pydantic-settings configuration (env, .env, config.env)

Data flow: datasources -> parsing (validation) -> analysis -> renderers
"""

__version__ = "0.3.1"
__author__ = "Daniel Boline"

from weather_util.analysis import HighLow, forecast_high_low, get_high_low
from weather_util.config import Settings
from weather_util.errors import (
    EmptyConditionList,
    InvalidRange,
    MalformedPayload,
    MissingField,
    WeatherDataError,
)
from weather_util.parsing import parse_weather_data, parse_weather_forecast
from weather_util.schemas import ForecastSample, ForecastSet, WeatherSnapshot
from weather_util.units import Latitude, Longitude, Temperature

__all__ = [
    "EmptyConditionList",
    "ForecastSample",
    "ForecastSet",
    "HighLow",
    "InvalidRange",
    "Latitude",
    "Longitude",
    "MalformedPayload",
    "MissingField",
    "Settings",
    "Temperature",
    "WeatherDataError",
    "WeatherSnapshot",
    "__version__",
    "forecast_high_low",
    "get_high_low",
    "parse_weather_data",
    "parse_weather_forecast",
]
