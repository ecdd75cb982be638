"""Current-conditions text block."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from weather_util.renderers import write_lines
from weather_util.renderers.weather_utils import ms_to_mph
from weather_util.timestamp import format_local

if TYPE_CHECKING:
    from weather_util.schemas import WeatherSnapshot


def format_degrees(degrees: float) -> str:
    """Full-precision degrees, without a trailing ``.0`` for whole values."""
    return str(int(degrees)) if degrees.is_integer() else str(degrees)


def current_conditions_lines(snapshot: WeatherSnapshot) -> list[str]:
    """
    Build the current-conditions display lines.

    Times are shown in the location's local time (``snapshot.timezone``),
    temperatures in Fahrenheit and Celsius, wind speed in mph.

    Args:
        snapshot: Validated current-weather snapshot.

    Returns:
        Lines without trailing newlines; detail lines are tab-indented.
    """
    offset = snapshot.utc_offset
    place = snapshot.name
    if snapshot.sys.country:
        place = f"{snapshot.name} {snapshot.sys.country}"

    temp = snapshot.main.temp
    wind_deg = snapshot.wind.deg if snapshot.wind.deg is not None else 0.0
    wind_mph = ms_to_mph(snapshot.wind.speed)

    return [
        f"Current conditions {place}",
        f"{snapshot.coord.lat}N {snapshot.coord.lon}E",
        f"Last Updated {format_local(snapshot.dt, offset)}",
        f"\tTemperature: {temp.fahrenheit():0.2f} F ({temp.celsius():0.2f} C)",
        f"\tRelative Humidity: {snapshot.main.humidity}%",
        f"\tWind: {format_degrees(wind_deg)} degrees at {wind_mph:0.2f} mph",
        f"\tConditions: {snapshot.primary_condition.description}",
        f"\tSunrise: {format_local(snapshot.sys.sunrise, offset)}",
        f"\tSunset: {format_local(snapshot.sys.sunset, offset)}",
    ]


def write_current_conditions(snapshot: WeatherSnapshot, sink: IO[str] | IO[bytes]) -> None:
    """Write the current-conditions block into ``sink``."""
    write_lines(sink, current_conditions_lines(snapshot))
