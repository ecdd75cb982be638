"""
Command-line interface for the application.

Prints current conditions followed by the daily forecast, either fetched from
OpenWeatherMap or rendered from saved JSON payloads (``--file`` /
``--forecast-file``).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import IO, TYPE_CHECKING

from weather_util import __version__
from weather_util.config import Settings, get_settings
from weather_util.datasources.openweather import (
    WeatherAPIError,
    WeatherLocation,
    get_weather_data,
    get_weather_forecast,
)
from weather_util.parsing import parse_weather_data, parse_weather_forecast
from weather_util.renderers.conditions import write_current_conditions
from weather_util.renderers.forecast import write_forecast

if TYPE_CHECKING:
    from weather_util.schemas import ForecastSet, WeatherSnapshot

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-util",
        description="Current conditions and daily forecast from openweathermap.org",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    location = parser.add_argument_group("location (overrides config)")
    location.add_argument("-z", "--zipcode", type=str, default=None, help="Zipcode")
    location.add_argument(
        "-c", "--country-code", type=str, default=None, help="Country code (used with --zipcode)"
    )
    location.add_argument("-n", "--city-name", type=str, default=None, help="City name")
    location.add_argument("--lat", type=float, default=None, help="Latitude (use with --lon)")
    location.add_argument("--lon", type=float, default=None, help="Longitude (use with --lat)")

    parser.add_argument("-k", "--api-key", type=str, default=None, help="OpenWeatherMap API key")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Render a saved current-weather JSON payload instead of fetching",
    )
    parser.add_argument(
        "--forecast-file",
        type=Path,
        default=None,
        help="Render a saved forecast JSON payload instead of fetching",
    )

    return parser


def configure_logging(settings: Settings, *, debug: bool = False) -> None:
    """Configure root logging from settings; ``debug`` forces DEBUG."""
    if debug or settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelNamesMapping().get(settings.log_level.upper(), -1)
        if level < 0:
            msg = f"unknown log level: {settings.log_level!r}"
            raise ValueError(msg)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def resolve_location(args: argparse.Namespace, settings: Settings) -> WeatherLocation:
    """Location from command-line options if any were given, else from settings."""
    from_args = any(
        value is not None for value in (args.zipcode, args.city_name, args.lat, args.lon)
    )
    source: argparse.Namespace | Settings = args if from_args else settings
    return WeatherLocation(
        zipcode=source.zipcode,
        country_code=args.country_code or settings.country_code,
        city_name=source.city_name,
        lat=source.lat,
        lon=source.lon,
    )


def load_offline(
    args: argparse.Namespace,
) -> tuple[WeatherSnapshot | None, ForecastSet | None]:
    """Parse the payload files named by ``--file`` / ``--forecast-file``."""
    snapshot = parse_weather_data(args.file.read_bytes()) if args.file else None
    forecast = (
        parse_weather_forecast(args.forecast_file.read_bytes()) if args.forecast_file else None
    )
    return snapshot, forecast


def load_online(
    args: argparse.Namespace, settings: Settings
) -> tuple[WeatherSnapshot, ForecastSet]:
    """Fetch and validate current weather and forecast for the resolved location."""
    location = resolve_location(args, settings)
    api_key = args.api_key or settings.api_key
    options = {"endpoint": settings.api_endpoint, "path": settings.api_path}
    snapshot = get_weather_data(location, api_key, **options)
    forecast = get_weather_forecast(location, api_key, **options)
    return snapshot, forecast


def render(
    snapshot: WeatherSnapshot | None,
    forecast: ForecastSet | None,
    sink: IO[str],
) -> None:
    """Write current conditions, a blank line, then the forecast."""
    if snapshot is not None:
        write_current_conditions(snapshot, sink)
    if forecast is not None:
        if snapshot is not None:
            sink.write("\n")
        write_forecast(forecast, sink)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        configure_logging(settings, debug=args.debug)
        logger.debug("Settings: %s", settings.model_dump(exclude={"api_key"}))

        if args.file or args.forecast_file:
            snapshot, forecast = load_offline(args)
        else:
            snapshot, forecast = load_online(args, settings)
    except (ValueError, WeatherAPIError, OSError) as exc:
        # ValueError covers WeatherDataError and pydantic's ValidationError
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    render(snapshot, forecast, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
