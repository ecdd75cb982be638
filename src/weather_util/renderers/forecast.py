"""Daily forecast high/low text block."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from weather_util.analysis.high_low import forecast_high_low
from weather_util.renderers import write_lines

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import date

    from weather_util.analysis.high_low import HighLow
    from weather_util.schemas import ForecastSet

FORECAST_HEADER = "Forecast:"


def forecast_lines(high_low: Mapping[date, HighLow]) -> list[str]:
    """One tab-indented line per day, in the mapping's (ascending date) order."""
    return [
        f"\t{day.isoformat()}"
        f"\tHigh: {bounds.high.fahrenheit():0.1f} F / {bounds.high.celsius():0.1f} C"
        f"\tLow: {bounds.low.fahrenheit():0.1f} F / {bounds.low.celsius():0.1f} C"
        for day, bounds in high_low.items()
    ]


def write_forecast(forecast: ForecastSet, sink: IO[str] | IO[bytes]) -> None:
    """Reduce ``forecast`` to daily bounds and write the block into ``sink``."""
    write_lines(sink, [FORECAST_HEADER, *forecast_lines(forecast_high_low(forecast))])
