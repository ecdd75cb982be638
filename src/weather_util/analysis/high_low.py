"""Fold forecast samples into one (high, low) temperature pair per local day.

The provider's forecast is a list of 3-hourly samples. Displaying it as a
daily summary needs each sample's *local* calendar date, which depends on the
location's UTC offset, so the offset is passed in alongside the samples
rather than read from each one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from weather_util.timestamp import local_date, validate_offset
from weather_util.units import Temperature  # noqa: TC001

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from weather_util.schemas import ForecastSample, ForecastSet


class HighLow(NamedTuple):
    """Daily temperature bounds."""

    high: Temperature
    low: Temperature


def get_high_low(
    samples: Iterable[ForecastSample],
    utc_offset: int,
) -> dict[date, HighLow]:
    """Reduce forecast samples to per-day high/low bounds.

    Each sample's date is taken in local time at ``utc_offset``. A new date is
    seeded with the sample's (temp_max, temp_min); later samples for that date
    only replace a bound when strictly beyond it, so ties keep the existing
    value. Samples may arrive out of order within a date.

    Args:
        samples: Forecast samples in provider order.
        utc_offset: Location offset in seconds east of UTC.

    Returns:
        Dict mapping local date -> ``HighLow``, iterating in ascending date
        order. Empty when there are no samples.
    """
    validate_offset(utc_offset)

    bounds: dict[date, HighLow] = {}
    for sample in samples:
        day = local_date(sample.dt, utc_offset)
        sample_high = sample.main.temp_max
        sample_low = sample.main.temp_min

        current = bounds.get(day)
        if current is None:
            bounds[day] = HighLow(high=sample_high, low=sample_low)
            continue

        high = sample_high if sample_high > current.high else current.high
        low = sample_low if sample_low < current.low else current.low
        if high is not current.high or low is not current.low:
            bounds[day] = HighLow(high=high, low=low)

    return dict(sorted(bounds.items()))


def forecast_high_low(forecast: ForecastSet) -> dict[date, HighLow]:
    """Per-day high/low for a ``ForecastSet``, using its city's UTC offset."""
    return get_high_low(forecast.samples, forecast.utc_offset)
