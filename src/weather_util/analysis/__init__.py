"""Pure reductions over validated weather models.

Dependency rule: analysis/ imports from ``weather_util.schemas`` models only.
It never fetches data or writes output.

Modules:
  - high_low: forecast samples + UTC offset -> per-day (high, low) temperatures

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function::

       from weather_util.schemas import ForecastSet

       def summarize_something(forecast: ForecastSet) -> dict[date, Something]:
           ...

2. Rules:
   - Take the UTC offset as an explicit argument when local dates matter.
   - No I/O, no HTTP, no printing.
   - Return dataclasses, named tuples or dicts that renderers can consume.

3. Re-export in ``__init__.py`` and add tests in ``tests/test_{name}.py``.
"""

from weather_util.analysis.high_low import HighLow, forecast_high_low, get_high_low

__all__ = ["HighLow", "forecast_high_low", "get_high_low"]
