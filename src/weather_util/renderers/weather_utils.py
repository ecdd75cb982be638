"""Weather utility functions for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

METERS_PER_MILE = 1609.344
SECONDS_PER_HOUR = 3600


def ms_to_mph(speed: float) -> float:
    """Convert meters per second to miles per hour."""
    return speed * SECONDS_PER_HOUR / METERS_PER_MILE
