"""Shared fixtures: provider payloads loaded from ``tests/data``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def weather_payload() -> dict[str, Any]:
    """Fresh copy of the current-weather payload (Astoria, OR; UTC-7)."""
    result: dict[str, Any] = json.loads((DATA_DIR / "weather.json").read_text())
    return result


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """Fresh copy of the 6-sample forecast payload spanning three local days."""
    result: dict[str, Any] = json.loads((DATA_DIR / "forecast.json").read_text())
    return result
