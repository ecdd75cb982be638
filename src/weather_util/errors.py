"""
Error taxonomy for weather payload validation.

Every failure raised while constructing a scalar or parsing a provider
payload derives from ``WeatherDataError``. None of them are retriable:
a payload that fails once will fail again.

    WeatherDataError (ValueError)
    ├── InvalidRange         scalar outside its physical bounds
    ├── MalformedPayload     structural deserialization failure
    │   └── MissingField     required field absent
    └── EmptyConditionList   ``weather`` list present but empty

They subclass ``ValueError`` so pydantic reports them as ``value_error``
entries when raised from validators (see ``weather_util.parsing``).
"""

from __future__ import annotations


class WeatherDataError(ValueError):
    """Base class for weather data validation failures."""


class InvalidRange(WeatherDataError):  # noqa: N818
    """A scalar value lies outside its physical bounds (or is NaN/inf)."""


class MalformedPayload(WeatherDataError):  # noqa: N818
    """The payload does not have the expected structure or types."""


class MissingField(MalformedPayload):  # noqa: N818
    """A required field is absent from the payload."""

    def __init__(self, field: str) -> None:
        super().__init__(f"missing required field: {field}")
        self.field = field


class EmptyConditionList(WeatherDataError):  # noqa: N818
    """The ``weather`` condition list is empty."""

    def __init__(self) -> None:
        super().__init__("weather condition list is empty")
