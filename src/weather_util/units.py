"""
Validated scalar types: latitude, longitude and temperature.

Each type can only be constructed from an in-range, finite number, so holding
an instance is proof that the value was checked. Inside pydantic models they
deserialize from plain JSON numbers (re-validating on the way in) and
serialize back to plain numbers.

Example::

    >>> Temperature(273.15).fahrenheit()
    32.0
    >>> Latitude(91.0)
    Traceback (most recent call last):
        ...
    weather_util.errors.InvalidRange: 91.0 is not a valid latitude
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic_core import core_schema

from weather_util.errors import InvalidRange, MalformedPayload

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

ABSOLUTE_ZERO_F = -459.67
ABSOLUTE_ZERO_C = -273.15


@dataclass(frozen=True, order=True)
class _BoundedFloat:
    """Immutable float wrapper checked against ``[minimum, maximum]``."""

    minimum: ClassVar[float] = -math.inf
    maximum: ClassVar[float] = math.inf
    label: ClassVar[str] = "value"

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            msg = f"{type(self).__name__} requires a number, got {self.value!r}"
            raise MalformedPayload(msg)
        if not math.isfinite(self.value) or not (self.minimum <= self.value <= self.maximum):
            msg = f"{self.value} is not a valid {self.label}"
            raise InvalidRange(msg)
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def _coerce(cls, raw: Any) -> Any:
        if isinstance(raw, cls):
            return raw
        return cls(raw)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                float, return_schema=core_schema.float_schema()
            ),
        )


class Latitude(_BoundedFloat):
    """Latitude in degrees, -90.0 to 90.0 inclusive."""

    minimum = -90.0
    maximum = 90.0
    label = "latitude"


class Longitude(_BoundedFloat):
    """Longitude in degrees, -180.0 to 180.0 inclusive."""

    minimum = -180.0
    maximum = 180.0
    label = "longitude"


class Temperature(_BoundedFloat):
    """
    Temperature stored in Kelvin, the provider's wire unit.

    Ordering compares the Kelvin value, which makes ``max``/``min`` over
    temperatures well defined for the daily high/low reduction.
    """

    minimum = 0.0
    label = "temperature (Kelvin)"

    @property
    def kelvin(self) -> float:
        """Temperature in Kelvin."""
        return self.value

    def fahrenheit(self) -> float:
        """Temperature in degrees Fahrenheit (K * 9/5 - 459.67)."""
        # Same formula, offset from the freezing point so 273.15 K is exactly 32 F.
        return self.celsius() * 9.0 / 5.0 + 32.0

    def celsius(self) -> float:
        """Temperature in degrees Celsius."""
        return self.value + ABSOLUTE_ZERO_C

    @classmethod
    def from_celsius(cls, celsius: float) -> Temperature:
        """Build a temperature from degrees Celsius."""
        return cls(celsius - ABSOLUTE_ZERO_C)

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> Temperature:
        """Build a temperature from degrees Fahrenheit."""
        return cls((fahrenheit - ABSOLUTE_ZERO_F) * 5.0 / 9.0)
