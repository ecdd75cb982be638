"""
Parse raw provider payloads into validated models.

This is the boundary where pydantic's ``ValidationError`` is translated into
the ``weather_util.errors`` taxonomy. Parsing either returns a complete model
or raises; there is no partial result.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from weather_util.errors import InvalidRange, MalformedPayload, MissingField, WeatherDataError
from weather_util.schemas import ForecastSet, WeatherSnapshot

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = Mapping[str, Any] | str | bytes

# pydantic constraint failures that mean "number outside its bounds"
_RANGE_ERROR_TYPES = frozenset(
    {
        "greater_than",
        "greater_than_equal",
        "less_than",
        "less_than_equal",
        "finite_number",
    }
)


def _location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def translate_validation_error(exc: ValidationError) -> WeatherDataError:
    """Map a pydantic ``ValidationError`` onto the weather error taxonomy.

    The first error pydantic reports decides the result:
      - an error raised by our own validators is returned as-is;
      - a ``missing`` error becomes ``MissingField``;
      - a numeric bound violation becomes ``InvalidRange``;
      - anything else becomes ``MalformedPayload``.
    """
    errors = exc.errors()
    if not errors:
        return MalformedPayload(str(exc))

    first = errors[0]
    where = _location(first["loc"])
    original = first.get("ctx", {}).get("error")
    if isinstance(original, WeatherDataError):
        return original
    if first["type"] == "missing":
        return MissingField(where)
    if first["type"] in _RANGE_ERROR_TYPES:
        return InvalidRange(f"{where}: {first['msg']}")
    return MalformedPayload(f"{where}: {first['msg']}")


def _parse(model: type[ModelT], payload: Payload) -> ModelT:
    try:
        if isinstance(payload, (str, bytes)):
            return model.model_validate_json(payload)
        if not isinstance(payload, Mapping):
            msg = f"expected a JSON object for {model.__name__}, got {type(payload).__name__}"
            raise MalformedPayload(msg)
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        error = translate_validation_error(exc)
        logger.debug("Rejected %s payload: %s", model.__name__, error)
        raise error from exc


def parse_weather_data(payload: Payload) -> WeatherSnapshot:
    """
    Parse a "current weather" payload.

    Args:
        payload: Decoded JSON object, or the raw JSON text/bytes.

    Returns:
        A fully validated ``WeatherSnapshot``.

    Raises:
        MissingField: A required field is absent.
        EmptyConditionList: The ``weather`` list is empty.
        InvalidRange: A scalar is outside its physical bounds.
        MalformedPayload: Any other structural problem (including bad JSON).
    """
    return _parse(WeatherSnapshot, payload)


def parse_weather_forecast(payload: Payload) -> ForecastSet:
    """Parse a "5 day / 3 hour forecast" payload. Raises like ``parse_weather_data``."""
    return _parse(ForecastSet, payload)
