"""
Timestamp adapter: epoch seconds <-> UTC datetimes, and local rendering.

Instants are always UTC-aware ``datetime`` objects. The UTC offset belongs to
the *location* (the payload's ``timezone`` field), so it is passed in
explicitly wherever local wall-clock time is needed rather than stored on
each instant. Nothing here reads the clock.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, PlainSerializer, PlainValidator, StrictInt

from weather_util.errors import InvalidRange, MalformedPayload

#: Largest plausible UTC offset magnitude (+/-18 hours), in seconds.
MAX_UTC_OFFSET = 18 * 3600

LOCAL_FORMAT = "%Y-%m-%d %H:%M:%S %z"


def from_epoch(seconds: int) -> datetime:
    """Convert integer epoch seconds to a UTC datetime."""
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        msg = f"epoch timestamp must be an integer, got {seconds!r}"
        raise MalformedPayload(msg)
    try:
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        msg = f"{seconds} is not a representable epoch timestamp"
        raise InvalidRange(msg) from exc


def to_epoch(instant: datetime) -> int:
    """Convert an aware datetime back to integer epoch seconds."""
    return int(instant.timestamp())


def validate_offset(offset: int) -> int:
    """
    Check a UTC offset (seconds east of UTC) is within +/-18 hours.

    Raises:
        InvalidRange: If the magnitude exceeds ``MAX_UTC_OFFSET``.
    """
    if abs(offset) > MAX_UTC_OFFSET:
        msg = f"{offset} seconds is not a valid UTC offset"
        raise InvalidRange(msg)
    return offset


def fixed_offset(offset: int) -> timezone:
    """Build a fixed-offset tzinfo from seconds east of UTC."""
    return timezone(timedelta(seconds=validate_offset(offset)))


def to_local(instant: datetime, offset: int) -> datetime:
    """Render a UTC instant as local wall-clock time at ``offset``."""
    return instant.astimezone(fixed_offset(offset))


def local_date(instant: datetime, offset: int) -> date:
    """Calendar date of ``instant`` at ``offset``."""
    return to_local(instant, offset).date()


def format_local(instant: datetime, offset: int) -> str:
    """Display string for ``instant`` at ``offset``, e.g. ``2020-09-13 05:26:40 -0700``."""
    return to_local(instant, offset).strftime(LOCAL_FORMAT)


def _parse_epoch(raw: Any) -> datetime:
    if isinstance(raw, datetime):
        if raw.tzinfo is None:
            msg = f"naive datetime {raw!r} is ambiguous; expected epoch seconds"
            raise MalformedPayload(msg)
        return raw.astimezone(UTC)
    return from_epoch(raw)


#: Pydantic field type: epoch seconds on the wire, UTC datetime in Python.
EpochTimestamp = Annotated[
    datetime,
    PlainValidator(_parse_epoch),
    PlainSerializer(to_epoch, return_type=int),
]

#: Pydantic field type: signed integer UTC offset in seconds, bounded to +/-18 hours.
UtcOffset = Annotated[StrictInt, AfterValidator(validate_offset)]
