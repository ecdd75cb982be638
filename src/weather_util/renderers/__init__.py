"""Pure rendering functions: validated models -> display text.

All renderers follow the same pattern:
  - ``*_lines()`` takes models (or analysis output) and returns ``list[str]``
    with no side effects.
  - ``write_*()`` writes those lines into a sink the caller owns. Text
    streams receive ``str``, binary streams receive UTF-8 bytes. The sink is
    never closed or retained.

Public API:
  - conditions: current_conditions_lines, write_current_conditions
  - forecast: forecast_lines, write_forecast
  - weather_utils: ms_to_mph
"""

from __future__ import annotations

import io
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def is_binary_sink(sink: IO[str] | IO[bytes]) -> bool:
    """True for byte streams: io binary classes, or any file opened in "b" mode."""
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in str(getattr(sink, "mode", ""))


def write_lines(sink: IO[str] | IO[bytes], lines: Iterable[str]) -> None:
    """Write newline-terminated ``lines`` into a text or binary sink."""
    text = "".join(f"{line}\n" for line in lines)
    if is_binary_sink(sink):
        sink.write(text.encode("utf-8"))  # type: ignore[arg-type]
    else:
        sink.write(text)  # type: ignore[arg-type]
