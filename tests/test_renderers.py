"""Tests for the text renderers."""

from __future__ import annotations

import tempfile
from datetime import date
from io import BytesIO, StringIO
from typing import TYPE_CHECKING, Any

import pytest

from weather_util.analysis.high_low import HighLow
from weather_util.parsing import parse_weather_data, parse_weather_forecast
from weather_util.renderers import is_binary_sink, write_lines
from weather_util.renderers.conditions import (
    current_conditions_lines,
    format_degrees,
    write_current_conditions,
)
from weather_util.renderers.forecast import FORECAST_HEADER, forecast_lines, write_forecast
from weather_util.renderers.weather_utils import ms_to_mph
from weather_util.units import Temperature

if TYPE_CHECKING:
    from pathlib import Path


class TestMsToMph:
    """Wind speed conversion."""

    def test_ten_meters_per_second(self) -> None:
        assert ms_to_mph(10) == pytest.approx(22.37, abs=0.005)
        assert ms_to_mph(10) == 10 * 3600 / 1609.344

    def test_zero(self) -> None:
        assert ms_to_mph(0) == 0.0


class TestWriteLines:
    """Sink handling."""

    def test_text_sink(self) -> None:
        buf = StringIO()
        write_lines(buf, ["a", "b"])
        assert buf.getvalue() == "a\nb\n"

    def test_binary_sink(self) -> None:
        buf = BytesIO()
        write_lines(buf, ["° a", "b"])
        assert buf.getvalue() == "° a\nb\n".encode()

    def test_sink_left_open(self) -> None:
        buf = StringIO()
        write_lines(buf, ["a"])
        assert not buf.closed

    def test_text_mode_spooled_file(self) -> None:
        """Text sinks outside the io.TextIOBase hierarchy still get str."""
        with tempfile.SpooledTemporaryFile(mode="w+") as sink:
            write_lines(sink, ["a"])
            sink.seek(0)
            assert sink.read() == "a\n"

    def test_binary_mode_spooled_file(self) -> None:
        with tempfile.SpooledTemporaryFile(mode="w+b") as sink:
            write_lines(sink, ["a"])
            sink.seek(0)
            assert sink.read() == b"a\n"

    def test_is_binary_sink(self, tmp_path: Path) -> None:
        assert is_binary_sink(BytesIO())
        assert not is_binary_sink(StringIO())
        with (tmp_path / "out.txt").open("ab") as binary:
            assert is_binary_sink(binary)
        with (tmp_path / "out.txt").open("a") as text:
            assert not is_binary_sink(text)


class TestCurrentConditions:
    """Current-conditions block."""

    def test_lines(self, weather_payload: dict[str, Any]) -> None:
        lines = current_conditions_lines(parse_weather_data(weather_payload))

        assert lines == [
            "Current conditions Astoria US",
            "46.19N -123.83E",
            "Last Updated 2020-09-13 05:26:40 -0700",
            "\tTemperature: 41.05 F (5.03 C)",
            "\tRelative Humidity: 52%",
            "\tWind: 300 degrees at 8.05 mph",
            "\tConditions: broken clouds",
            "\tSunrise: 2020-09-13 05:26:40 -0700",
            "\tSunset: 2020-09-13 16:33:20 -0700",
        ]

    def test_sun_times_use_location_offset(self, weather_payload: dict[str, Any]) -> None:
        """Local sunrise/sunset reflect the payload offset, not raw UTC."""
        weather_payload["timezone"] = 3600
        lines = current_conditions_lines(parse_weather_data(weather_payload))
        assert "\tSunrise: 2020-09-13 13:26:40 +0100" in lines
        assert "\tSunset: 2020-09-14 00:33:20 +0100" in lines

    def test_missing_country_and_direction(self, weather_payload: dict[str, Any]) -> None:
        del weather_payload["sys"]["country"]
        del weather_payload["wind"]["deg"]
        weather_payload["wind"]["speed"] = 10

        lines = current_conditions_lines(parse_weather_data(weather_payload))

        assert lines[0] == "Current conditions Astoria"
        assert lines[5] == "\tWind: 0 degrees at 22.37 mph"

    def test_wind_direction_full_precision(self, weather_payload: dict[str, Any]) -> None:
        weather_payload["wind"]["deg"] = 359.99999
        lines = current_conditions_lines(parse_weather_data(weather_payload))
        assert lines[5] == "\tWind: 359.99999 degrees at 8.05 mph"

    def test_write_to_text_sink(self, weather_payload: dict[str, Any]) -> None:
        buf = StringIO()
        write_current_conditions(parse_weather_data(weather_payload), buf)
        output = buf.getvalue()
        assert output.startswith("Current conditions Astoria US\n46.19N")
        assert output.endswith("Sunset: 2020-09-13 16:33:20 -0700\n")

    def test_write_to_binary_sink(self, weather_payload: dict[str, Any]) -> None:
        buf = BytesIO()
        write_current_conditions(parse_weather_data(weather_payload), buf)
        assert b"Temperature: 41.05 F (5.03 C)" in buf.getvalue()


class TestFormatDegrees:
    """Wind direction formatting."""

    def test_whole_value_drops_decimal(self) -> None:
        assert format_degrees(300.0) == "300"

    def test_fraction_kept(self) -> None:
        assert format_degrees(12.3456789) == "12.3456789"


class TestForecast:
    """Daily forecast block."""

    def test_forecast_lines(self) -> None:
        high_low = {
            date(2020, 9, 13): HighLow(high=Temperature(298.15), low=Temperature(273.15)),
        }
        assert forecast_lines(high_low) == [
            "\t2020-09-13\tHigh: 77.0 F / 25.0 C\tLow: 32.0 F / 0.0 C",
        ]

    def test_empty(self) -> None:
        assert forecast_lines({}) == []

    def test_write_forecast(self, forecast_payload: dict[str, Any]) -> None:
        buf = StringIO()
        write_forecast(parse_weather_forecast(forecast_payload), buf)

        lines = buf.getvalue().splitlines()
        assert lines[0] == FORECAST_HEADER
        assert [line.split("\t")[1] for line in lines[1:]] == [
            "2020-09-12",
            "2020-09-13",
            "2020-09-14",
        ]
        assert "High: 77.0 F / 25.0 C" in lines[2]
        assert lines[3].endswith("Low: 50.0 F / 10.0 C")
