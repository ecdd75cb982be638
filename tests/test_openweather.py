"""Tests for the OpenWeatherMap data source (HTTP is always mocked)."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests
from pydantic import ValidationError

from weather_util.datasources.openweather import (
    WeatherAPIError,
    WeatherLocation,
    build_url,
    fetch_forecast,
    fetch_weather,
    get_weather_data,
    get_weather_forecast,
)
from weather_util.errors import EmptyConditionList
from weather_util.schemas import ForecastSet, WeatherSnapshot

SESSION = "weather_util.datasources.openweather.fetch.session"


def _response(payload: Any, status: int = 200) -> Mock:
    resp = Mock()
    resp.status_code = status
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


class TestBuildUrl:
    """URL assembly from endpoint, path and command."""

    def test_default(self) -> None:
        assert build_url("weather") == "https://api.openweathermap.org/data/2.5/weather"

    def test_custom_endpoint_and_path(self) -> None:
        assert build_url("forecast", "example.com/", "/v3") == "https://example.com/v3/forecast"

    def test_empty_path(self) -> None:
        assert build_url("weather", "example.com", "") == "https://example.com/weather"


class TestWeatherLocation:
    """Location query validation and parameters."""

    def test_zipcode_with_country(self) -> None:
        loc = WeatherLocation(zipcode="97103", country_code="US")
        assert loc.query_params() == {"zip": "97103,US"}

    def test_zipcode_keeps_leading_zero(self) -> None:
        assert WeatherLocation(zipcode="02134").query_params() == {"zip": "02134"}

    def test_city_name(self) -> None:
        assert WeatherLocation(city_name="Astoria,OR,US").query_params() == {"q": "Astoria,OR,US"}

    def test_lat_lon(self) -> None:
        loc = WeatherLocation(lat=46.19, lon=-123.83)
        assert loc.query_params() == {"lat": "46.19", "lon": "-123.83"}

    def test_zipcode_wins_over_city(self) -> None:
        loc = WeatherLocation(zipcode="97103", city_name="Astoria")
        assert loc.query_params() == {"zip": "97103"}

    def test_requires_a_query(self) -> None:
        with pytest.raises(ValidationError):
            WeatherLocation()

    def test_lat_without_lon(self) -> None:
        with pytest.raises(ValidationError):
            WeatherLocation(lat=46.19)

    def test_lat_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            WeatherLocation(lat=100.0, lon=0.0)


class TestFetch:
    """Raw fetch functions."""

    def test_fetch_weather_params(self, weather_payload: dict[str, Any]) -> None:
        with patch(SESSION) as mock_session:
            mock_session.get.return_value = _response(weather_payload)

            result = fetch_weather(WeatherLocation(zipcode="97103", country_code="US"), "KEY")

            assert result == weather_payload
            mock_session.get.assert_called_once_with(
                "https://api.openweathermap.org/data/2.5/weather",
                params={"zip": "97103,US", "appid": "KEY"},
            )

    def test_fetch_forecast_url(self, forecast_payload: dict[str, Any]) -> None:
        with patch(SESSION) as mock_session:
            mock_session.get.return_value = _response(forecast_payload)

            fetch_forecast(WeatherLocation(city_name="Astoria"), "KEY", endpoint="example.com")

            url = mock_session.get.call_args[0][0]
            assert url == "https://example.com/data/2.5/forecast"

    def test_missing_api_key(self) -> None:
        with patch(SESSION) as mock_session, pytest.raises(WeatherAPIError, match="API_KEY"):
            fetch_weather(WeatherLocation(city_name="Astoria"), None)
        mock_session.get.assert_not_called()

    def test_http_error(self) -> None:
        with patch(SESSION) as mock_session:
            mock_session.get.return_value = _response({"cod": 401, "message": "bad key"}, 401)
            with pytest.raises(WeatherAPIError, match="HTTP 401"):
                fetch_weather(WeatherLocation(city_name="Astoria"), "KEY")

    def test_request_exception_wrapped(self) -> None:
        with patch(SESSION) as mock_session:
            mock_session.get.side_effect = requests.ConnectionError("boom")
            with pytest.raises(WeatherAPIError, match="Request error") as excinfo:
                fetch_weather(WeatherLocation(city_name="Astoria"), "KEY")
            assert isinstance(excinfo.value.__cause__, requests.ConnectionError)

    def test_invalid_json(self) -> None:
        with patch(SESSION) as mock_session:
            resp = _response(None)
            resp.json.side_effect = ValueError("no json")
            mock_session.get.return_value = resp
            with pytest.raises(WeatherAPIError, match="Invalid JSON"):
                fetch_weather(WeatherLocation(city_name="Astoria"), "KEY")

    def test_non_object_json(self) -> None:
        with patch(SESSION) as mock_session:
            mock_session.get.return_value = _response([1, 2])
            with pytest.raises(WeatherAPIError, match="Unexpected API shape"):
                fetch_weather(WeatherLocation(city_name="Astoria"), "KEY")


class TestGetModels:
    """Fetch + parse wrappers."""

    def test_get_weather_data(self, weather_payload: dict[str, Any]) -> None:
        with patch(SESSION) as mock_session:
            mock_session.get.return_value = _response(weather_payload)
            snapshot = get_weather_data(WeatherLocation(lat=46.19, lon=-123.83), "KEY")
        assert isinstance(snapshot, WeatherSnapshot)
        assert snapshot.name == "Astoria"

    def test_get_weather_forecast(self, forecast_payload: dict[str, Any]) -> None:
        with patch(SESSION) as mock_session:
            mock_session.get.return_value = _response(forecast_payload)
            forecast = get_weather_forecast(WeatherLocation(city_name="Astoria"), "KEY")
        assert isinstance(forecast, ForecastSet)
        assert len(forecast.samples) == 6

    def test_validation_errors_propagate(self, weather_payload: dict[str, Any]) -> None:
        weather_payload["weather"] = []
        with patch(SESSION) as mock_session:
            mock_session.get.return_value = _response(weather_payload)
            with pytest.raises(EmptyConditionList):
                get_weather_data(WeatherLocation(city_name="Astoria"), "KEY")
