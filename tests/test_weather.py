from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from weather_cli.errors import ConfigurationError, DecodeError
from weather_cli.weather import ForecastClient

PAYLOAD = {
    "latitude": 40.7,
    "longitude": -74.0,
    "timezone": "America/New_York",
    "currently": {
        "time": 1700000000,
        "summary": "Light Rain",
        "icon": "rain",
        "temperature": 51.3,
        "humidity": 0.87,
        "windSpeed": 7.6,
        "dewPoint": 47.4,
        "uvIndex": 1,
        "visibility": 10,
        "pressure": 1012.6,
    },
    "hourly": {"summary": "Rain until evening.", "icon": "rain"},
    "flags": {"units": "us"},
}


def test_forecast_success():
    http = MagicMock()
    http.get_json.return_value = PAYLOAD
    client = ForecastClient(http=http, api_key="secret")

    forecast = client.get_forecast(40.7, -74.0)

    http.get_json.assert_called_once_with(
        "https://api.darksky.net/forecast/secret/40.7,-74.0", params=None
    )
    assert forecast.timezone == "America/New_York"
    assert forecast.currently.icon == "rain"
    assert forecast.currently.wind_speed == 7.6
    assert forecast.hourly.summary == "Rain until evening."
    assert forecast.minutely is None


def test_forecast_forwards_units():
    http = MagicMock()
    http.get_json.return_value = PAYLOAD
    ForecastClient(http=http, api_key="secret", units="si").get_forecast(1.5, 2.5)

    http.get_json.assert_called_once_with(
        "https://api.darksky.net/forecast/secret/1.5,2.5", params={"units": "si"}
    )


def test_forecast_missing_api_key():
    http = MagicMock()
    with pytest.raises(ConfigurationError, match="DARK_SKY_API_KEY is not set"):
        ForecastClient(http=http, api_key="").get_forecast(0, 0)
    http.get_json.assert_not_called()


def test_forecast_without_current_conditions():
    http = MagicMock()
    http.get_json.return_value = {"timezone": "UTC", "code": 400, "error": "poorly formatted request"}
    with pytest.raises(DecodeError):
        ForecastClient(http=http, api_key="secret").get_forecast(0, 0)
