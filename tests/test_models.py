from __future__ import annotations

import json

import pytest

from weather_cli.errors import DecodeError
from weather_cli.models import Forecast, GoogleGeocodeResponse, decode


def _forecast(currently: dict, **extra) -> Forecast:
    return Forecast.from_payload({"timezone": "UTC", "currently": currently, **extra})


def test_missing_numbers_default_to_zero():
    current = _forecast({"time": 1, "icon": "fog"}).currently
    assert current.temperature == 0.0
    assert current.humidity == 0.0
    assert current.summary == ""


def test_camel_case_fields_are_read():
    current = _forecast({"time": 1, "windSpeed": 7.6, "dewPoint": 40.1, "uvIndex": 2}).currently
    assert current.wind_speed == 7.6
    assert current.dew_point == 40.1
    assert current.uv_index == 2.0


def test_time_is_required():
    with pytest.raises(DecodeError, match="currently.time"):
        _forecast({"icon": "fog"})


def test_non_numeric_field_is_rejected():
    with pytest.raises(DecodeError, match="windSpeed"):
        _forecast({"time": 1, "windSpeed": "fast"})


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_numbers_are_rejected(literal):
    # requests' Response.json() accepts these JavaScript literals
    payload = json.loads('{"timezone": "UTC", "currently": {"time": 1, "windSpeed": %s}}' % literal)
    with pytest.raises(DecodeError, match="windSpeed"):
        Forecast.from_payload(payload)


def test_units_default_to_us():
    forecast = _forecast({"time": 0})
    assert forecast.units == "us"
    assert forecast.daily is None


def test_units_from_flags():
    assert _forecast({"time": 0}, flags={"units": "si"}).units == "si"


def test_missing_timezone():
    with pytest.raises(DecodeError, match="timezone"):
        Forecast.from_payload({"currently": {"time": 0}})


def test_result_items_must_be_objects():
    with pytest.raises(DecodeError, match="results"):
        decode(GoogleGeocodeResponse, {"status": "OK", "results": ["x"]}, "geocoding")
