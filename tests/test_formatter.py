"""Tests for log-pane text."""
import pytest

from tests.conftest import make_outcome
from weather_station.formatter import format_outcome, format_pick, format_record, temperature_symbol
from weather_station.logic.classify import DisplayTag
from weather_station.models.record import Record
from weather_station.models.weather import WeatherOutcome


@pytest.mark.parametrize("celsius,symbol", [
    (-5.0, "🥶"), (0.0, "☁️"), (18.0, "⛅️"), (28.0, "🌤️"), (35.0, "🔥"),
])
def test_temperature_symbol(celsius, symbol):
    assert temperature_symbol(celsius) == symbol


def test_format_outcome():
    text = format_outcome(make_outcome("clear sky", 28.04))
    lines = text.splitlines()
    assert lines[0] == "Weather in Pune: clear sky 🌤️"
    assert "> Temperature: 28.0°C" in lines[1]
    assert "> Humidity: 40.0%" in lines[2]
    assert "> Pressure: 1012.0 hPa" in lines[3]
    assert "> Wind Speed: 3.5 m/s" in lines[4]


def test_format_failed_record():
    record = Record(country="XX", city="Nowhere", outcome=WeatherOutcome.failed(), tag=DisplayTag.ERROR)
    assert format_record(record).startswith("Weather in : ERR: Check the input again ☁️")
    assert format_pick(record) == "Nowhere, XX"
