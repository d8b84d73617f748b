"""Shared fixtures: canned lookups and a wired AppState."""
import pytest

from weather_station.app_state import AppState, EditingPolicy
from weather_station.logic.navigator import CandidateList
from weather_station.logic.orchestrator import WeatherOrchestrator
from weather_station.models.record import RecordStore
from weather_station.models.weather import WeatherOutcome


def make_outcome(description: str = "clear sky", temperature: float = 28.0,
                 location_name: str = "Pune") -> WeatherOutcome:
    return WeatherOutcome(
        description=description,
        temperature=temperature,
        humidity=40.0,
        pressure=1012.0,
        wind_speed=3.5,
        location_name=location_name,
    )


class RecordingLookup:
    """Lookup stub that records its calls and returns a fixed result."""

    def __init__(self, result: WeatherOutcome | None = None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    def __call__(self, city: str, country_code: str, api_key: str) -> WeatherOutcome | None:
        self.calls.append((city, country_code, api_key))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def _no_credentials_in_env(monkeypatch):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("WEATHER_OPENWEATHER_API_KEY", raising=False)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def ok_lookup():
    return RecordingLookup(make_outcome())


@pytest.fixture
def failing_lookup():
    return RecordingLookup(None)


@pytest.fixture
def make_state():
    """Factory for an AppState over the default US/GB/IN and five-city lists."""

    def _make(lookup, policy: EditingPolicy = EditingPolicy.ADVANCE) -> AppState:
        orchestrator = WeatherOrchestrator(RecordStore(), "test-key", lookup=lookup)
        return AppState(
            countries=CandidateList(["US", "GB", "IN"]),
            cities=CandidateList(["Buffalo", "Boston", "New York", "Nagpur", "Pune"]),
            orchestrator=orchestrator,
            policy=policy,
        )

    return _make
