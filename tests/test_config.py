"""Tests for Settings and the credential check."""
import pytest

from weather_station.config import MissingCredentialError, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("OPENWEATHER_API_KEY", "WEATHER_OPENWEATHER_API_KEY",
                 "WEATHER_EDITING_POLICY", "WEATHER_COUNTRIES", "WEATHER_LOOKUP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = Settings(_env_file=None)
    assert cfg.openweather_api_key == ""
    assert cfg.editing_policy == "advance"
    assert cfg.countries == ["US", "GB", "IN"]
    assert cfg.cities == ["Buffalo", "Boston", "New York", "Nagpur", "Pune"]
    assert cfg.lookup_timeout == 15.0
    assert cfg.openweather_url.endswith("/data/2.5/weather")


def test_plain_openweather_env_var(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "from-env")
    assert Settings(_env_file=None).require_api_key() == "from-env"


def test_prefixed_env_var(monkeypatch):
    monkeypatch.setenv("WEATHER_OPENWEATHER_API_KEY", "prefixed")
    assert Settings(_env_file=None).openweather_api_key == "prefixed"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WEATHER_EDITING_POLICY", "toggle")
    monkeypatch.setenv("WEATHER_COUNTRIES", '["FR", "DE"]')
    monkeypatch.setenv("WEATHER_LOOKUP_TIMEOUT", "2.5")
    cfg = Settings(_env_file=None)
    assert cfg.editing_policy == "toggle"
    assert cfg.countries == ["FR", "DE"]
    assert cfg.lookup_timeout == 2.5


def test_env_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text("OPENWEATHER_API_KEY=dotenv-key\nWEATHER_DUMP_ON_EXIT=false\n")
    cfg = Settings(_env_file=env)
    assert cfg.openweather_api_key == "dotenv-key"
    assert cfg.dump_on_exit is False


@pytest.mark.parametrize("key", ["", "  "])
def test_missing_key_raises(key):
    with pytest.raises(MissingCredentialError, match="OPENWEATHER_API_KEY"):
        Settings(_env_file=None, openweather_api_key=key).require_api_key()


def test_key_is_trimmed():
    assert Settings(_env_file=None, openweather_api_key=" k ").require_api_key() == "k"
