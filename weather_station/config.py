from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from weather_station.constants import CITY_NAMES, COUNTRY_CODES


class MissingCredentialError(ValueError):
    """The OpenWeatherMap access key is not configured."""


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "WEATHER_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    # OpenWeatherMap
    openweather_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("WEATHER_OPENWEATHER_API_KEY", "OPENWEATHER_API_KEY"),
    )
    openweather_url: str = "http://api.openweathermap.org/data/2.5/weather"
    lookup_timeout: float = 15.0  # seconds, 0 disables

    # Interaction
    editing_policy: Literal["advance", "toggle"] = "advance"
    countries: list[str] = Field(default_factory=lambda: list(COUNTRY_CODES))
    cities: list[str] = Field(default_factory=lambda: list(CITY_NAMES))
    dump_on_exit: bool = True

    # Logging
    log_dir: str = str(Path.home() / ".weather-station" / "logs")
    log_level: str = "INFO"

    def require_api_key(self) -> str:
        """Return the access key, or raise if it is missing."""
        key = self.openweather_api_key.strip()
        if not key:
            raise MissingCredentialError(
                "OPENWEATHER_API_KEY must be set (or WEATHER_OPENWEATHER_API_KEY)"
            )
        return key


settings = Settings()
