from pydantic import BaseModel, ConfigDict, Field

FAILED_DESCRIPTION = "ERR: Check the input again"


class _Condition(BaseModel):
    description: str


class _Main(BaseModel):
    temp: float
    humidity: float
    pressure: float


class _Wind(BaseModel):
    speed: float


class CurrentWeatherPayload(BaseModel):
    """Subset of the OpenWeatherMap /data/2.5/weather response."""

    weather: list[_Condition] = Field(min_length=1)
    main: _Main
    wind: _Wind
    name: str


class WeatherOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    temperature: float  # °C
    humidity: float  # %
    pressure: float  # hPa
    wind_speed: float  # m/s
    location_name: str
    is_failure: bool = False

    @classmethod
    def from_payload(cls, payload: dict) -> "WeatherOutcome":
        """Parse a raw current-weather payload. Raises ValidationError if malformed."""
        data = CurrentWeatherPayload.model_validate(payload)
        return cls(
            description=data.weather[0].description,
            temperature=data.main.temp,
            humidity=data.main.humidity,
            pressure=data.main.pressure,
            wind_speed=data.wind.speed,
            location_name=data.name,
        )

    @classmethod
    def failed(cls) -> "WeatherOutcome":
        """Sentinel stored when a lookup fails."""
        return cls(
            description=FAILED_DESCRIPTION,
            temperature=0.0,
            humidity=0.0,
            pressure=0.0,
            wind_speed=0.0,
            location_name="",
            is_failure=True,
        )
