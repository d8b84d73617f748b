from weather_station.constants import TEMPERATURE_SYMBOLS
from weather_station.logic.classify import temperature_band
from weather_station.models.record import Record
from weather_station.models.weather import WeatherOutcome


def temperature_symbol(celsius: float) -> str:
    return TEMPERATURE_SYMBOLS[temperature_band(celsius)]


def format_outcome(outcome: WeatherOutcome) -> str:
    """Multi-line weather summary for the log pane."""
    lines = [
        f"Weather in {outcome.location_name}: {outcome.description} "
        f"{temperature_symbol(outcome.temperature)}",
        f"  > Temperature: {outcome.temperature:.1f}°C",
        f"  > Humidity: {outcome.humidity:.1f}%",
        f"  > Pressure: {outcome.pressure:.1f} hPa",
        f"  > Wind Speed: {outcome.wind_speed:.1f} m/s",
    ]
    return "\n".join(lines)


def format_record(record: Record) -> str:
    return format_outcome(record.outcome)


def format_pick(record: Record) -> str:
    """Left-pane label: "City, Country"."""
    return f"{record.city}, {record.country}"
