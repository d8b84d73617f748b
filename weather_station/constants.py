"""Constants: candidate lists, tag colors, temperature symbols."""

from weather_station.logic.classify import DisplayTag, TemperatureBand

# Candidate lists (ISO 3166 alpha-2 codes, city names)
COUNTRY_CODES = ["US", "GB", "IN"]
CITY_NAMES = ["Buffalo", "Boston", "New York", "Nagpur", "Pune"]

APP_TITLE = "Welcome to Weather Station ☁️"

# Colors per display tag (Rich color names)
TAG_COLORS = {
    DisplayTag.CLEAR: "blue",
    DisplayTag.CLOUDS: "yellow",
    DisplayTag.MIST: "green",
    DisplayTag.PRECIPITATION: "grey70",
    DisplayTag.NEUTRAL: "white",
    DisplayTag.ERROR: "red",
}

TEMPERATURE_SYMBOLS = {
    TemperatureBand.FREEZING: "🥶",
    TemperatureBand.COLD: "☁️",
    TemperatureBand.MILD: "⛅️",
    TemperatureBand.WARM: "🌤️",
    TemperatureBand.HOT: "🔥",
}

# Footer palette
MODE_NORMAL = "green"
MODE_EDITING = "yellow"
MODE_EXITING = "bright_red"
HINT = "red"
SELECTED = "bold green"
DIM = "grey50"
