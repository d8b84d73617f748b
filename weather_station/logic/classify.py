"""Display classification for lookup outcomes.

Description text maps to a DisplayTag through an exact-match table; the
temperature maps to one of five half-open bands (low end inclusive).
"""

from enum import Enum


class DisplayTag(str, Enum):
    CLEAR = "clear"
    CLOUDS = "clouds"
    MIST = "mist"
    PRECIPITATION = "precipitation"
    NEUTRAL = "neutral"
    ERROR = "error"


class TemperatureBand(str, Enum):
    FREEZING = "freezing"  # < 0
    COLD = "cold"          # [0, 15)
    MILD = "mild"          # [15, 25)
    WARM = "warm"          # [25, 35)
    HOT = "hot"            # >= 35


DESCRIPTION_TAGS: dict[str, DisplayTag] = {
    "clear sky": DisplayTag.CLEAR,
    "few clouds": DisplayTag.CLOUDS,
    "scattered clouds": DisplayTag.CLOUDS,
    "broken clouds": DisplayTag.CLOUDS,
    "overcast clouds": DisplayTag.MIST,
    "mist": DisplayTag.MIST,
    "haze": DisplayTag.MIST,
    "smoke": DisplayTag.MIST,
    "fog": DisplayTag.MIST,
    "shower rain": DisplayTag.PRECIPITATION,
    "rain": DisplayTag.PRECIPITATION,
    "thunderstorm": DisplayTag.PRECIPITATION,
    "snow": DisplayTag.PRECIPITATION,
}

# (upper bound, band), checked in order
_BANDS = [
    (0.0, TemperatureBand.FREEZING),
    (15.0, TemperatureBand.COLD),
    (25.0, TemperatureBand.MILD),
    (35.0, TemperatureBand.WARM),
]


def classify_description(description: str) -> DisplayTag:
    """Exact-match lookup; unknown phrases are NEUTRAL."""
    return DESCRIPTION_TAGS.get(description, DisplayTag.NEUTRAL)


def temperature_band(celsius: float) -> TemperatureBand:
    for upper, band in _BANDS:
        if celsius < upper:
            return band
    return TemperatureBand.HOT
