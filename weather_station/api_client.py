"""OpenWeatherMap client with logging and response time tracking."""

import logging
import time

import httpx

from weather_station.config import settings
from weather_station.models.weather import WeatherOutcome

logger = logging.getLogger("weather_station.api")


def _describe(exc: Exception) -> str:
    # httpx messages embed the request URL, which carries the appid
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    if isinstance(exc, httpx.HTTPError):
        return type(exc).__name__
    return f"{type(exc).__name__}: {exc}"


def fetch_weather(
    city: str,
    country_code: str,
    api_key: str,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
    client: httpx.Client | None = None,
) -> WeatherOutcome | None:
    """Current weather for city,country in metric units.

    Returns None on any failure: transport error or timeout, non-2xx
    status, body that is not JSON, or a payload missing required fields.
    Single attempt, no retry.
    """
    url = base_url or settings.openweather_url
    if timeout is None:
        timeout = settings.lookup_timeout
    params = {"q": f"{city},{country_code}", "units": "metric", "appid": api_key}
    query = f"{city},{country_code}"

    t0 = time.monotonic()
    try:
        if client is not None:
            r = client.get(url, params=params, timeout=timeout or None)
        else:
            r = httpx.get(url, params=params, timeout=timeout or None)
        elapsed = (time.monotonic() - t0) * 1000
        r.raise_for_status()
        outcome = WeatherOutcome.from_payload(r.json())
        logger.debug("GET weather %s → %d (%.0fms)", query, r.status_code, elapsed)
        return outcome
    except Exception as e:
        elapsed = (time.monotonic() - t0) * 1000
        logger.warning("GET weather %s failed (%.0fms): %s", query, elapsed, _describe(e))
        return None
