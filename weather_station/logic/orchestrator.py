"""Submission commit: lookup, classify, append.

submit() always appends exactly one record. Lookup failures of any kind
are absorbed into a sentinel record and only reach the log file.
"""

import logging
from collections.abc import Callable

from weather_station.api_client import fetch_weather
from weather_station.config import MissingCredentialError
from weather_station.logic.classify import DisplayTag, classify_description
from weather_station.models.record import Record, RecordStore
from weather_station.models.weather import WeatherOutcome

logger = logging.getLogger("weather_station.orchestrator")

Lookup = Callable[[str, str, str], WeatherOutcome | None]


class WeatherOrchestrator:
    def __init__(self, store: RecordStore, api_key: str, lookup: Lookup = fetch_weather):
        if not api_key or not api_key.strip():
            raise MissingCredentialError("an OpenWeatherMap API key is required")
        self.store = store
        self._api_key = api_key.strip()
        self._lookup = lookup

    def submit(self, country_label: str, city_label: str) -> Record:
        city = city_label.strip()
        country_code = country_label.strip()

        try:
            outcome = self._lookup(city, country_code, self._api_key)
        except Exception as e:
            logger.warning("Lookup raised for %s,%s: %s", city, country_code, e)
            outcome = None

        if outcome is None or outcome.is_failure:
            outcome = WeatherOutcome.failed()
            tag = DisplayTag.ERROR
        else:
            tag = classify_description(outcome.description)

        record = Record(country=country_label, city=city_label, outcome=outcome, tag=tag)
        self.store.append(record)
        logger.info("Record #%d: %s,%s → %s (%s)",
                    len(self.store), city, country_code, outcome.description, tag.value)
        return record
