"""Weather Station entry point.

Slim: builds state from settings, runs the UI, prints the record dump.
"""

import logging
import sys
from functools import partial

from weather_station.api_client import fetch_weather
from weather_station.app_state import AppState, EditingPolicy
from weather_station.config import Settings, settings
from weather_station.logging_config import setup_logging
from weather_station.logic.navigator import CandidateList
from weather_station.logic.orchestrator import WeatherOrchestrator
from weather_station.models.record import RecordStore

logger = logging.getLogger("weather_station.entry")


def build_state(cfg: Settings, lookup=None) -> AppState:
    """Wire candidates, store and orchestrator. Raises MissingCredentialError."""
    if lookup is None:
        lookup = partial(fetch_weather, base_url=cfg.openweather_url, timeout=cfg.lookup_timeout)
    orchestrator = WeatherOrchestrator(RecordStore(), cfg.require_api_key(), lookup=lookup)
    return AppState(
        countries=CandidateList(cfg.countries),
        cities=CandidateList(cfg.cities),
        orchestrator=orchestrator,
        policy=EditingPolicy(cfg.editing_policy),
    )


def run(cfg: Settings | None = None) -> int:
    from weather_station.tui import WeatherStationApp

    if cfg is None:
        cfg = settings
    setup_logging(cfg.log_level, cfg.log_dir)

    try:
        state = build_state(cfg)
    except ValueError as e:  # missing credential, empty candidate list
        logger.error("Startup failed: %s", e)
        print(f"weather-station: {e}", file=sys.stderr)
        return 1

    logger.info("Starting Weather Station (%s policy, %d countries, %d cities)",
                state.policy.value, len(state.countries), len(state.cities))
    do_print = WeatherStationApp(state).run()

    if do_print and cfg.dump_on_exit:
        print(state.store.to_json())
    logger.info("Weather Station stopped after %d submissions", len(state.store))
    return 0


if __name__ == "__main__":
    sys.exit(run())
