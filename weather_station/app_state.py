"""Application state: screen mode, editing target, pending input.

All input reaches the app through AppState.dispatch(); the renderer only
reads snapshot().
"""

import logging
from dataclasses import dataclass
from enum import Enum

from weather_station.logic.navigator import CandidateList
from weather_station.logic.orchestrator import WeatherOrchestrator
from weather_station.models.record import Record, RecordStore

logger = logging.getLogger("weather_station.state")


class Screen(Enum):
    BROWSING = "browsing"
    EDITING = "editing"
    CONFIRM_EXIT = "confirm_exit"


class EditingTarget(Enum):
    COUNTRY = "country"
    CITY = "city"


class EditingPolicy(str, Enum):
    ADVANCE = "advance"  # pick from the candidate lists, Enter moves country → city → submit
    TOGGLE = "toggle"    # type freely, Tab swaps fields, Enter on city submits


class Event(Enum):
    START_ENTRY = "start_entry"
    QUIT = "quit"
    CONFIRM = "confirm"
    DECLINE = "decline"
    CANCEL = "cancel"
    NEXT = "next"
    PREVIOUS = "previous"
    COMMIT_FIELD = "commit_field"
    SWITCH_FIELD = "switch_field"
    BACKSPACE = "backspace"


@dataclass
class PendingInput:
    country_text: str = ""
    city_text: str = ""

    def clear(self) -> None:
        self.country_text = ""
        self.city_text = ""


@dataclass(frozen=True)
class StateSnapshot:
    """Read-only view handed to the renderer."""

    screen: Screen
    editing: EditingTarget | None
    policy: EditingPolicy
    countries: tuple[str, ...]
    country_index: int
    cities: tuple[str, ...]
    city_index: int
    country_text: str
    city_text: str
    records: tuple[Record, ...]


class AppState:
    """Centralized state: screen mode, editing target, candidates, pending input."""

    def __init__(self, countries: CandidateList, cities: CandidateList,
                 orchestrator: WeatherOrchestrator,
                 policy: EditingPolicy = EditingPolicy.ADVANCE):
        self.countries = countries
        self.cities = cities
        self.orchestrator = orchestrator
        self.policy = EditingPolicy(policy)

        self.screen: Screen = Screen.BROWSING
        self.editing: EditingTarget | None = None
        self.pending = PendingInput()

    @property
    def store(self) -> RecordStore:
        return self.orchestrator.store

    def dispatch(self, event: Event) -> bool:
        """Apply one input event. Returns True when the app should exit."""
        if self.screen is Screen.BROWSING:
            self._on_browsing(event)
        elif self.screen is Screen.CONFIRM_EXIT:
            return self._on_confirm_exit(event)
        elif self.screen is Screen.EDITING:
            self._on_editing(event)
        return False

    def type_char(self, ch: str) -> None:
        """Append typed text to the active buffer (toggle policy only)."""
        if self.screen is not Screen.EDITING or self.policy is not EditingPolicy.TOGGLE:
            return
        if self.editing is EditingTarget.COUNTRY:
            self.pending.country_text += ch
        elif self.editing is EditingTarget.CITY:
            self.pending.city_text += ch

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            screen=self.screen,
            editing=self.editing,
            policy=self.policy,
            countries=self.countries.labels,
            country_index=self.countries.index,
            cities=self.cities.labels,
            city_index=self.cities.index,
            country_text=self.pending.country_text,
            city_text=self.pending.city_text,
            records=self.store.records,
        )

    # -- per-screen handlers --

    def _on_browsing(self, event: Event) -> None:
        if event is Event.START_ENTRY:
            self.screen = Screen.EDITING
            self.editing = EditingTarget.COUNTRY
            self.pending.clear()
        elif event is Event.QUIT:
            self.screen = Screen.CONFIRM_EXIT

    def _on_confirm_exit(self, event: Event) -> bool:
        if event is Event.CONFIRM:
            return True
        if event is Event.DECLINE:
            self.screen = Screen.BROWSING
        return False

    def _on_editing(self, event: Event) -> None:
        if event is Event.CANCEL:
            self._back_to_browsing()
            return

        if self.policy is EditingPolicy.ADVANCE:
            self._on_editing_advance(event)
        else:
            self._on_editing_toggle(event)

    def _on_editing_advance(self, event: Event) -> None:
        active = self.countries if self.editing is EditingTarget.COUNTRY else self.cities
        if event is Event.NEXT:
            active.next()
        elif event is Event.PREVIOUS:
            active.previous()
        elif event is Event.COMMIT_FIELD:
            if self.editing is EditingTarget.COUNTRY:
                self.pending.country_text = self.countries.selected
                self.editing = EditingTarget.CITY
            else:
                self.pending.city_text = self.cities.selected
                self._submit()

    def _on_editing_toggle(self, event: Event) -> None:
        if event is Event.SWITCH_FIELD:
            if self.editing is EditingTarget.COUNTRY:
                self.editing = EditingTarget.CITY
            else:
                self.editing = EditingTarget.COUNTRY
        elif event is Event.BACKSPACE:
            if self.editing is EditingTarget.COUNTRY:
                self.pending.country_text = self.pending.country_text[:-1]
            else:
                self.pending.city_text = self.pending.city_text[:-1]
        elif event is Event.COMMIT_FIELD:
            if self.editing is EditingTarget.COUNTRY:
                self.editing = EditingTarget.CITY
            else:
                self._submit()

    def _submit(self) -> None:
        logger.debug("Submitting %r, %r", self.pending.country_text, self.pending.city_text)
        try:
            self.orchestrator.submit(self.pending.country_text, self.pending.city_text)
        finally:
            self._back_to_browsing()

    def _back_to_browsing(self) -> None:
        self.pending.clear()
        self.editing = None
        self.screen = Screen.BROWSING
