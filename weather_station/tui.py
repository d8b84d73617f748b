"""Terminal UI (Textual).

The app translates key presses into AppState events and repaints from
AppState.snapshot() after each one. It never mutates state directly.
"""

import logging

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, VerticalScroll
from textual.widgets import Static

from weather_station.app_state import (
    AppState,
    EditingPolicy,
    EditingTarget,
    Event,
    Screen,
    StateSnapshot,
)
from weather_station.constants import (
    APP_TITLE,
    DIM,
    HINT,
    MODE_EDITING,
    MODE_EXITING,
    MODE_NORMAL,
    SELECTED,
    TAG_COLORS,
)
from weather_station.formatter import format_pick, format_record

logger = logging.getLogger("weather_station.tui")

# Printable keys per screen; everything else while editing is text input
BROWSING_KEYS = {"e": Event.START_ENTRY, "q": Event.QUIT}
CONFIRM_EXIT_KEYS = {"y": Event.CONFIRM, "q": Event.CONFIRM, "n": Event.DECLINE}

MODE_LABELS = {
    Screen.BROWSING: ("Normal Mode", MODE_NORMAL),
    Screen.EDITING: ("Editing Mode", MODE_EDITING),
    Screen.CONFIRM_EXIT: ("Exiting", MODE_EXITING),
}

TARGET_LABELS = {
    EditingTarget.COUNTRY: ("Editing Country", "green"),
    EditingTarget.CITY: ("Editing City", "bright_green"),
}


def key_hint(snap: StateSnapshot) -> str:
    if snap.screen is Screen.EDITING:
        if snap.policy is EditingPolicy.TOGGLE:
            return "(ESC) to cancel/(Tab) to switch boxes/enter to complete"
        return "(ESC) to cancel/(↑↓) to choose/enter to complete"
    if snap.screen is Screen.CONFIRM_EXIT:
        return "(y) to quit / (n) to go back"
    return "(q) to quit / (e) to get weather of new city"


def render_candidates(labels: tuple[str, ...], selected: int, active: bool) -> Text:
    text = Text()
    for i, label in enumerate(labels):
        if i == selected:
            text.append(f"{label}\n", style=SELECTED if active else "bold")
        else:
            text.append(f"{label}\n")
    return text


def render_buffer(title: str, value: str, active: bool) -> Text:
    text = Text(f"{title}\n", style=SELECTED if active else DIM)
    text.append(value + ("_" if active else ""))
    return text


class WeatherStationApp(App):
    """Weather Station main window.

    run() returns True when the user confirmed exit from the dialog.
    """

    TITLE = "Weather Station"

    CSS = """
    Screen {
        layers: base overlay;
    }

    #title {
        height: 3;
        border: solid $primary;
        color: green;
    }

    #body {
        height: 1fr;
    }

    #picks {
        width: 20%;
        border: solid $primary;
    }

    #log-pane {
        width: 80%;
        border: solid $primary;
    }

    #footer {
        height: 3;
    }

    #mode, #keys {
        width: 50%;
        border: solid $primary;
    }

    .overlay {
        layer: overlay;
        width: 100%;
        height: 100%;
        align: center middle;
        display: none;
    }

    #editor {
        width: 60%;
        height: auto;
        min-height: 25%;
        background: $panel;
        padding: 0 1;
    }

    #editor-fields {
        height: auto;
    }

    #country-pane, #city-pane {
        width: 50%;
    }

    #exit-dialog {
        width: 60%;
        height: 25%;
        border: solid $primary;
        border-title-color: $text;
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("up", "dispatch('next')", show=False, priority=True),
        Binding("down", "dispatch('previous')", show=False, priority=True),
        Binding("enter", "dispatch('commit_field')", show=False, priority=True),
        Binding("escape", "dispatch('cancel')", show=False, priority=True),
        Binding("tab", "dispatch('switch_field')", show=False, priority=True),
        Binding("backspace", "dispatch('backspace')", show=False, priority=True),
    ]

    def __init__(self, state: AppState):
        super().__init__()
        self.state = state

    def compose(self) -> ComposeResult:
        yield Static(APP_TITLE, id="title")
        with Horizontal(id="body"):
            yield Static(id="picks")
            with VerticalScroll(id="log-pane"):
                yield Static(id="log")
        with Horizontal(id="footer"):
            yield Static(id="mode")
            yield Static(id="keys")
        with Container(id="editor-layer", classes="overlay"):
            with Container(id="editor"):
                yield Static("Enter a new Country and City pair", id="editor-title")
                with Horizontal(id="editor-fields"):
                    yield Static(id="country-pane")
                    yield Static(id="city-pane")
        with Container(id="exit-layer", classes="overlay"):
            dialog = Static("Would you like to exit (y/n)", id="exit-dialog")
            dialog.border_title = "Leaving? 😢"
            yield dialog

    def on_mount(self) -> None:
        self.refresh_view()

    # -- input --

    def action_dispatch(self, name: str) -> None:
        self._apply(Event(name))

    def on_key(self, event: events.Key) -> None:
        if not event.is_printable or event.character is None:
            return
        event.stop()
        screen = self.state.screen
        if screen is Screen.EDITING:
            self.state.type_char(event.character)
            self.refresh_view()
        elif screen is Screen.BROWSING and event.character in BROWSING_KEYS:
            self._apply(BROWSING_KEYS[event.character])
        elif screen is Screen.CONFIRM_EXIT and event.character in CONFIRM_EXIT_KEYS:
            self._apply(CONFIRM_EXIT_KEYS[event.character])

    def _apply(self, event: Event) -> None:
        if self.state.dispatch(event):
            logger.info("Exit confirmed with %d records", len(self.state.store))
            self.exit(True)
            return
        self.refresh_view()

    # -- rendering --

    def refresh_view(self) -> None:
        snap = self.state.snapshot()

        picks = Text()
        log = Text()
        for record in snap.records:
            picks.append(format_pick(record) + "\n", style="yellow")
            log.append(format_record(record) + "\n", style=TAG_COLORS[record.tag])
        self.query_one("#picks", Static).update(picks)
        self.query_one("#log", Static).update(log)

        mode_label, mode_style = MODE_LABELS[snap.screen]
        target_label, target_style = TARGET_LABELS.get(snap.editing, ("Not Editing Anything", DIM))
        mode = Text(mode_label, style=mode_style)
        mode.append(" | ", style="white")
        mode.append(target_label, style=target_style)
        self.query_one("#mode", Static).update(mode)
        self.query_one("#keys", Static).update(Text(key_hint(snap), style=HINT))

        editing = snap.screen is Screen.EDITING
        self.query_one("#editor-layer").display = editing
        if editing:
            self._render_editor(snap)
        self.query_one("#exit-layer").display = snap.screen is Screen.CONFIRM_EXIT

    def _render_editor(self, snap: StateSnapshot) -> None:
        on_country = snap.editing is EditingTarget.COUNTRY
        if snap.policy is EditingPolicy.TOGGLE:
            country = render_buffer("Country", snap.country_text, on_country)
            city = render_buffer("City", snap.city_text, not on_country)
        else:
            country = render_candidates(snap.countries, snap.country_index, on_country)
            city = render_candidates(snap.cities, snap.city_index, not on_country)
        self.query_one("#country-pane", Static).update(country)
        self.query_one("#city-pane", Static).update(city)
