"""Main Textual app class."""

from __future__ import annotations

import os
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Label, Static

from bill_split.alert_modal import AlertModal
from bill_split.assignment_grid import AssignmentGrid
from bill_split.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH
from bill_split.engine import IncompleteAssignmentError
from bill_split.models import GuestResult
from bill_split.rendering import format_participants, format_result_cards
from bill_split.session import BillSession

INCOMPLETE_ASSIGNMENT_MESSAGE = "Please assign every item to at least one guest by checking the appropriate boxes."


class BillSplitApp(App):
    """A Textual app for splitting a restaurant bill by ordered items."""

    TITLE = "Bill Split"
    SUB_TITLE = "Brunch"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #participants-pane {
        width: 28;
        border: round $secondary;
        padding: 1;
    }

    #items-pane {
        width: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #guest-name-row {
        height: auto;
        margin-top: 1;
    }

    #guest-name-label {
        padding: 1 1 0 0;
    }

    #guest-name-input {
        width: 1fr;
    }

    #calculate-btn {
        width: 100%;
        margin-top: 1;
    }

    #results-section {
        height: auto;
        max-height: 50%;
        border: round $success;
        padding: 0 1;
        display: none;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "calculate", "Calculate", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: BillSession | None = None) -> None:
        super().__init__()
        self.session = session or BillSession.default()
        self.results: list[GuestResult] | None = None
        self._debug_log_path = Path(os.environ.get(DEBUG_LOG_ENV, DEBUG_LOG_PATH))
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        editable = self.session.guests[self.session.editable_guest_index]
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="participants-pane"):
                yield Static("Guests", classes="pane-title")
                yield Static(format_participants(self.session), id="participants")
                with Horizontal(id="guest-name-row"):
                    yield Label(editable.first, id="guest-name-label")
                    yield Input(value=editable.last, placeholder="Last name", id="guest-name-input")
                yield Button("Calculate", id="calculate-btn", variant="primary")
            with VerticalScroll(id="items-pane"):
                yield Static("Who had what?", classes="pane-title")
                yield AssignmentGrid(self.session, id="items-table")
        with VerticalScroll(id="results-section"):
            yield Static("Each Person's Share", classes="pane-title")
            yield Static(id="results")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(AssignmentGrid).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "guest-name-input":
            return
        guest = self.session.set_guest_last_name(event.value)
        self._log_debug(f"guest_renamed name={guest.display_name!r}")
        self.query_one(AssignmentGrid).refresh_table()
        self._refresh_result_names()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "calculate-btn":
            self.action_calculate()

    def on_assignment_grid_toggled(self, event: AssignmentGrid.Toggled) -> None:
        self._log_debug(f"toggle item={event.item_index} guest={event.guest_index} assigned={event.assigned}")

    def action_calculate(self) -> None:
        if isinstance(self.screen, AlertModal):
            return
        try:
            results = self.session.calculate()
        except IncompleteAssignmentError as exc:
            self._log_debug(f"calculate_blocked unassigned={list(exc.item_indices)}")
            self.push_screen(AlertModal(INCOMPLETE_ASSIGNMENT_MESSAGE, title="Unassigned items"))
            return

        self.results = results
        self._log_debug(f"calculate_ok guests={len(results)}")
        self._refresh_results()

    def _refresh_result_names(self) -> None:
        if self.results is None:
            return
        self.results = [replace(result, name=name) for result, name in zip(self.results, self.session.guest_names())]
        self._refresh_results()

    def _refresh_results(self) -> None:
        if self.results is None:
            return
        self.query_one("#results", Static).update(format_result_cards(self.results))
        self.query_one("#results-section").display = True
