"""Blocking alert modal screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static


class AlertModal(ModalScreen[None]):
    """Show a message and block the app until it is dismissed."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = """
    AlertModal {
        align: center middle;
        background: $background 60%;
    }

    #alert-dialog {
        width: 56;
        height: auto;
        border: round $error;
        background: $panel;
        padding: 1 2;
    }

    #alert-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #alert-message {
        color: white;
        margin-bottom: 1;
    }

    #alert-help {
        color: #dddddd;
    }
    """

    def __init__(self, message: str, title: str = "Notice") -> None:
        super().__init__()
        self.message = message
        self.title_text = title

    def compose(self) -> ComposeResult:
        with Container(id="alert-dialog"):
            yield Static(self.title_text, id="alert-title")
            yield Static(self.message, id="alert-message")
            yield Static("Enter/Esc/q close.", id="alert-help")

    def action_close(self) -> None:
        self.dismiss(None)
