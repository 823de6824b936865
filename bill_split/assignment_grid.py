"""Item/guest assignment grid, toggled by keyboard or mouse."""

from __future__ import annotations

from textual.events import Click
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Static

from bill_split.rendering import build_items_table, cell_at
from bill_split.session import BillSession


class AssignmentGrid(Static, can_focus=True):
    """Table of items with one toggle cell per guest."""

    BINDINGS = [
        ("up", "move_cursor(-1, 0)", "Up"),
        ("down", "move_cursor(1, 0)", "Down"),
        ("left", "move_cursor(0, -1)", "Left"),
        ("right", "move_cursor(0, 1)", "Right"),
        ("k", "move_cursor(-1, 0)", "Up"),
        ("j", "move_cursor(1, 0)", "Down"),
        ("h", "move_cursor(0, -1)", "Left"),
        ("l", "move_cursor(0, 1)", "Right"),
        ("space", "toggle_cell", "Toggle"),
        ("enter", "toggle_cell", "Toggle"),
    ]

    cursor_row = reactive(0)
    cursor_column = reactive(0)

    class Toggled(Message):
        """Posted after a cell changes."""

        def __init__(self, item_index: int, guest_index: int, assigned: bool) -> None:
            super().__init__()
            self.item_index = item_index
            self.guest_index = guest_index
            self.assigned = assigned

    def __init__(self, session: BillSession, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.session = session

    def on_mount(self) -> None:
        self.refresh_table()

    def on_focus(self) -> None:
        self.refresh_table()

    def on_blur(self) -> None:
        self.refresh_table()

    @property
    def cursor(self) -> tuple[int, int]:
        return (self.cursor_row, self.cursor_column)

    def action_move_cursor(self, rows: int, columns: int) -> None:
        if not self.session.items or not self.session.guests:
            return
        self.cursor_row = (self.cursor_row + rows) % len(self.session.items)
        self.cursor_column = (self.cursor_column + columns) % len(self.session.guests)
        self.refresh_table()

    def on_click(self, event: Click) -> None:
        cell = cell_at(self.session, event.x, event.y)
        if cell is None:
            return
        self.cursor_row, self.cursor_column = cell
        self.focus()
        self.action_toggle_cell()

    def action_toggle_cell(self) -> None:
        if not self.session.items or not self.session.guests:
            return
        assigned = self.session.toggle(self.cursor_row, self.cursor_column)
        self.refresh_table()
        self.post_message(self.Toggled(self.cursor_row, self.cursor_column, assigned))

    def refresh_table(self) -> None:
        cursor = self.cursor if self.has_focus else None
        self.update(build_items_table(self.session, cursor))
