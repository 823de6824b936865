"""Rendering helpers for the item table and result cards."""

from __future__ import annotations

from rich.cells import cell_len
from rich.columns import Columns
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bill_split.config import CURRENCY_SYMBOL, DISPLAY_DECIMALS
from bill_split.models import GuestResult
from bill_split.session import BillSession

CHECKED_MARK = "[x]"
UNCHECKED_MARK = "[ ]"


def format_amount(value: float) -> str:
    """Round for display only."""
    return f"{value:.{DISPLAY_DECIMALS}f}"


def format_money(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{format_amount(value)}"


def format_participants(session: BillSession) -> Text:
    """Render the fixed guests, one per line. The editable guest is left out."""
    text = Text()
    for idx, name in enumerate(session.guest_names()):
        if idx == session.editable_guest_index:
            continue
        if idx > 0:
            text.append("\n")
        text.append(name)
    return text


PRICE_HEADER = f"Price ({CURRENCY_SYMBOL})"
# Body rows start below the top border, the header row and the header rule.
FIRST_ROW_Y = 3
# Item and price columns come before the guest columns.
GUEST_COLUMN_OFFSET = 2


def grid_column_widths(session: BillSession) -> list[int]:
    """Content width of every table column, wide enough that nothing wraps."""
    widths = [
        max([cell_len("Item")] + [cell_len(item.name) for item in session.items]),
        max([cell_len(PRICE_HEADER)] + [cell_len(format_amount(item.price)) for item in session.items]),
    ]
    widths.extend(max(cell_len(name), cell_len(CHECKED_MARK)) for name in session.guest_names())
    return widths


def cell_at(session: BillSession, x: int, y: int) -> tuple[int, int] | None:
    """Map a position inside the rendered table to an (item, guest) cell."""
    item_idx = y - FIRST_ROW_Y
    if not (0 <= item_idx < len(session.items)):
        return None

    # Each column spans its width plus one space of padding per side, then a border.
    start = 1
    for column, width in enumerate(grid_column_widths(session)):
        end = start + width + 2
        if start <= x < end:
            if column < GUEST_COLUMN_OFFSET:
                return None
            return (item_idx, column - GUEST_COLUMN_OFFSET)
        start = end + 1
    return None


def build_items_table(session: BillSession, cursor: tuple[int, int] | None = None) -> Table:
    """Render the assignment grid: one row per item, one toggle column per guest.

    Column widths are fixed so that :func:`cell_at` can resolve mouse clicks.
    """
    widths = grid_column_widths(session)
    table = Table(show_lines=False, header_style="bold")
    table.add_column("Item", width=widths[0], no_wrap=True)
    table.add_column(PRICE_HEADER, justify="right", width=widths[1], no_wrap=True)
    for name, width in zip(session.guest_names(), widths[GUEST_COLUMN_OFFSET:]):
        table.add_column(Text(name), justify="center", width=width, no_wrap=True)

    unassigned = set(session.unassigned_items())
    for item_idx, item in enumerate(session.items):
        name_style = "yellow" if item_idx in unassigned else ""
        cells: list[RenderableType] = [Text(item.name, style=name_style), Text(format_amount(item.price))]
        for guest_idx in range(len(session.guests)):
            mark = CHECKED_MARK if session.is_assigned(item_idx, guest_idx) else UNCHECKED_MARK
            style = "bold green" if mark == CHECKED_MARK else "dim"
            if cursor == (item_idx, guest_idx):
                style = "reverse " + style
            cells.append(Text(mark, style=style))
        table.add_row(*cells)
    return table


def format_result_card(result: GuestResult) -> Panel:
    body = Text()
    body.append(f"Pre-tax: {format_money(result.pre_tax)}\n")
    body.append(f"Tax: {format_money(result.tax_share)}\n")
    body.append(f"Tip: {format_money(result.tip_share)}\n")
    body.append(f"Total: {format_money(result.total)}", style="bold")
    return Panel(body, title=Text(result.name, style="bold"), title_align="left", expand=False)


def format_result_cards(results: list[GuestResult]) -> Columns:
    return Columns([format_result_card(result) for result in results], padding=(0, 1))
