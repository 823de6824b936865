"""Typed receipt data built from the raw constants."""

from __future__ import annotations

from bill_split.constant import GUESTS, ITEMS, SUBTOTAL, TAX, TIP
from bill_split.models import Guest, Item, ReceiptTotals


def default_guests() -> list[Guest]:
    """Fresh guest list; guests are mutable so each session gets its own copy."""
    return [Guest(first=first, last=last) for first, last in GUESTS]


BRUNCH_ITEMS: list[Item] = [Item(name=name, price=price) for name, price in ITEMS]

BRUNCH_TOTALS = ReceiptTotals(subtotal=SUBTOTAL, tax=TAX, tip=TIP)
