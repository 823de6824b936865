import pytest

from bill_split.models import Guest, Item, ReceiptTotals
from bill_split.session import BillSession


@pytest.fixture
def small_session():
    """Three guests, three items, totals that match the item prices."""
    return BillSession(
        guests=[Guest("Alice"), Guest("Bob"), Guest("Carol", "X")],
        items=[Item("Pasta", 30.00), Item("Salad", 12.00), Item("Wine", 45.00)],
        totals=ReceiptTotals(subtotal=87.00, tax=7.83, tip=17.40),
    )


@pytest.fixture
def brunch_session():
    return BillSession.default()


@pytest.fixture
def assigned_brunch_session(brunch_session):
    """Every brunch item assigned round-robin, with the Aperol pitcher shared by three."""
    guest_count = len(brunch_session.guests)
    for item_idx in range(len(brunch_session.items)):
        brunch_session.toggle(item_idx, item_idx % guest_count)
    brunch_session.toggle(1, 4)
    brunch_session.toggle(1, 7)
    return brunch_session
