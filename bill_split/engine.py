"""Allocation engine: split item prices among guests and share out tax and tip.

Everything here is a pure function of its arguments. Callers own the state and
pass an explicit :class:`~bill_split.models.Assignment` snapshot in.
"""

from __future__ import annotations

from typing import Sequence

from bill_split.models import Assignment, Guest, GuestResult, Item, ReceiptTotals


class BillSplitError(ValueError):
    """Base class for bill-split domain errors."""


class IncompleteAssignmentError(BillSplitError):
    """Raised when one or more items have no guest assigned."""

    def __init__(self, item_indices: Sequence[int]) -> None:
        self.item_indices = tuple(item_indices)
        super().__init__(f"{len(self.item_indices)} item(s) have no guest assigned: {list(self.item_indices)}")


class UnknownGuestError(BillSplitError):
    """Raised when an assignment refers to a guest index outside the guest list."""

    def __init__(self, item_index: int, guest_index: int, guest_count: int) -> None:
        self.item_index = item_index
        self.guest_index = guest_index
        super().__init__(f"item {item_index} is assigned to guest {guest_index}, but there are {guest_count} guests")


def validate_assignment(items: Sequence[Item], assignment: Assignment, guest_count: int | None = None) -> None:
    """Check an assignment before any money is split.

    Raises IncompleteAssignmentError listing every item with an empty guest
    set. When ``guest_count`` is given, also raises UnknownGuestError for the
    first guest index outside ``range(guest_count)``.
    """
    unassigned = [idx for idx in range(len(items)) if not assignment.guests_for(idx)]
    if unassigned:
        raise IncompleteAssignmentError(unassigned)

    if guest_count is None:
        return
    for idx in range(len(items)):
        for guest_idx in sorted(assignment.guests_for(idx)):
            if not (0 <= guest_idx < guest_count):
                raise UnknownGuestError(idx, guest_idx, guest_count)


def split_item(price: float, guest_count: int) -> float:
    """Return one guest's share of an item split evenly ``guest_count`` ways."""
    return price / guest_count


def pre_tax_totals(items: Sequence[Item], guest_count: int, assignment: Assignment) -> list[float]:
    """Sum each guest's item shares. Assumes the assignment was validated."""
    totals = [0.0] * guest_count
    for idx, item in enumerate(items):
        guest_indices = assignment.guests_for(idx)
        share = split_item(item.price, len(guest_indices))
        for guest_idx in sorted(guest_indices):
            totals[guest_idx] += share
    return totals


def allocate(
    guests: Sequence[Guest],
    items: Sequence[Item],
    totals: ReceiptTotals,
    assignment: Assignment,
) -> list[GuestResult]:
    """Compute every guest's pre-tax, tax, tip and total amounts.

    Tax and tip are allocated by ``pre_tax / totals.subtotal``. The divisor is
    the receipt's stated subtotal, so if it differs from the sum of item prices
    the allocated extras will not add up to the stated tax and tip exactly.
    """
    validate_assignment(items, assignment, len(guests))

    results: list[GuestResult] = []
    for guest, pre_tax in zip(guests, pre_tax_totals(items, len(guests), assignment)):
        ratio = pre_tax / totals.subtotal
        results.append(
            GuestResult(
                name=guest.display_name,
                pre_tax=pre_tax,
                tax_share=ratio * totals.tax,
                tip_share=ratio * totals.tip,
            )
        )
    return results
