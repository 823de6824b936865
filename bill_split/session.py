"""In-memory state for one interactive bill-split session."""

from __future__ import annotations

from dataclasses import dataclass, field

from bill_split.data import BRUNCH_ITEMS, BRUNCH_TOTALS, default_guests
from bill_split.engine import allocate
from bill_split.models import Assignment, Guest, GuestResult, Item, ReceiptTotals


@dataclass
class BillSession:
    """Guests, items and the editable assignment table.

    The last guest is the only one whose last name can be edited.
    """

    guests: list[Guest]
    items: list[Item]
    totals: ReceiptTotals
    selections: dict[int, set[int]] = field(default_factory=dict)

    @classmethod
    def default(cls) -> BillSession:
        return cls(guests=default_guests(), items=list(BRUNCH_ITEMS), totals=BRUNCH_TOTALS)

    @property
    def editable_guest_index(self) -> int:
        return len(self.guests) - 1

    def guest_names(self) -> list[str]:
        return [guest.display_name for guest in self.guests]

    def set_guest_last_name(self, text: str, guest_index: int | None = None) -> Guest:
        """Update the editable guest's last name (surrounding whitespace dropped)."""
        if guest_index is None:
            guest_index = self.editable_guest_index
        if guest_index != self.editable_guest_index:
            raise ValueError(f"guest {guest_index} does not have an editable name")
        guest = self.guests[guest_index]
        guest.last = text.strip()
        return guest

    def is_assigned(self, item_index: int, guest_index: int) -> bool:
        return guest_index in self.selections.get(item_index, set())

    def assigned_guests(self, item_index: int) -> set[int]:
        return set(self.selections.get(item_index, set()))

    def toggle(self, item_index: int, guest_index: int) -> bool:
        """Flip one guest's inclusion in an item's split and return the new state."""
        if not (0 <= item_index < len(self.items)):
            raise IndexError(f"item index out of range: {item_index}")
        if not (0 <= guest_index < len(self.guests)):
            raise IndexError(f"guest index out of range: {guest_index}")

        selected = self.selections.setdefault(item_index, set())
        if guest_index in selected:
            selected.remove(guest_index)
            return False
        selected.add(guest_index)
        return True

    def build_assignment(self) -> Assignment:
        """Snapshot the current selections for the allocation engine."""
        return Assignment({idx: frozenset(self.selections.get(idx, set())) for idx in range(len(self.items))})

    def unassigned_items(self) -> list[int]:
        return [idx for idx in range(len(self.items)) if not self.selections.get(idx)]

    def calculate(self) -> list[GuestResult]:
        """Run the allocation. Selections are left untouched whether it succeeds or not."""
        return allocate(self.guests, self.items, self.totals, self.build_assignment())
