"""Domain models for bill-split."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass
class Guest:
    """A participant in the bill split."""

    first: str
    last: str = ""

    @property
    def display_name(self) -> str:
        if self.last:
            return f"{self.first} {self.last}"
        return self.first


@dataclass(frozen=True)
class Item:
    """One priced receipt line at unit quantity."""

    name: str
    price: float


@dataclass(frozen=True)
class ReceiptTotals:
    """Receipt-level amounts copied from the printed bill."""

    subtotal: float
    tax: float
    tip: float

    @property
    def extras(self) -> float:
        return self.tax + self.tip


@dataclass(frozen=True)
class Assignment:
    """Immutable snapshot of which guests share each item.

    Item indices missing from ``guests_by_item`` are treated as unassigned.
    """

    guests_by_item: Mapping[int, frozenset[int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {idx: frozenset(guests) for idx, guests in self.guests_by_item.items()}
        object.__setattr__(self, "guests_by_item", MappingProxyType(frozen))

    def guests_for(self, item_index: int) -> frozenset[int]:
        return self.guests_by_item.get(item_index, frozenset())


@dataclass(frozen=True)
class GuestResult:
    """Per-guest monetary breakdown, unrounded."""

    name: str
    pre_tax: float
    tax_share: float
    tip_share: float

    @property
    def total(self) -> float:
        return self.pre_tax + self.tax_share + self.tip_share
