"""Raw receipt data for the brunch bill."""

from __future__ import annotations

# (first name, last name). Only the last guest's last name is editable.
GUESTS: list[tuple[str, str]] = [
    ("Vincent", ""),
    ("Giorgio", ""),
    ("Dennis", ""),
    ("Lisa", ""),
    ("Jana", ""),
    ("Carlos", ""),
    ("Kara", ""),
    ("Carlos", "BF"),
]

# Multi-quantity receipt lines are broken down to one row per unit.
# Prices are pre-tax, pre-tip.
ITEMS: list[tuple[str, float]] = [
    ("Coke", 6.00),
    ("Pitcher Aperol", 95.00),
    ("Steak Tartare", 30.00),
    ("Steak Tartare", 30.00),
    ("Salmon Benedict", 28.00),
    ("Entrecote", 56.00),
    ("Entrecote", 56.00),
    ("Steak Frites", 34.00),
    ("Roasted Salmon", 34.00),
    ("Ice Coffee", 6.00),
    ("Diet Coke", 6.00),
    ("Creme Brulee", 14.00),
    ("Chocolate Mousse", 14.00),
    ("Espresso", 5.50),
    ("Espresso", 5.50),
    ("Macchiato", 5.50),
    ("Macchiato", 5.50),
    ("Decaf Espresso", 6.00),
    ("Decaf Espresso", 6.00),
    ("Modelo Especial", 7.00),
    ("Modelo Especial", 7.00),
]

# Taken from the printed receipt, not recomputed from ITEMS.
SUBTOTAL = 457.00
TAX = 40.54
TIP = 91.40
