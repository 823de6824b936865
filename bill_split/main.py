"""Entry point for the bill-split Textual app."""

from __future__ import annotations

from bill_split.bill_app import BillSplitApp


def main() -> None:
    """Run the Textual application."""
    BillSplitApp().run()


if __name__ == "__main__":
    main()
