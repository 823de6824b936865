"""Runtime configuration defaults for display and debug logging."""

from __future__ import annotations

CURRENCY_SYMBOL = "$"
DISPLAY_DECIMALS = 2

DEBUG_LOG_PATH = "/tmp/bill-split-debug.log"
DEBUG_LOG_ENV = "BILL_SPLIT_DEBUG_LOG"
