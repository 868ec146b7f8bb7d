"""Domain constants for the bullion ledger."""

from decimal import Decimal

CREDIT = "credit"
DEBIT = "debit"
ENTRY_TYPES = (CREDIT, DEBIT)

FULL_WEIGHT_FLAG = "F"
PERCENT = Decimal("100")

DEFAULT_SINGLE_COLUMN_THRESHOLD = 25

# Largest value the NUMERIC(12, 3) weight columns hold.
MAX_STORED_WEIGHT = Decimal("999999999.999")


__all__ = [
    "CREDIT",
    "DEBIT",
    "ENTRY_TYPES",
    "FULL_WEIGHT_FLAG",
    "PERCENT",
    "DEFAULT_SINGLE_COLUMN_THRESHOLD",
    "MAX_STORED_WEIGHT",
]
