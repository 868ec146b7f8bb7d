"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal

WEIGHT_QUANTUM = Decimal("0.001")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_weight(value) -> Decimal:
    """Round a weight to three decimal places (half up).

    Args:
        value: Raw numeric value.

    Returns:
        Decimal: Weight rounded to the persisted precision.
    """
    return coerce_decimal(value).quantize(WEIGHT_QUANTUM, rounding=ROUND_HALF_UP)


__all__ = ["WEIGHT_QUANTUM", "coerce_decimal", "quantize_weight"]
