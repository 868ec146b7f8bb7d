"""Entry valuation: converts gross weight, melting and wastage to net weight."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from src.domain.constants import (
    ENTRY_TYPES,
    FULL_WEIGHT_FLAG,
    MAX_STORED_WEIGHT,
    PERCENT,
)
from src.domain.exceptions import InvalidInput
from src.domain.models.ledger import EntryValuation
from src.domain.services.normalization import (
    normalize_entry_type,
    normalize_melting,
)
from src.utils.decimal_utils import quantize_weight


def is_full_weight(melting) -> bool:
    """Return True when melting is the full-weight flag (case-insensitive)."""
    return (
        isinstance(melting, str)
        and melting.strip().upper() == FULL_WEIGHT_FLAG
    )


def parse_non_negative(value, field_name: str) -> Decimal:
    """Parse a finite, non-negative decimal that fits the weight columns.

    Args:
        value: Raw value (str, int, float, or Decimal).
        field_name: Name used in the error message.

    Returns:
        Decimal: Parsed value.

    Raises:
        InvalidInput: If the value is blank, not numeric, negative, or
            larger than MAX_STORED_WEIGHT.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInput(f"{field_name} is required")
    if isinstance(value, bool):
        raise InvalidInput(f"{field_name} must be a number")
    raw = value.strip() if isinstance(value, str) else str(value)
    try:
        parsed = Decimal(raw)
    except InvalidOperation as exc:
        raise InvalidInput(f"{field_name} must be a number: {value!r}") from exc
    if not parsed.is_finite():
        raise InvalidInput(f"{field_name} must be a finite number")
    if parsed < 0:
        raise InvalidInput(f"{field_name} must not be negative")
    if parsed > MAX_STORED_WEIGHT:
        raise InvalidInput(f"{field_name} must not exceed {MAX_STORED_WEIGHT}")
    return parsed


def parse_optional_wastage(value) -> Decimal | None:
    """Parse wastage, treating None and blank text as absent."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_non_negative(value, "Wastage")


def parse_entry_date(value) -> date:
    """Parse an entry date from a date or an ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidInput("Date is required")
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise InvalidInput(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        ) from exc


def valuate(
    gross_weight,
    melting,
    wastage=None,
    last_wastage=None,
) -> Decimal:
    """Compute the net weight of an entry.

    Full-weight entries (melting ``F``) keep their gross weight. Otherwise
    ``net = (melting + wastage) * gross / 100``; a missing wastage falls
    back to ``last_wastage``, then to zero.

    Args:
        gross_weight: Gross weight, non-negative.
        melting: ``F``/``f`` or a non-negative percentage.
        wastage: Optional wastage percentage.
        last_wastage: Wastage remembered by the caller from a prior entry.

    Returns:
        Decimal: Net weight rounded to three decimals.

    Raises:
        InvalidInput: If any numeric field is missing or malformed.
    """
    gross = parse_non_negative(gross_weight, "Gross weight")
    if melting is None or (isinstance(melting, str) and not melting.strip()):
        raise InvalidInput("Melting is required")
    if is_full_weight(melting):
        return quantize_weight(gross)

    melting_pct = parse_non_negative(melting, "Melting")
    applied_wastage = _resolve_wastage(wastage, last_wastage)
    net_weight = quantize_weight((melting_pct + applied_wastage) * gross / PERCENT)
    if net_weight > MAX_STORED_WEIGHT:
        raise InvalidInput(f"Net weight must not exceed {MAX_STORED_WEIGHT}")
    return net_weight


def value_entry(
    entry_type,
    entry_date,
    gross_weight,
    melting,
    wastage=None,
    last_wastage=None,
) -> EntryValuation:
    """Validate a full entry form and compute its net weight.

    Args:
        entry_type: ``credit`` or ``debit``.
        entry_date: Calendar date or ISO string.
        gross_weight: Gross weight input.
        melting: Melting input.
        wastage: Wastage input, optional.
        last_wastage: Caller-owned remembered wastage.

    Returns:
        EntryValuation: Normalized values, net weight, and the wastage to
        remember for the next entry.
    """
    normalized_type = normalize_entry_type(entry_type)
    if normalized_type not in ENTRY_TYPES:
        raise InvalidInput(f"Unknown entry type: {entry_type!r}")
    parsed_date = parse_entry_date(entry_date)
    net_weight = valuate(gross_weight, melting, wastage, last_wastage)

    entered_wastage = parse_optional_wastage(wastage)
    remembered = parse_optional_wastage(last_wastage)
    if is_full_weight(melting):
        applied_wastage = entered_wastage
    else:
        applied_wastage = _resolve_wastage(wastage, last_wastage)

    return EntryValuation(
        entry_type=normalized_type,
        date=parsed_date,
        gross_weight=quantize_weight(
            parse_non_negative(gross_weight, "Gross weight")
        ),
        melting=normalize_melting(melting),
        wastage=applied_wastage,
        net_weight=net_weight,
        remembered_wastage=(
            entered_wastage if entered_wastage is not None else remembered
        ),
    )


def _resolve_wastage(wastage, last_wastage) -> Decimal:
    parsed = parse_optional_wastage(wastage)
    if parsed is not None:
        return parsed
    remembered = parse_optional_wastage(last_wastage)
    if remembered is not None:
        return remembered
    return Decimal("0")


__all__ = [
    "is_full_weight",
    "parse_non_negative",
    "parse_optional_wastage",
    "parse_entry_date",
    "valuate",
    "value_entry",
]
