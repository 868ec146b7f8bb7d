"""Domain validation helpers."""

from datetime import date

from src.domain.exceptions import InvalidInput
from src.domain.services.normalization import normalize_customer_name


def validate_customer_name(name: str | None) -> str:
    """Return the trimmed customer name.

    Args:
        name: Raw name from the form.

    Returns:
        str: Trimmed name.

    Raises:
        InvalidInput: If the name is empty after trimming.
    """
    cleaned = normalize_customer_name(name)
    if cleaned is None:
        raise InvalidInput("Customer name is required")
    return cleaned


def validate_date_range(
    start_date: date | None,
    end_date: date | None,
) -> tuple[date, date]:
    """Ensure both bounds are present and ordered.

    Args:
        start_date: Inclusive lower bound.
        end_date: Inclusive upper bound.

    Returns:
        tuple[date, date]: The validated bounds.

    Raises:
        InvalidInput: If a bound is missing or start is after end.
    """
    if start_date is None or end_date is None:
        raise InvalidInput("Please select both start and end dates")
    if start_date > end_date:
        raise InvalidInput("Start date must not be after end date")
    return start_date, end_date


__all__ = ["validate_customer_name", "validate_date_range"]
