"""Domain normalization helpers."""

from src.domain.constants import FULL_WEIGHT_FLAG


def normalize_entry_type(entry_type: str | None) -> str | None:
    """Normalize entry type values.

    Args:
        entry_type: Raw entry type from a form or repository.

    Returns:
        str | None: Lower-cased entry type, or None when blank.
    """
    if not entry_type:
        return None
    cleaned = str(entry_type).strip()
    return cleaned.lower() if cleaned else None


def normalize_melting(melting) -> str:
    """Normalize melting values.

    Args:
        melting: Raw melting value (``F``/``f`` or a percentage).

    Returns:
        str: ``F`` for full weight, otherwise the trimmed percentage text.
    """
    if melting is None:
        return ""
    cleaned = str(melting).strip()
    if cleaned.upper() == FULL_WEIGHT_FLAG:
        return FULL_WEIGHT_FLAG
    return cleaned


def normalize_customer_name(name: str | None) -> str | None:
    """Trim customer names, returning None when nothing is left."""
    if not name:
        return None
    cleaned = name.strip()
    return cleaned or None


__all__ = [
    "normalize_entry_type",
    "normalize_melting",
    "normalize_customer_name",
]
