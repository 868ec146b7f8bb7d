"""Tests for entry valuation."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.domain.exceptions import InvalidInput
from src.domain.services.valuation import (
    is_full_weight,
    parse_entry_date,
    parse_non_negative,
    valuate,
    value_entry,
)


@pytest.mark.parametrize("gross", ["0", "12.345", "100", "7.1"])
@pytest.mark.parametrize("flag", ["F", "f", " F "])
def test_full_weight_returns_gross_unchanged(gross, flag) -> None:
    """Full-weight melting ignores wastage entirely."""
    assert valuate(gross, flag, "3.5", last_wastage="9") == Decimal(gross)


def test_percentage_formula_with_wastage() -> None:
    """92.5% melting plus 1.5% wastage on 100 gives 94."""
    assert valuate("100", "92.5", "1.5") == Decimal("94.000")


def test_full_weight_without_remembered_wastage() -> None:
    assert valuate("50", "f") == Decimal("50.000")


def test_result_is_rounded_half_up_to_three_places() -> None:
    """(91.6 + 0) * 12.345 / 100 = 11.30802 rounds to 11.308."""
    assert valuate("12.345", "91.6", "0") == Decimal("11.308")
    # 0.0005 rounds away from zero.
    assert valuate("1", "0.05", "0") == Decimal("0.001")


def test_missing_wastage_falls_back_to_last_wastage() -> None:
    assert valuate("10", "90", None, last_wastage="2") == Decimal("9.200")
    assert valuate("10", "90", "  ", last_wastage="2") == Decimal("9.200")


def test_missing_wastage_without_memory_counts_as_zero() -> None:
    assert valuate("10", "90") == Decimal("9.000")


def test_entered_wastage_wins_over_last_wastage() -> None:
    assert valuate("10", "90", "1", last_wastage="5") == Decimal("9.100")


@pytest.mark.parametrize(
    "gross, melting, wastage",
    [
        ("", "90", None),
        (None, "90", None),
        ("abc", "90", None),
        ("-1", "90", None),
        ("10", "", None),
        ("10", "ninety", None),
        ("10", "-5", None),
        ("10", "90", "x"),
        ("10", "90", "-2"),
        ("nan", "90", None),
        ("10", "Infinity", None),
    ],
)
def test_invalid_numbers_raise_invalid_input(gross, melting, wastage) -> None:
    with pytest.raises(InvalidInput):
        valuate(gross, melting, wastage)


def test_parse_non_negative_rejects_booleans() -> None:
    with pytest.raises(InvalidInput):
        parse_non_negative(True, "Gross weight")


@pytest.mark.parametrize(
    "gross, melting",
    [
        ("1e20", "F"),
        ("1000000000", "90"),
        ("10", "1000000000"),
    ],
)
def test_values_beyond_column_capacity_are_rejected(gross, melting) -> None:
    with pytest.raises(InvalidInput, match="must not exceed"):
        valuate(gross, melting)


def test_net_weight_beyond_column_capacity_is_rejected() -> None:
    with pytest.raises(InvalidInput, match="Net weight"):
        valuate("500000000", "300")


def test_largest_storable_gross_weight_is_accepted() -> None:
    assert valuate("999999999.999", "F") == Decimal("999999999.999")


def test_is_full_weight_only_for_flag_text() -> None:
    assert is_full_weight("F")
    assert is_full_weight("f")
    assert not is_full_weight("91.6")
    assert not is_full_weight(None)


def test_parse_entry_date_accepts_dates_and_iso_strings() -> None:
    assert parse_entry_date(date(2024, 3, 1)) == date(2024, 3, 1)
    assert parse_entry_date(datetime(2024, 3, 1, 10, 30)) == date(2024, 3, 1)
    assert parse_entry_date("2024-03-01") == date(2024, 3, 1)
    with pytest.raises(InvalidInput):
        parse_entry_date("01/03/2024")
    with pytest.raises(InvalidInput):
        parse_entry_date(None)


def test_value_entry_remembers_entered_wastage() -> None:
    valuation = value_entry(
        "Credit",
        "2024-01-05",
        "20",
        "92",
        wastage="1.5",
        last_wastage="3",
    )

    assert valuation.entry_type == "credit"
    assert valuation.date == date(2024, 1, 5)
    assert valuation.gross_weight == Decimal("20.000")
    assert valuation.melting == "92"
    assert valuation.wastage == Decimal("1.5")
    assert valuation.net_weight == Decimal("18.700")
    assert valuation.remembered_wastage == Decimal("1.5")


def test_value_entry_keeps_previous_memory_when_wastage_blank() -> None:
    valuation = value_entry("debit", date(2024, 1, 5), "20", "92", "", "3")

    assert valuation.wastage == Decimal("3")
    assert valuation.net_weight == Decimal("19.000")
    assert valuation.remembered_wastage == Decimal("3")


def test_value_entry_full_weight_normalizes_flag() -> None:
    valuation = value_entry("credit", date(2024, 1, 5), "7.5", "f", None, "3")

    assert valuation.melting == "F"
    assert valuation.wastage is None
    assert valuation.net_weight == Decimal("7.500")
    assert valuation.remembered_wastage == Decimal("3")


def test_value_entry_rejects_unknown_type() -> None:
    with pytest.raises(InvalidInput):
        value_entry("transfer", date(2024, 1, 5), "1", "F")
