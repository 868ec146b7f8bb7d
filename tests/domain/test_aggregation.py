"""Tests for ledger aggregation and ordering."""

from datetime import date, datetime
from decimal import Decimal
import itertools

from src.domain.services.aggregation import (
    aggregate,
    compute_balance,
    filter_by_date_range,
    sort_entries,
    split_active_archived,
)


def test_empty_input_gives_zero_totals() -> None:
    summary = aggregate([])

    for totals in (summary.active, summary.archived):
        assert totals.credit_total == Decimal("0")
        assert totals.debit_total == Decimal("0")
        assert totals.balance == Decimal("0")
        assert totals.entry_count == 0


def test_balance_excludes_archived_entries(make_entry) -> None:
    entries = [
        make_entry("credit", "10"),
        make_entry("debit", "4"),
        make_entry("credit", "100", archived=True),
        make_entry("debit", "2.5", archived=True),
    ]

    summary = aggregate(entries)

    assert summary.balance == Decimal("6.000")
    assert summary.credit_total == Decimal("10.000")
    assert summary.debit_total == Decimal("4.000")
    assert summary.archived.credit_total == Decimal("100.000")
    assert summary.archived.debit_total == Decimal("2.500")
    assert summary.counts.credit == 1
    assert summary.counts.debit == 1
    assert summary.counts.archived == 2


def test_missing_net_weight_counts_as_zero(make_entry) -> None:
    entries = [make_entry("credit", None), make_entry("debit", "1.25")]

    assert compute_balance(entries) == Decimal("-1.250")


def test_decimal_sum_has_no_float_drift(make_entry) -> None:
    entries = [make_entry("credit", "0.1") for _ in range(3)]

    assert aggregate(entries).credit_total == Decimal("0.300")


def test_aggregate_is_order_independent(make_entry) -> None:
    entries = [
        make_entry("credit", "10.125"),
        make_entry("debit", "3.333"),
        make_entry("credit", "0.001", archived=True),
        make_entry("debit", "7.5"),
    ]
    expected = aggregate(entries)

    for permutation in itertools.permutations(entries):
        assert aggregate(permutation) == expected


def test_sort_is_by_date_then_creation_time(make_entry) -> None:
    late = make_entry(entry_date=date(2024, 2, 1))
    second = make_entry(
        entry_date=date(2024, 1, 1),
        created_at=datetime(2024, 1, 1, 12),
    )
    first = make_entry(
        entry_date=date(2024, 1, 1),
        created_at=datetime(2024, 1, 1, 9),
    )

    assert sort_entries([late, second, first]) == [first, second, late]


def test_sort_is_stable_for_identical_keys(make_entry) -> None:
    stamp = datetime(2024, 1, 1, 9)
    entries = [make_entry(created_at=stamp) for _ in range(4)]

    assert sort_entries(entries) == entries


def test_split_and_date_filter(make_entry) -> None:
    inside = make_entry(entry_date=date(2024, 1, 10), archived=True)
    edge = make_entry(entry_date=date(2024, 1, 31), archived=True)
    outside = make_entry(entry_date=date(2024, 2, 1), archived=True)
    active = make_entry(entry_date=date(2024, 1, 15))

    active_part, archived_part = split_active_archived(
        [inside, active, edge, outside]
    )

    assert active_part == [active]
    assert archived_part == [inside, edge, outside]
    assert filter_by_date_range(
        archived_part,
        date(2024, 1, 10),
        date(2024, 1, 31),
    ) == [inside, edge]
