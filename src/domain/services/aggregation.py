"""Ledger aggregation: totals, balance, ordering, and date filters."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from src.domain.models.ledger import Entry, LedgerSummary, PartitionTotals
from src.utils.decimal_utils import coerce_decimal, quantize_weight


def aggregate(entries: Iterable[Entry]) -> LedgerSummary:
    """Compute credit/debit totals for the active and archived partitions.

    Net weights are summed as Decimals and a missing net weight counts as
    zero. Only the active partition contributes to the balance.

    Args:
        entries: Entries of one ledger, in any order.

    Returns:
        LedgerSummary: Totals and counts per partition.
    """
    sums = {
        (False, True): Decimal("0"),
        (False, False): Decimal("0"),
        (True, True): Decimal("0"),
        (True, False): Decimal("0"),
    }
    counts = dict.fromkeys(sums, 0)
    for entry in entries:
        if not (entry.is_credit or entry.is_debit):
            continue
        key = (bool(entry.archived), entry.is_credit)
        sums[key] += coerce_decimal(entry.net_weight)
        counts[key] += 1

    return LedgerSummary(
        active=_partition(sums, counts, archived=False),
        archived=_partition(sums, counts, archived=True),
    )


def compute_balance(entries: Iterable[Entry]) -> Decimal:
    """Return the active balance (credit minus debit)."""
    return aggregate(entries).balance


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Order entries by date, then by creation time.

    The sort is stable, so entries sharing both keys keep their input order.
    """
    return sorted(entries, key=_sort_key)


def split_active_archived(
    entries: Iterable[Entry],
) -> tuple[list[Entry], list[Entry]]:
    """Split entries into (active, archived), preserving order."""
    active: list[Entry] = []
    archived: list[Entry] = []
    for entry in entries:
        (archived if entry.archived else active).append(entry)
    return active, archived


def filter_by_date_range(
    entries: Iterable[Entry],
    start_date: date,
    end_date: date,
) -> list[Entry]:
    """Return entries dated within [start_date, end_date]."""
    return [
        entry for entry in entries if start_date <= entry.date <= end_date
    ]


def _partition(
    sums: dict[tuple[bool, bool], Decimal],
    counts: dict[tuple[bool, bool], int],
    *,
    archived: bool,
) -> PartitionTotals:
    return PartitionTotals(
        credit_total=quantize_weight(sums[(archived, True)]),
        debit_total=quantize_weight(sums[(archived, False)]),
        credit_count=counts[(archived, True)],
        debit_count=counts[(archived, False)],
    )


def _sort_key(entry: Entry) -> tuple[date, datetime]:
    return entry.date, entry.created_at or datetime.min


__all__ = [
    "aggregate",
    "compute_balance",
    "sort_entries",
    "split_active_archived",
    "filter_by_date_range",
]
