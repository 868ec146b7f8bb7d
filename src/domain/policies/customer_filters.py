"""Search, balance filters, and sort orders for the customer list."""

from collections.abc import Iterable

from src.domain.models.customers import CustomerSummary

BALANCE_FILTERS = ("all", "positive", "negative", "zero")
SORT_ORDERS = ("name", "balance", "entries")


def matches_search(summary: CustomerSummary, query: str) -> bool:
    """Return True when the customer name contains the query.

    Args:
        summary: Customer summary to evaluate.
        query: Case-insensitive search text; blank matches everything.

    Returns:
        bool: True when the customer should be shown.
    """
    needle = query.strip().lower()
    if not needle:
        return True
    return needle in summary.name.lower()


def matches_balance_filter(summary: CustomerSummary, balance_filter: str) -> bool:
    """Return True when the balance satisfies the selected filter."""
    if balance_filter == "positive":
        return summary.balance > 0
    if balance_filter == "negative":
        return summary.balance < 0
    if balance_filter == "zero":
        return summary.balance == 0
    return True


def filter_and_sort_customers(
    summaries: Iterable[CustomerSummary],
    query: str = "",
    balance_filter: str = "all",
    sort_by: str = "name",
) -> list[CustomerSummary]:
    """Apply search, balance filter, and sort order.

    Names sort ascending (case-insensitive); balances and entry counts sort
    descending.
    """
    selected = [
        summary
        for summary in summaries
        if matches_search(summary, query)
        and matches_balance_filter(summary, balance_filter)
    ]
    if sort_by == "balance":
        return sorted(selected, key=lambda s: s.balance, reverse=True)
    if sort_by == "entries":
        return sorted(selected, key=lambda s: s.active_count, reverse=True)
    return sorted(selected, key=lambda s: s.name.lower())


__all__ = [
    "BALANCE_FILTERS",
    "SORT_ORDERS",
    "matches_search",
    "matches_balance_filter",
    "filter_and_sort_customers",
]
