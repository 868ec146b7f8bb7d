"""Domain services for customer list figures and dashboard statistics."""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from src.domain.models.customers import CustomerSummary, DashboardStats
from src.domain.models.ledger import Customer, Entry
from src.domain.services.aggregation import aggregate


def summarize_customer(
    customer: Customer,
    entries: Iterable[Entry],
) -> CustomerSummary:
    """Build the list figures for one customer.

    Args:
        customer: Customer to summarize.
        entries: Every entry of the customer, active and archived.

    Returns:
        CustomerSummary: Active balance, counts, and last activity date.
    """
    entries = list(entries)
    summary = aggregate(entries)
    last_activity = max((entry.date for entry in entries), default=None)
    return CustomerSummary(
        customer=customer,
        balance=summary.balance,
        active_count=summary.active.entry_count,
        archived_count=summary.archived.entry_count,
        last_activity=last_activity,
    )


def summarize_customers(
    customers: Sequence[Customer],
    entries_by_customer: Mapping[str, Sequence[Entry]],
) -> list[CustomerSummary]:
    """Summarize customers in their given order."""
    return [
        summarize_customer(customer, entries_by_customer.get(customer.id, ()))
        for customer in customers
    ]


def compute_dashboard_stats(
    summaries: Sequence[CustomerSummary],
) -> DashboardStats:
    """Compute the headline figures of the customer dashboard."""
    return DashboardStats(
        total_customers=len(summaries),
        total_balance=sum(
            (summary.balance for summary in summaries),
            start=Decimal("0.000"),
        ),
        positive_balances=sum(1 for s in summaries if s.balance > 0),
        negative_balances=sum(1 for s in summaries if s.balance < 0),
        total_entries=sum(summary.active_count for summary in summaries),
    )


__all__ = [
    "summarize_customer",
    "summarize_customers",
    "compute_dashboard_stats",
]
