"""Pure helpers shaping ledger data for Streamlit widgets."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models.customers import CustomerSummary
from src.domain.models.ledger import Entry
from src.domain.models.reports import format_report_date, format_weight


def balance_label(balance: Decimal) -> str:
    """Return the side a balance sits on."""
    if balance > 0:
        return "Credit"
    if balance < 0:
        return "Debit"
    return "Settled"


def format_balance(balance: Decimal) -> str:
    """Format a balance as its absolute weight and side."""
    return f"{format_weight(abs(balance))} ({balance_label(balance)})"


def entries_table(entries: Sequence[Entry]) -> list[dict[str, str]]:
    """Return table rows for a list of entries."""
    return [
        {
            "Date": format_report_date(entry.date),
            "Gross Weight": format_weight(entry.gross_weight),
            "Melting": entry.melting or "",
            "Wastage": (
                format_weight(entry.wastage) if entry.wastage is not None else ""
            ),
            "Net Weight": format_weight(entry.net_weight),
        }
        for entry in entries
    ]


def customers_table(summaries: Sequence[CustomerSummary]) -> list[dict[str, str | int]]:
    """Return table rows for the customer list."""
    return [
        {
            "Customer": summary.name,
            "Balance": format_balance(summary.balance),
            "Entries": summary.active_count,
            "Archived": summary.archived_count,
            "Last Activity": (
                format_report_date(summary.last_activity)
                if summary.last_activity
                else "-"
            ),
        }
        for summary in summaries
    ]


def balance_chart_data(
    summaries: Sequence[CustomerSummary],
    max_customers: int = 10,
) -> list[dict[str, str | float]]:
    """Prepare bar chart data for the largest non-zero balances.

    Args:
        summaries: Customer summaries to chart.
        max_customers: Number of bars to keep, by absolute balance.

    Returns:
        list[dict[str, str | float]]: Altair-ready rows.
    """
    non_zero = [summary for summary in summaries if summary.balance != 0]
    largest = sorted(
        non_zero,
        key=lambda summary: abs(summary.balance),
        reverse=True,
    )[:max_customers]
    return [
        {
            "customer": summary.name,
            "balance": float(summary.balance),
            "side": balance_label(summary.balance),
            "balance_label": format_balance(summary.balance),
        }
        for summary in largest
    ]


def entry_option_label(entry: Entry) -> str:
    """Return a compact label identifying an entry in a select box."""
    return (
        f"{format_report_date(entry.date)} | {entry.entry_type} | "
        f"gross {format_weight(entry.gross_weight)} | "
        f"net {format_weight(entry.net_weight)}"
    )


def entries_of_type(entries: Sequence[Entry], entry_type: str) -> list[Entry]:
    """Return the entries of one type, keeping their order."""
    return [entry for entry in entries if entry.entry_type == entry_type]


def wastage_placeholder(remembered: Decimal | None) -> str:
    """Return the hint shown in an empty wastage field."""
    if remembered is None:
        return "Optional"
    return f"Last used: {remembered}"


__all__ = [
    "balance_label",
    "format_balance",
    "entries_table",
    "customers_table",
    "balance_chart_data",
    "entry_option_label",
    "entries_of_type",
    "wastage_placeholder",
]
