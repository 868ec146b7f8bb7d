"""Tests for the Streamlit ledger view helpers."""

from datetime import date
from decimal import Decimal

from src.adapters.interface.streamlit import ledger_views
from src.domain.models.customers import CustomerSummary
from src.domain.models.ledger import Customer


def _summary(name: str, balance: str) -> CustomerSummary:
    return CustomerSummary(
        customer=Customer(id=name, name=name, user_id="u1"),
        balance=Decimal(balance),
        active_count=2,
        archived_count=1,
        last_activity=date(2024, 3, 9),
    )


def test_balance_labels() -> None:
    assert ledger_views.format_balance(Decimal("6")) == "6.000 (Credit)"
    assert ledger_views.format_balance(Decimal("-2.5")) == "2.500 (Debit)"
    assert ledger_views.format_balance(Decimal("0")) == "0.000 (Settled)"


def test_entries_table(make_entry) -> None:
    rows = ledger_views.entries_table(
        [
            make_entry("credit", "9.2", melting="90", wastage=Decimal("2")),
            make_entry("credit", "10"),
        ]
    )

    assert rows[0] == {
        "Date": "01/01/2024",
        "Gross Weight": "10.000",
        "Melting": "90",
        "Wastage": "2.000",
        "Net Weight": "9.200",
    }
    assert rows[1]["Wastage"] == ""


def test_customers_table() -> None:
    (row,) = ledger_views.customers_table([_summary("Asha", "-1")])

    assert row == {
        "Customer": "Asha",
        "Balance": "1.000 (Debit)",
        "Entries": 2,
        "Archived": 1,
        "Last Activity": "09/03/2024",
    }


def test_balance_chart_keeps_largest_non_zero_balances() -> None:
    summaries = [
        _summary("A", "1"),
        _summary("B", "-9"),
        _summary("C", "0"),
        _summary("D", "4"),
    ]

    data = ledger_views.balance_chart_data(summaries, max_customers=2)

    assert [row["customer"] for row in data] == ["B", "D"]
    assert data[0]["balance"] == -9.0
    assert data[0]["side"] == "Debit"


def test_entry_helpers(make_entry) -> None:
    credit = make_entry("credit", "5")
    debit = make_entry("debit", "2")

    assert ledger_views.entries_of_type([credit, debit], "debit") == [debit]
    assert "net 5.000" in ledger_views.entry_option_label(credit)
    assert ledger_views.wastage_placeholder(None) == "Optional"
    assert ledger_views.wastage_placeholder(Decimal("1.5")) == "Last used: 1.5"
