"""Domain models describing the content of exported reports."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

SINGLE_COLUMN = "single"
DUAL_COLUMN = "dual"


def format_weight(value: Decimal | None) -> str:
    """Format a weight with three decimals."""
    amount = value if value is not None else Decimal("0")
    return f"{amount:.3f}"


def format_report_date(value: date) -> str:
    """Format a date as dd/mm/yyyy."""
    return value.strftime("%d/%m/%Y")


@dataclass(frozen=True)
class ReportRow:
    """Single entry line of a report."""

    date: date
    entry_type: str
    gross_weight: Decimal
    melting: str
    net_weight: Decimal

    def cells(self, include_type: bool = False) -> list[str]:
        """Return the formatted table cells for this row."""
        cells = [format_report_date(self.date)]
        if include_type:
            cells.append(self.entry_type.capitalize())
        cells.extend(
            [
                format_weight(self.gross_weight),
                self.melting or "",
                format_weight(self.net_weight),
            ]
        )
        return cells


@dataclass(frozen=True)
class CurrentEntriesReport:
    """Content of the current (active) entries report."""

    customer_name: str
    generated_at: datetime
    credit_rows: list[ReportRow]
    debit_rows: list[ReportRow]
    credit_total: Decimal
    debit_total: Decimal
    layout: str = DUAL_COLUMN

    @property
    def balance(self) -> Decimal:
        return self.credit_total - self.debit_total

    @property
    def final_balance(self) -> Decimal:
        return abs(self.balance)

    @property
    def balance_status(self) -> str:
        if self.balance > 0:
            return "CREDIT BALANCE"
        if self.balance < 0:
            return "DEBIT BALANCE"
        return "BALANCED"


@dataclass(frozen=True)
class ArchivedEntriesReport:
    """Content of the archived entries report for a date range."""

    customer_name: str
    start_date: date
    end_date: date
    generated_at: datetime
    rows: list[ReportRow]
    credit_total: Decimal
    debit_total: Decimal

    @property
    def net_balance(self) -> Decimal:
        return self.credit_total - self.debit_total


__all__ = [
    "SINGLE_COLUMN",
    "DUAL_COLUMN",
    "format_weight",
    "format_report_date",
    "ReportRow",
    "CurrentEntriesReport",
    "ArchivedEntriesReport",
]
