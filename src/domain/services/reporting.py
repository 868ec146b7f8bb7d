"""Build report content (rows, totals, layout) from ledger entries."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from src.domain.constants import DEFAULT_SINGLE_COLUMN_THRESHOLD
from src.domain.exceptions import NothingToExport
from src.domain.models.ledger import Entry
from src.domain.models.reports import (
    DUAL_COLUMN,
    SINGLE_COLUMN,
    ArchivedEntriesReport,
    CurrentEntriesReport,
    ReportRow,
)
from src.domain.services.aggregation import (
    aggregate,
    filter_by_date_range,
    sort_entries,
)
from src.domain.services.validation import validate_date_range
from src.utils.decimal_utils import quantize_weight

# Landscape A4 geometry (mm) used to decide whether two tables fit side by side.
_PAGE_HEIGHT = 210
_TABLES_TOP = 55
_FOOTER_SPACE = 40
_TABLE_CHROME = 40
_ROW_HEIGHT = 6


def to_report_row(entry: Entry) -> ReportRow:
    """Convert an entry into a report row with 3-decimal weights."""
    return ReportRow(
        date=entry.date,
        entry_type=entry.entry_type,
        gross_weight=quantize_weight(entry.gross_weight),
        melting=entry.melting or "",
        net_weight=quantize_weight(entry.net_weight),
    )


def choose_layout(
    credit_count: int,
    debit_count: int,
    single_column_threshold: int = DEFAULT_SINGLE_COLUMN_THRESHOLD,
) -> str:
    """Return ``single`` or ``dual`` for the current entries report.

    Large ledgers, or a taller table that would overflow the first page
    when placed side by side, use a single full-width column.
    """
    if credit_count + debit_count > single_column_threshold:
        return SINGLE_COLUMN
    estimated = _TABLE_CHROME + max(credit_count, debit_count) * _ROW_HEIGHT
    available = _PAGE_HEIGHT - _TABLES_TOP - _FOOTER_SPACE
    if estimated > available:
        return SINGLE_COLUMN
    return DUAL_COLUMN


def build_current_entries_report(
    customer_name: str,
    entries: Iterable[Entry],
    *,
    generated_at: datetime,
    single_column_threshold: int = DEFAULT_SINGLE_COLUMN_THRESHOLD,
) -> CurrentEntriesReport:
    """Build the current entries report content.

    Args:
        customer_name: Name printed in the header.
        entries: Ledger entries; archived ones are skipped.
        generated_at: Timestamp printed in the header.
        single_column_threshold: Row count above which one column is used.

    Returns:
        CurrentEntriesReport: Credit and debit rows with their totals.

    Raises:
        NothingToExport: If there are no active entries.
    """
    active = [entry for entry in sort_entries(entries) if not entry.archived]
    if not active:
        raise NothingToExport("No current entries to download")
    summary = aggregate(active)
    credit_rows = [to_report_row(e) for e in active if e.is_credit]
    debit_rows = [to_report_row(e) for e in active if e.is_debit]
    return CurrentEntriesReport(
        customer_name=customer_name,
        generated_at=generated_at,
        credit_rows=credit_rows,
        debit_rows=debit_rows,
        credit_total=summary.credit_total,
        debit_total=summary.debit_total,
        layout=choose_layout(
            len(credit_rows),
            len(debit_rows),
            single_column_threshold,
        ),
    )


def build_archived_entries_report(
    customer_name: str,
    entries: Sequence[Entry],
    start_date: date | None,
    end_date: date | None,
    *,
    generated_at: datetime,
) -> ArchivedEntriesReport:
    """Build the archived entries report for an inclusive date range.

    Raises:
        InvalidInput: If the range is incomplete or reversed.
        NothingToExport: If no archived entry falls within the range.
    """
    start_date, end_date = validate_date_range(start_date, end_date)
    archived = [entry for entry in sort_entries(entries) if entry.archived]
    selected = filter_by_date_range(archived, start_date, end_date)
    if not selected:
        raise NothingToExport(
            "No archived entries found in the selected date range"
        )
    # Totals come from the archived partition of the selected rows.
    totals = aggregate(selected).archived
    return ArchivedEntriesReport(
        customer_name=customer_name,
        start_date=start_date,
        end_date=end_date,
        generated_at=generated_at,
        rows=[to_report_row(entry) for entry in selected],
        credit_total=totals.credit_total,
        debit_total=totals.debit_total,
    )


def current_entries_filename(customer_name: str, today: date) -> str:
    """Return the download name of the current entries report."""
    return f"{customer_name}_Entries_Report_{today.isoformat()}.pdf"


def archived_entries_filename(
    customer_name: str,
    start_date: date,
    end_date: date,
    today: date,
) -> str:
    """Return the download name of the archived entries report."""
    start = start_date.strftime("%d-%m-%Y")
    end = end_date.strftime("%d-%m-%Y")
    return (
        f"{customer_name}_ArchivedEntries_{start}_to_{end}_"
        f"{today.isoformat()}.pdf"
    )


__all__ = [
    "to_report_row",
    "choose_layout",
    "build_current_entries_report",
    "build_archived_entries_report",
    "current_entries_filename",
    "archived_entries_filename",
]
