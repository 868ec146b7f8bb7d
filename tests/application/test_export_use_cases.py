"""Tests for the report export use cases."""

from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.export_reports import (
    ExportArchivedEntriesUseCase,
    ExportCurrentEntriesUseCase,
)
from src.domain.exceptions import InvalidInput, NothingToExport
from src.domain.models.ledger import Customer
from src.domain.models.reports import SINGLE_COLUMN

ASHA = Customer(id="c1", name="Asha", user_id="u1")
NOW = datetime(2024, 7, 1, 10, 0)


def _customers(customer=ASHA) -> MagicMock:
    customers = MagicMock()
    customers.get_customer.return_value = customer
    return customers


def test_export_current_entries(make_entry) -> None:
    customers = _customers()
    repository = MagicMock()
    repository.list_entries.return_value = [
        make_entry("credit", "5"),
        make_entry("debit", "2"),
    ]
    renderer = MagicMock()
    renderer.render_current_entries.return_value = b"%PDF-current"

    exported = ExportCurrentEntriesUseCase(
        customers,
        repository,
        renderer,
        logger=MagicMock(),
        single_column_threshold=1,
    ).execute("c1", "u1", now=NOW)

    customers.get_customer.assert_called_once_with("c1", "u1")
    report = renderer.render_current_entries.call_args.args[0]
    assert report.customer_name == "Asha"
    assert report.layout == SINGLE_COLUMN
    assert exported.content == b"%PDF-current"
    assert exported.filename == "Asha_Entries_Report_2024-07-01.pdf"
    assert exported.mime_type == "application/pdf"


def test_export_current_entries_without_rows() -> None:
    repository = MagicMock()
    repository.list_entries.return_value = []
    renderer = MagicMock()

    with pytest.raises(NothingToExport):
        ExportCurrentEntriesUseCase(
            _customers(),
            repository,
            renderer,
            logger=MagicMock(),
        ).execute("c1", "u1", now=NOW)
    renderer.render_current_entries.assert_not_called()


def test_export_current_entries_of_foreign_customer_is_rejected() -> None:
    repository = MagicMock()
    renderer = MagicMock()

    with pytest.raises(InvalidInput, match="Customer not found."):
        ExportCurrentEntriesUseCase(
            _customers(None),
            repository,
            renderer,
            logger=MagicMock(),
        ).execute("c1", "u2", now=NOW)
    repository.list_entries.assert_not_called()
    renderer.render_current_entries.assert_not_called()


def test_export_archived_entries(make_entry) -> None:
    repository = MagicMock()
    repository.list_entries.return_value = [
        make_entry("credit", "5", archived=True, entry_date=date(2024, 1, 3)),
    ]
    renderer = MagicMock()
    renderer.render_archived_entries.return_value = b"%PDF-archived"

    exported = ExportArchivedEntriesUseCase(
        _customers(),
        repository,
        renderer,
        logger=MagicMock(),
    ).execute("c1", "u1", date(2024, 1, 1), date(2024, 1, 31), now=NOW)

    assert exported.content == b"%PDF-archived"
    assert exported.filename == (
        "Asha_ArchivedEntries_01-01-2024_to_31-01-2024_2024-07-01.pdf"
    )


def test_export_archived_entries_of_foreign_customer_is_rejected() -> None:
    repository = MagicMock()
    renderer = MagicMock()

    with pytest.raises(InvalidInput, match="Customer not found."):
        ExportArchivedEntriesUseCase(
            _customers(None),
            repository,
            renderer,
            logger=MagicMock(),
        ).execute("c1", "u2", date(2024, 1, 1), date(2024, 1, 31), now=NOW)
    renderer.render_archived_entries.assert_not_called()
