"""Application use cases package."""

from .archive_entries import ArchiveEntryUseCase, RestoreEntriesUseCase
from .export_reports import (
    ExportArchivedEntriesUseCase,
    ExportCurrentEntriesUseCase,
    ExportedReport,
)
from .get_customer_dashboard import CustomerDashboard, GetCustomerDashboardUseCase
from .get_customer_ledger import GetCustomerLedgerUseCase, LedgerView
from .manage_customers import (
    AddCustomerUseCase,
    DeleteCustomerUseCase,
    RenameCustomerUseCase,
)
from .record_entry import EditEntryUseCase, RecordEntryResult, RecordEntryUseCase
from .rollover_ledger import RolloverLedgerUseCase, RolloverResult

__all__ = [
    "ArchiveEntryUseCase",
    "RestoreEntriesUseCase",
    "ExportArchivedEntriesUseCase",
    "ExportCurrentEntriesUseCase",
    "ExportedReport",
    "CustomerDashboard",
    "GetCustomerDashboardUseCase",
    "GetCustomerLedgerUseCase",
    "LedgerView",
    "AddCustomerUseCase",
    "DeleteCustomerUseCase",
    "RenameCustomerUseCase",
    "EditEntryUseCase",
    "RecordEntryResult",
    "RecordEntryUseCase",
    "RolloverLedgerUseCase",
    "RolloverResult",
]
