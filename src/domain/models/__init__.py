"""Domain models package."""

from .customers import CustomerSummary, DashboardStats
from .ledger import (
    Customer,
    Entry,
    EntryCounts,
    EntryDeletionCriteria,
    EntryDraft,
    EntryValuation,
    LedgerSummary,
    PartitionTotals,
    SettlementPlan,
)
from .reports import (
    ArchivedEntriesReport,
    CurrentEntriesReport,
    ReportRow,
)

__all__ = [
    "Customer",
    "Entry",
    "EntryCounts",
    "EntryDeletionCriteria",
    "EntryDraft",
    "EntryValuation",
    "LedgerSummary",
    "PartitionTotals",
    "SettlementPlan",
    "CustomerSummary",
    "DashboardStats",
    "ArchivedEntriesReport",
    "CurrentEntriesReport",
    "ReportRow",
]
