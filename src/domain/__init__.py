"""Domain package for ledger rules and core models."""

from .constants import CREDIT, DEBIT, ENTRY_TYPES, FULL_WEIGHT_FLAG
from .exceptions import (
    AuthenticationError,
    InvalidInput,
    LedgerError,
    NothingToExport,
    NothingToSettle,
    PartialSettlementFailure,
    RepositoryError,
)
from .models import (
    Customer,
    CustomerSummary,
    DashboardStats,
    Entry,
    EntryDeletionCriteria,
    EntryDraft,
    EntryValuation,
    LedgerSummary,
    PartitionTotals,
    SettlementPlan,
)
from .policies import filter_and_sort_customers, get_removal_policy
from .services import (
    aggregate,
    compute_dashboard_stats,
    settle,
    sort_entries,
    summarize_customers,
    valuate,
    value_entry,
)

__all__ = [
    "CREDIT",
    "DEBIT",
    "ENTRY_TYPES",
    "FULL_WEIGHT_FLAG",
    "AuthenticationError",
    "InvalidInput",
    "LedgerError",
    "NothingToExport",
    "NothingToSettle",
    "PartialSettlementFailure",
    "RepositoryError",
    "Customer",
    "CustomerSummary",
    "DashboardStats",
    "Entry",
    "EntryDeletionCriteria",
    "EntryDraft",
    "EntryValuation",
    "LedgerSummary",
    "PartitionTotals",
    "SettlementPlan",
    "filter_and_sort_customers",
    "get_removal_policy",
    "aggregate",
    "compute_dashboard_stats",
    "settle",
    "sort_entries",
    "summarize_customers",
    "valuate",
    "value_entry",
]
