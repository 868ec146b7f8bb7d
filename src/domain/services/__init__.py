"""Domain services package."""

from .aggregation import (
    aggregate,
    compute_balance,
    filter_by_date_range,
    sort_entries,
    split_active_archived,
)
from .customer_summary import (
    compute_dashboard_stats,
    summarize_customer,
    summarize_customers,
)
from .normalization import (
    normalize_customer_name,
    normalize_entry_type,
    normalize_melting,
)
from .settlement import settle
from .validation import validate_customer_name, validate_date_range
from .valuation import is_full_weight, valuate, value_entry

__all__ = [
    "aggregate",
    "compute_balance",
    "filter_by_date_range",
    "sort_entries",
    "split_active_archived",
    "compute_dashboard_stats",
    "summarize_customer",
    "summarize_customers",
    "normalize_customer_name",
    "normalize_entry_type",
    "normalize_melting",
    "settle",
    "validate_customer_name",
    "validate_date_range",
    "is_full_weight",
    "valuate",
    "value_entry",
]
