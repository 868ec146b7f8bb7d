"""Domain policies package."""

from .customer_filters import (
    BALANCE_FILTERS,
    SORT_ORDERS,
    filter_and_sort_customers,
)
from .settlement import (
    ALL_ACTIVE,
    UNEQUAL_NET_WEIGHT,
    AllActiveRemoval,
    SettlementRemovalPolicy,
    UnequalNetWeightRemoval,
    get_removal_policy,
)

__all__ = [
    "BALANCE_FILTERS",
    "SORT_ORDERS",
    "filter_and_sort_customers",
    "ALL_ACTIVE",
    "UNEQUAL_NET_WEIGHT",
    "AllActiveRemoval",
    "SettlementRemovalPolicy",
    "UnequalNetWeightRemoval",
    "get_removal_policy",
]
