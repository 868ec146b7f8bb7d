"""Domain models for the customer dashboard."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.ledger import Customer


@dataclass(frozen=True)
class CustomerSummary:
    """Customer with the figures shown in the customer list."""

    customer: Customer
    balance: Decimal
    active_count: int
    archived_count: int
    last_activity: date | None = None

    @property
    def name(self) -> str:
        return self.customer.name


@dataclass(frozen=True)
class DashboardStats:
    """Headline figures across every customer of a user."""

    total_customers: int
    total_balance: Decimal
    positive_balances: int
    negative_balances: int
    total_entries: int


__all__ = ["CustomerSummary", "DashboardStats"]
