"""Use case to build the customer list and dashboard figures."""

from dataclasses import dataclass

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.domain.models.customers import CustomerSummary, DashboardStats
from src.domain.policies.customer_filters import filter_and_sort_customers
from src.domain.services.customer_summary import (
    compute_dashboard_stats,
    summarize_customers,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class CustomerDashboard:
    """Customer summaries to display and stats over all customers.

    Attributes:
        customers: Summaries after search, filter, and sort.
        stats: Figures computed over every customer of the owner.
    """

    customers: list[CustomerSummary]
    stats: DashboardStats


class GetCustomerDashboardUseCase:
    """Load an owner's customers with their balances."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            customer_repository: Port providing owner-scoped customers.
            entry_repository: Port providing the customers' entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        owner_id: str,
        query: str = "",
        balance_filter: str = "all",
        sort_by: str = "name",
    ) -> CustomerDashboard:
        """Return the dashboard for one owner.

        Args:
            owner_id: Identifier of the signed-in user.
            query: Case-insensitive name search.
            balance_filter: One of all, positive, negative, zero.
            sort_by: One of name, balance, entries.

        Returns:
            CustomerDashboard: Filtered summaries and overall stats.
        """
        customers = self._customer_repository.list_customers(owner_id)
        entries_by_customer = self._entry_repository.list_entries_for_customers(
            [customer.id for customer in customers]
        )
        summaries = summarize_customers(customers, entries_by_customer)
        stats = compute_dashboard_stats(summaries)
        self._logger.info(
            f"Loaded {len(customers)} customers for owner={owner_id}"
        )
        return CustomerDashboard(
            customers=filter_and_sort_customers(
                summaries,
                query=query,
                balance_filter=balance_filter,
                sort_by=sort_by,
            ),
            stats=stats,
        )


__all__ = ["GetCustomerDashboardUseCase", "CustomerDashboard"]
