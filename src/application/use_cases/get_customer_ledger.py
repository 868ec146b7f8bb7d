"""Use case to read a customer's ledger with its totals."""

from dataclasses import dataclass

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.application.use_cases.customer_access import require_owned_customer
from src.domain.models.ledger import Customer, Entry, LedgerSummary
from src.domain.services.aggregation import (
    aggregate,
    sort_entries,
    split_active_archived,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerView:
    """Freshly read ledger of one customer.

    Attributes:
        customer: Owner-checked customer.
        active: Active entries ordered by (date, created_at).
        archived: Archived entries in the same order.
        summary: Totals for both partitions.
    """

    customer: Customer
    active: list[Entry]
    archived: list[Entry]
    summary: LedgerSummary


class GetCustomerLedgerUseCase:
    """Fetch a customer's entries and aggregate them."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        logger=None,
    ) -> None:
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._logger = logger or get_app_logger()

    def execute(self, customer_id: str, owner_id: str) -> LedgerView:
        """Return the ledger view.

        Args:
            customer_id: Customer to read.
            owner_id: Signed-in user; the customer must belong to them.

        Returns:
            LedgerView: Sorted partitions and their totals.

        Raises:
            InvalidInput: If the customer does not exist for this owner.
        """
        customer = require_owned_customer(
            self._customer_repository,
            customer_id,
            owner_id,
        )
        entries = sort_entries(self._entry_repository.list_entries(customer_id))
        active, archived = split_active_archived(entries)
        summary = aggregate(entries)
        self._logger.info(
            f"Ledger loaded for customer={customer_id}: "
            f"active={len(active)}, archived={len(archived)}, "
            f"balance={summary.balance}"
        )
        return LedgerView(
            customer=customer,
            active=active,
            archived=archived,
            summary=summary,
        )


__all__ = ["GetCustomerLedgerUseCase", "LedgerView"]
