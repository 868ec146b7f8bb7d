"""Use case to roll a customer's balance over to the opposite side.

The rollover writes twice: the balancing entry is inserted first, then the
settled entries are deleted. The store offers no transaction spanning both
calls, so a failed delete leaves the settled balance counted twice. That
state is reported as ``PartialSettlementFailure`` and can be completed with
``retry_removal``.
"""

from dataclasses import dataclass
from datetime import date

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.application.use_cases.customer_access import require_owned_customer
from src.domain.exceptions import PartialSettlementFailure, RepositoryError
from src.domain.models.ledger import Entry, SettlementPlan
from src.domain.policies.settlement import SettlementRemovalPolicy
from src.domain.services.aggregation import split_active_archived
from src.domain.services.settlement import settle
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RolloverResult:
    """Outcome of a completed rollover.

    Attributes:
        plan: Settlement plan that was applied.
        inserted_entry: Balancing entry stored in the ledger.
        removed_count: Number of entries deleted by the store.
    """

    plan: SettlementPlan
    inserted_entry: Entry
    removed_count: int


class RolloverLedgerUseCase:
    """Replace the active ledger of a customer with one balancing entry."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        policy: SettlementRemovalPolicy | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            customer_repository: Port used to check the customer's owner.
            entry_repository: Port used to read and mutate entries.
            policy: Removal policy; the settlement default applies if None.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._policy = policy
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_id: str,
        owner_id: str,
        today: date | None = None,
    ) -> RolloverResult:
        """Settle the active ledger.

        Args:
            customer_id: Customer whose ledger is rolled over.
            owner_id: Signed-in user; the customer must belong to them.
            today: Date of the settlement entry; defaults to today.

        Returns:
            RolloverResult: Plan, inserted entry, and deletion count.

        Raises:
            InvalidInput: If the customer is not found for this owner.
            NothingToSettle: If the active balance is zero; nothing is written.
            RepositoryError: If the insert fails; nothing is written.
            PartialSettlementFailure: If the insert succeeded but the delete
                failed.
        """
        require_owned_customer(self._customer_repository, customer_id, owner_id)
        entries = self._entry_repository.list_entries(customer_id)
        active, _ = split_active_archived(entries)
        plan = settle(
            active,
            today=today or date.today(),
            policy=self._policy,
        )
        self._logger.info(
            f"Rollover planned for customer={customer_id}: "
            f"balance={plan.balance}, new {plan.new_entry.entry_type} "
            f"entry net={plan.new_entry.net_weight}, "
            f"removing {len(plan.entries_to_remove)} entries"
        )

        inserted = self._entry_repository.insert_entry(plan.new_entry)
        try:
            removed = self._entry_repository.delete_entries(plan.criteria)
        except RepositoryError as exc:
            self._logger.error(
                f"Rollover for customer={customer_id} inserted entry "
                f"id={inserted.id} but failed to remove settled entries: {exc}"
            )
            raise PartialSettlementFailure(
                "Balance entry was added but old entries were not cleared. "
                "Retry the removal or reconcile the ledger manually.",
                customer_id=customer_id,
                inserted_entry=inserted,
                criteria=plan.criteria,
            ) from exc

        self._logger.info(
            f"Rollover completed for customer={customer_id}: "
            f"removed={removed}"
        )
        return RolloverResult(
            plan=plan,
            inserted_entry=inserted,
            removed_count=removed,
        )

    def retry_removal(
        self,
        failure: PartialSettlementFailure,
        owner_id: str,
    ) -> int:
        """Repeat the deletion step of a partially applied rollover.

        Args:
            failure: Error raised by a previous ``execute`` call.
            owner_id: Signed-in user; the failed ledger must belong to them.

        Returns:
            int: Number of entries deleted.

        Raises:
            InvalidInput: If the customer is not found for this owner.
            RepositoryError: If the delete fails again.
        """
        require_owned_customer(
            self._customer_repository,
            failure.customer_id,
            owner_id,
        )
        removed = self._entry_repository.delete_entries(failure.criteria)
        self._logger.info(
            f"Rollover removal retried for customer={failure.customer_id}: "
            f"removed={removed}"
        )
        return removed


__all__ = ["RolloverLedgerUseCase", "RolloverResult"]
