"""Use cases to record new ledger entries and edit existing ones."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.application.use_cases.customer_access import (
    find_entry,
    require_owned_customer,
)
from src.domain.models.ledger import Entry, EntryDraft
from src.domain.services.valuation import value_entry
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RecordEntryResult:
    """Outcome of recording an entry.

    Attributes:
        entry: Persisted entry.
        remembered_wastage: Wastage to pre-fill for the next entry; the
            caller keeps it between requests.
    """

    entry: Entry
    remembered_wastage: Decimal | None


class RecordEntryUseCase:
    """Value a new entry and insert it into a customer's ledger."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            customer_repository: Port used to check the customer's owner.
            entry_repository: Port used to persist the entry.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_id: str,
        owner_id: str,
        entry_type: str,
        entry_date,
        gross_weight,
        melting,
        wastage=None,
        last_wastage=None,
    ) -> RecordEntryResult:
        """Validate, value, and persist the entry.

        Args:
            customer_id: Customer owning the ledger.
            owner_id: Signed-in user; the customer must belong to them.
            entry_type: credit or debit.
            entry_date: Entry date (date or ISO string).
            gross_weight: Gross weight input.
            melting: ``F`` or a melting percentage.
            wastage: Optional wastage percentage.
            last_wastage: Wastage remembered from the previous entry.

        Returns:
            RecordEntryResult: Stored entry and the wastage to remember.

        Raises:
            InvalidInput: If the customer is not found for this owner, or the
                form is incomplete or malformed; nothing is written then.
            RepositoryError: If the insert fails.
        """
        require_owned_customer(self._customer_repository, customer_id, owner_id)
        valuation = value_entry(
            entry_type,
            entry_date,
            gross_weight,
            melting,
            wastage=wastage,
            last_wastage=last_wastage,
        )
        entry = self._entry_repository.insert_entry(
            EntryDraft(
                customer_id=customer_id,
                entry_type=valuation.entry_type,
                date=valuation.date,
                gross_weight=valuation.gross_weight,
                melting=valuation.melting,
                wastage=valuation.wastage,
                net_weight=valuation.net_weight,
                archived=False,
            )
        )
        self._logger.info(
            f"Recorded {entry.entry_type} entry id={entry.id} "
            f"customer={customer_id} net={entry.net_weight}"
        )
        return RecordEntryResult(
            entry=entry,
            remembered_wastage=valuation.remembered_wastage,
        )


class EditEntryUseCase:
    """Re-value an existing entry after the user edits it.

    Edits do not use the remembered wastage: a blank wastage means zero.
    """

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        logger=None,
    ) -> None:
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_id: str,
        owner_id: str,
        entry_id: str,
        entry_date,
        gross_weight,
        melting,
        wastage=None,
    ) -> Entry:
        require_owned_customer(self._customer_repository, customer_id, owner_id)
        entry = find_entry(
            self._entry_repository.list_entries(customer_id),
            entry_id,
        )
        valuation = value_entry(
            entry.entry_type,
            entry_date,
            gross_weight,
            melting,
            wastage=wastage,
        )
        self._entry_repository.update_entry(
            entry.id,
            {
                "date": valuation.date,
                "gross_weight": valuation.gross_weight,
                "melting": valuation.melting,
                "wastage": valuation.wastage,
                "net_weight": valuation.net_weight,
            },
        )
        self._logger.info(
            f"Edited entry id={entry.id}: net {entry.net_weight} -> "
            f"{valuation.net_weight}"
        )
        return entry


__all__ = ["RecordEntryUseCase", "RecordEntryResult", "EditEntryUseCase"]
