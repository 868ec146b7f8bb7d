"""Use cases to archive and restore ledger entries."""

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.application.use_cases.customer_access import (
    find_entry,
    require_owned_customer,
)
from src.domain.exceptions import InvalidInput
from src.domain.services.normalization import normalize_entry_type
from src.infrastructure.logging.logger import get_app_logger


class ArchiveEntryUseCase:
    """Move one entry out of the active balance."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        logger=None,
    ) -> None:
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._logger = logger or get_app_logger()

    def execute(self, customer_id: str, owner_id: str, entry_id: str) -> None:
        require_owned_customer(self._customer_repository, customer_id, owner_id)
        entry = find_entry(
            self._entry_repository.list_entries(customer_id),
            entry_id,
        )
        if entry.archived:
            raise InvalidInput("Entry is already archived.")
        updated = self._entry_repository.set_archived([entry.id], True)
        self._logger.info(f"Archived entry id={entry.id} (rows={updated})")


class RestoreEntriesUseCase:
    """Bring archived entries back into the active balance."""

    def __init__(
        self,
        customer_repository: CustomerRepositoryPort,
        entry_repository: EntryRepositoryPort,
        logger=None,
    ) -> None:
        self._customer_repository = customer_repository
        self._entry_repository = entry_repository
        self._logger = logger or get_app_logger()

    def execute(self, customer_id: str, owner_id: str, entry_type: str) -> int:
        """Restore every archived entry of one type.

        Args:
            customer_id: Customer whose ledger is changed.
            owner_id: Signed-in user; the customer must belong to them.
            entry_type: ``credit`` or ``debit``.

        Returns:
            int: Number of entries restored.

        Raises:
            InvalidInput: If the customer is not found for this owner, or
                there is nothing to restore.
        """
        require_owned_customer(self._customer_repository, customer_id, owner_id)
        wanted = normalize_entry_type(entry_type)
        entry_ids = [
            entry.id
            for entry in self._entry_repository.list_entries(customer_id)
            if entry.archived and entry.entry_type == wanted
        ]
        if not entry_ids:
            raise InvalidInput("No archived entries to restore.")
        restored = self._entry_repository.set_archived(entry_ids, False)
        self._logger.info(
            f"Restored {restored} archived {wanted} entries "
            f"for customer={customer_id}"
        )
        return restored


__all__ = ["ArchiveEntryUseCase", "RestoreEntriesUseCase"]
