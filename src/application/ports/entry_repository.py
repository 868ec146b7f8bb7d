"""Port for ledger entry persistence."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from src.domain.models.ledger import Entry, EntryDeletionCriteria, EntryDraft


class EntryRepositoryPort(Protocol):
    """Port exposing ledger entry reads and writes."""

    def list_entries(self, customer_id: str) -> list[Entry]:
        """Return a customer's entries ordered by (date, created_at)."""

    def list_entries_for_customers(
        self,
        customer_ids: Sequence[str],
    ) -> dict[str, list[Entry]]:
        """Return entries grouped by customer identifier."""

    def insert_entry(self, draft: EntryDraft) -> Entry:
        """Persist a new entry and return it with its identifiers."""

    def update_entry(self, entry_id: str, fields: Mapping[str, Any]) -> None:
        """Apply a partial update to one entry."""

    def set_archived(self, entry_ids: Sequence[str], archived: bool) -> int:
        """Set the archived flag on the given entries."""

    def delete_entries(self, criteria: EntryDeletionCriteria) -> int:
        """Delete the entries matching the criteria and return the count."""


__all__ = ["EntryRepositoryPort"]
