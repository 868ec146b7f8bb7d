"""SQLAlchemy-backed repository for ledger entries."""

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any
import uuid

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.entry_repository import EntryRepositoryPort
from src.domain.exceptions import InvalidInput, RepositoryError
from src.domain.models.ledger import Entry, EntryDeletionCriteria, EntryDraft
from src.infrastructure.schema import entries_table

# Entry attribute -> entries column.
_UPDATABLE_COLUMNS = {
    "entry_type": "type",
    "date": "date",
    "gross_weight": "gross_weight",
    "melting": "melting",
    "wastage": "waistage",
    "net_weight": "net_weight",
    "archived": "archived",
}


class SqlAlchemyEntryRepository(EntryRepositoryPort):
    """Entry repository backed by SQLAlchemy Core statements."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def list_entries(self, customer_id: str) -> list[Entry]:
        """Return a customer's entries ordered by date then creation time."""
        query = (
            select(entries_table)
            .where(entries_table.c.customer_id == customer_id)
            .order_by(entries_table.c.date, entries_table.c.created_at)
        )
        try:
            with self._db_port.get_ledger_engine().connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to load entries: {exc}") from exc
        return [_to_entry(row) for row in rows]

    def list_entries_for_customers(
        self,
        customer_ids: Sequence[str],
    ) -> dict[str, list[Entry]]:
        """Return entries grouped by customer, each group in ledger order.

        Every requested customer gets a key, even without entries.
        """
        grouped: dict[str, list[Entry]] = {
            customer_id: [] for customer_id in customer_ids
        }
        if not grouped:
            return grouped
        query = (
            select(entries_table)
            .where(entries_table.c.customer_id.in_(list(grouped)))
            .order_by(entries_table.c.date, entries_table.c.created_at)
        )
        try:
            with self._db_port.get_ledger_engine().connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to load entries: {exc}") from exc
        for row in rows:
            grouped[row.customer_id].append(_to_entry(row))
        return grouped

    def insert_entry(self, draft: EntryDraft) -> Entry:
        """Persist a new entry and return it with its identifiers."""
        entry = Entry(
            id=str(uuid.uuid4()),
            customer_id=draft.customer_id,
            entry_type=draft.entry_type,
            date=draft.date,
            gross_weight=draft.gross_weight,
            melting=draft.melting,
            wastage=draft.wastage,
            net_weight=draft.net_weight,
            archived=draft.archived,
            created_at=_utcnow(),
        )
        try:
            with self._db_port.get_ledger_engine().begin() as conn:
                conn.execute(
                    entries_table.insert().values(
                        id=entry.id,
                        customer_id=entry.customer_id,
                        type=entry.entry_type,
                        date=entry.date,
                        gross_weight=entry.gross_weight,
                        melting=entry.melting,
                        waistage=entry.wastage,
                        net_weight=entry.net_weight,
                        archived=entry.archived,
                        created_at=entry.created_at,
                    )
                )
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to add entry: {exc}") from exc
        return entry

    def update_entry(self, entry_id: str, fields: Mapping[str, Any]) -> None:
        """Apply a partial update to one entry.

        Args:
            entry_id: Identifier of the entry to update.
            fields: Entry attribute names mapped to their new values.

        Raises:
            InvalidInput: If a field cannot be updated.
            RepositoryError: If the entry does not exist or the store fails.
        """
        unknown = sorted(set(fields) - set(_UPDATABLE_COLUMNS))
        if unknown:
            raise InvalidInput(f"Cannot update entry fields: {', '.join(unknown)}")
        if not fields:
            return
        values = {_UPDATABLE_COLUMNS[name]: value for name, value in fields.items()}
        statement = (
            update(entries_table)
            .where(entries_table.c.id == entry_id)
            .values(**values)
        )
        try:
            with self._db_port.get_ledger_engine().begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to update entry: {exc}") from exc
        if result.rowcount == 0:
            raise RepositoryError(f"Entry {entry_id} not found")

    def set_archived(self, entry_ids: Sequence[str], archived: bool) -> int:
        """Set the archived flag on the given entries.

        Returns:
            int: Number of entries updated.
        """
        ids = list(entry_ids)
        if not ids:
            return 0
        statement = (
            update(entries_table)
            .where(entries_table.c.id.in_(ids))
            .values(archived=archived)
        )
        try:
            with self._db_port.get_ledger_engine().begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to update entries: {exc}") from exc
        return result.rowcount

    def delete_entries(self, criteria: EntryDeletionCriteria) -> int:
        """Delete the entries matching the criteria.

        An id set is always scoped to ``criteria.customer_id``. Without ids
        the compound predicate applies: customer, then the archived flag
        and the net-weight inequality when they are set.

        Returns:
            int: Number of entries deleted.
        """
        conditions = [entries_table.c.customer_id == criteria.customer_id]
        if criteria.entry_ids is not None:
            if not criteria.entry_ids:
                return 0
            conditions.append(entries_table.c.id.in_(list(criteria.entry_ids)))
        else:
            if criteria.archived is not None:
                conditions.append(entries_table.c.archived == criteria.archived)
            if criteria.net_weight_not_equal is not None:
                conditions.append(
                    entries_table.c.net_weight != criteria.net_weight_not_equal
                )
        statement = delete(entries_table).where(*conditions)
        try:
            with self._db_port.get_ledger_engine().begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to delete entries: {exc}") from exc
        return result.rowcount


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_entry(row) -> Entry:
    return Entry(
        id=row.id,
        customer_id=row.customer_id,
        entry_type=row.type,
        date=row.date,
        gross_weight=row.gross_weight,
        melting=row.melting,
        wastage=row.waistage,
        net_weight=row.net_weight,
        archived=bool(row.archived),
        created_at=row.created_at,
    )


__all__ = ["SqlAlchemyEntryRepository"]
