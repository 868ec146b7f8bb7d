"""SQLAlchemy-backed repository for customers."""

from datetime import datetime, timezone
import uuid

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.exceptions import RepositoryError
from src.domain.models.ledger import Customer
from src.infrastructure.schema import customer_table, entries_table


class SqlAlchemyCustomerRepository(CustomerRepositoryPort):
    """Customer repository filtering every statement on the owner."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def list_customers(self, owner_id: str) -> list[Customer]:
        """Return the owner's customers ordered by name."""
        query = (
            select(customer_table)
            .where(customer_table.c.user_id == owner_id)
            .order_by(customer_table.c.name)
        )
        try:
            with self._db_port.get_ledger_engine().connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to load customers: {exc}") from exc
        return [_to_customer(row) for row in rows]

    def get_customer(self, customer_id: str, owner_id: str) -> Customer | None:
        """Return one customer, or None when it is missing or not owned."""
        query = select(customer_table).where(
            customer_table.c.id == customer_id,
            customer_table.c.user_id == owner_id,
        )
        try:
            with self._db_port.get_ledger_engine().connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to load customer: {exc}") from exc
        return _to_customer(row) if row is not None else None

    def insert_customer(self, owner_id: str, name: str) -> Customer:
        """Create a customer for the owner."""
        customer = Customer(
            id=str(uuid.uuid4()),
            name=name,
            user_id=owner_id,
            created_at=_utcnow(),
        )
        try:
            with self._db_port.get_ledger_engine().begin() as conn:
                conn.execute(
                    customer_table.insert().values(
                        id=customer.id,
                        name=customer.name,
                        user_id=customer.user_id,
                        created_at=customer.created_at,
                    )
                )
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to add customer: {exc}") from exc
        return customer

    def rename_customer(self, customer_id: str, owner_id: str, name: str) -> None:
        """Rename a customer owned by the owner.

        Raises:
            RepositoryError: If no owned customer matches.
        """
        statement = (
            update(customer_table)
            .where(
                customer_table.c.id == customer_id,
                customer_table.c.user_id == owner_id,
            )
            .values(name=name)
        )
        try:
            with self._db_port.get_ledger_engine().begin() as conn:
                result = conn.execute(statement)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to rename customer: {exc}") from exc
        if result.rowcount == 0:
            raise RepositoryError(f"Customer {customer_id} was not updated")

    def delete_customer_cascade(self, customer_id: str, owner_id: str) -> None:
        """Delete a customer's entries, then the customer, in one transaction.

        Raises:
            RepositoryError: If no owned customer matches or the store fails.
        """
        owned = select(customer_table.c.id).where(
            customer_table.c.id == customer_id,
            customer_table.c.user_id == owner_id,
        )
        try:
            with self._db_port.get_ledger_engine().begin() as conn:
                if conn.execute(owned).first() is None:
                    raise RepositoryError(f"Customer {customer_id} not found")
                conn.execute(
                    delete(entries_table).where(
                        entries_table.c.customer_id == customer_id
                    )
                )
                conn.execute(
                    delete(customer_table).where(
                        customer_table.c.id == customer_id,
                        customer_table.c.user_id == owner_id,
                    )
                )
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to delete customer: {exc}") from exc


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_customer(row) -> Customer:
    return Customer(
        id=row.id,
        name=row.name,
        user_id=row.user_id,
        created_at=row.created_at,
    )


__all__ = ["SqlAlchemyCustomerRepository"]
