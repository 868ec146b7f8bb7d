"""Port for customer persistence.

Every method takes the owner identifier explicitly; implementations must
filter on it and never rely on the store to enforce per-user isolation.
"""

from typing import Protocol

from src.domain.models.ledger import Customer


class CustomerRepositoryPort(Protocol):
    """Port exposing customer reads and writes scoped to an owner."""

    def list_customers(self, owner_id: str) -> list[Customer]:
        """Return the owner's customers ordered by name."""

    def get_customer(self, customer_id: str, owner_id: str) -> Customer | None:
        """Return one customer, or None when it does not belong to owner."""

    def insert_customer(self, owner_id: str, name: str) -> Customer:
        """Create a customer for the owner."""

    def rename_customer(self, customer_id: str, owner_id: str, name: str) -> None:
        """Rename a customer owned by the owner."""

    def delete_customer_cascade(self, customer_id: str, owner_id: str) -> None:
        """Delete a customer together with all of its entries."""


__all__ = ["CustomerRepositoryPort"]
