"""Owner checks shared by the ledger use cases."""

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.domain.exceptions import InvalidInput
from src.domain.models.ledger import Customer, Entry


def require_owned_customer(
    customer_repository: CustomerRepositoryPort,
    customer_id: str,
    owner_id: str,
) -> Customer:
    """Return the customer when it belongs to the owner.

    Args:
        customer_repository: Port used to read customers.
        customer_id: Customer requested by the caller.
        owner_id: Signed-in user.

    Returns:
        Customer: The owner-checked customer.

    Raises:
        InvalidInput: If the customer does not exist for this owner.
    """
    customer = customer_repository.get_customer(customer_id, owner_id)
    if customer is None:
        raise InvalidInput("Customer not found.")
    return customer


def find_entry(entries: list[Entry], entry_id: str) -> Entry:
    """Return the entry with the given id from an owned ledger."""
    for entry in entries:
        if entry.id == entry_id:
            return entry
    raise InvalidInput("Entry not found.")


__all__ = ["require_owned_customer", "find_entry"]
