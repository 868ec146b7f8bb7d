"""Use cases to create, rename, and delete customers."""

from src.application.ports.customer_repository import CustomerRepositoryPort
from src.application.use_cases.customer_access import require_owned_customer
from src.domain.models.ledger import Customer
from src.domain.services.validation import validate_customer_name
from src.infrastructure.logging.logger import get_app_logger


class AddCustomerUseCase:
    """Create a customer owned by the signed-in user."""

    def __init__(self, customer_repository: CustomerRepositoryPort, logger=None) -> None:
        self._customer_repository = customer_repository
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: str, name: str) -> Customer:
        """Create the customer.

        Raises:
            InvalidInput: If the name is blank.
            RepositoryError: If the store rejects the insert.
        """
        cleaned = validate_customer_name(name)
        customer = self._customer_repository.insert_customer(owner_id, cleaned)
        self._logger.info(f"Added customer id={customer.id}")
        return customer


class RenameCustomerUseCase:
    """Rename a customer owned by the signed-in user."""

    def __init__(self, customer_repository: CustomerRepositoryPort, logger=None) -> None:
        self._customer_repository = customer_repository
        self._logger = logger or get_app_logger()

    def execute(self, customer_id: str, owner_id: str, name: str) -> None:
        cleaned = validate_customer_name(name)
        require_owned_customer(self._customer_repository, customer_id, owner_id)
        self._customer_repository.rename_customer(customer_id, owner_id, cleaned)
        self._logger.info(f"Renamed customer id={customer_id}")


class DeleteCustomerUseCase:
    """Delete a customer and every entry of its ledger."""

    def __init__(self, customer_repository: CustomerRepositoryPort, logger=None) -> None:
        self._customer_repository = customer_repository
        self._logger = logger or get_app_logger()

    def execute(self, customer_id: str, owner_id: str) -> None:
        require_owned_customer(self._customer_repository, customer_id, owner_id)
        self._customer_repository.delete_customer_cascade(customer_id, owner_id)
        self._logger.warning(f"Deleted customer id={customer_id} with its entries")


__all__ = [
    "AddCustomerUseCase",
    "RenameCustomerUseCase",
    "DeleteCustomerUseCase",
]
