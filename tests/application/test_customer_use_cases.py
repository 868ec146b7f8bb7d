"""Tests for customer management and dashboard use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_customer_dashboard import (
    GetCustomerDashboardUseCase,
)
from src.application.use_cases.get_customer_ledger import GetCustomerLedgerUseCase
from src.application.use_cases.manage_customers import (
    AddCustomerUseCase,
    DeleteCustomerUseCase,
    RenameCustomerUseCase,
)
from src.domain.exceptions import InvalidInput
from src.domain.models.ledger import Customer

ASHA = Customer(id="c1", name="Asha", user_id="u1")
RAVI = Customer(id="c2", name="Ravi", user_id="u1")


def test_add_customer_trims_name() -> None:
    repository = MagicMock()
    repository.insert_customer.return_value = ASHA
    use_case = AddCustomerUseCase(repository, logger=MagicMock())

    assert use_case.execute("u1", "  Asha ") is ASHA
    repository.insert_customer.assert_called_once_with("u1", "Asha")


def test_add_customer_rejects_blank_name() -> None:
    repository = MagicMock()
    use_case = AddCustomerUseCase(repository, logger=MagicMock())

    with pytest.raises(InvalidInput):
        use_case.execute("u1", "   ")
    repository.insert_customer.assert_not_called()


def test_rename_requires_owned_customer() -> None:
    repository = MagicMock()
    repository.get_customer.return_value = None
    use_case = RenameCustomerUseCase(repository, logger=MagicMock())

    with pytest.raises(InvalidInput, match="Customer not found"):
        use_case.execute("c1", "u2", "New")
    repository.get_customer.assert_called_once_with("c1", "u2")
    repository.rename_customer.assert_not_called()


def test_rename_customer() -> None:
    repository = MagicMock()
    repository.get_customer.return_value = ASHA
    use_case = RenameCustomerUseCase(repository, logger=MagicMock())

    use_case.execute("c1", "u1", " Asha K ")

    repository.rename_customer.assert_called_once_with("c1", "u1", "Asha K")


def test_delete_customer_cascades() -> None:
    repository = MagicMock()
    repository.get_customer.return_value = ASHA
    use_case = DeleteCustomerUseCase(repository, logger=MagicMock())

    use_case.execute("c1", "u1")

    repository.delete_customer_cascade.assert_called_once_with("c1", "u1")


def test_dashboard_filters_customers_but_keeps_global_stats(make_entry) -> None:
    customers = MagicMock()
    customers.list_customers.return_value = [ASHA, RAVI]
    entries = MagicMock()
    entries.list_entries_for_customers.return_value = {
        "c1": [make_entry("credit", "5", customer_id="c1")],
        "c2": [make_entry("debit", "2", customer_id="c2")],
    }
    use_case = GetCustomerDashboardUseCase(customers, entries, logger=MagicMock())

    dashboard = use_case.execute("u1", balance_filter="negative")

    customers.list_customers.assert_called_once_with("u1")
    entries.list_entries_for_customers.assert_called_once_with(["c1", "c2"])
    assert [summary.name for summary in dashboard.customers] == ["Ravi"]
    assert dashboard.stats.total_customers == 2
    assert dashboard.stats.total_balance == Decimal("3.000")


def test_ledger_view_partitions_entries(make_entry) -> None:
    customers = MagicMock()
    customers.get_customer.return_value = ASHA
    entries = MagicMock()
    active = make_entry("credit", "5")
    archived = make_entry("debit", "1", archived=True)
    entries.list_entries.return_value = [archived, active]
    use_case = GetCustomerLedgerUseCase(customers, entries, logger=MagicMock())

    view = use_case.execute("c1", "u1")

    assert view.customer is ASHA
    assert view.active == [active]
    assert view.archived == [archived]
    assert view.summary.balance == Decimal("5.000")


def test_ledger_view_for_foreign_customer_is_rejected() -> None:
    customers = MagicMock()
    customers.get_customer.return_value = None
    use_case = GetCustomerLedgerUseCase(customers, MagicMock(), logger=MagicMock())

    with pytest.raises(InvalidInput):
        use_case.execute("c1", "intruder")
