"""Tests for the rollover use case and its partial failure handling."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.record_entry import RecordEntryUseCase
from src.application.use_cases.rollover_ledger import RolloverLedgerUseCase
from src.domain.exceptions import (
    InvalidInput,
    NothingToSettle,
    PartialSettlementFailure,
    RepositoryError,
)
from src.domain.models.ledger import Customer, Entry
from src.domain.policies.settlement import AllActiveRemoval
from src.infrastructure.customer_repository import SqlAlchemyCustomerRepository
from src.infrastructure.entry_repository import SqlAlchemyEntryRepository

TODAY = date(2024, 6, 30)
ASHA = Customer(id="c1", name="Asha", user_id="u1")


def _customers(customer=ASHA) -> MagicMock:
    customers = MagicMock()
    customers.get_customer.return_value = customer
    return customers


def _repository(entries) -> MagicMock:
    repository = MagicMock()
    repository.list_entries.return_value = list(entries)
    repository.insert_entry.side_effect = lambda draft: Entry(
        id="settlement", **draft.__dict__
    )
    repository.delete_entries.return_value = 2
    return repository


def test_rollover_inserts_before_deleting(make_entry) -> None:
    entries = [
        make_entry("credit", "10"),
        make_entry("debit", "4"),
        make_entry("credit", "3", archived=True),
    ]
    repository = _repository(entries)
    calls = []
    repository.insert_entry.side_effect = lambda draft: (
        calls.append("insert") or Entry(id="settlement", **draft.__dict__)
    )
    repository.delete_entries.side_effect = lambda criteria: (
        calls.append("delete") or 2
    )
    use_case = RolloverLedgerUseCase(_customers(), repository, logger=MagicMock())

    result = use_case.execute("c1", "u1", today=TODAY)

    assert calls == ["insert", "delete"]
    assert result.inserted_entry.entry_type == "debit"
    assert result.inserted_entry.net_weight == Decimal("6.000")
    assert result.inserted_entry.melting == "F"
    assert result.removed_count == 2
    criteria = repository.delete_entries.call_args.args[0]
    assert criteria.net_weight_not_equal == Decimal("6.000")
    assert criteria.archived is False


def test_rollover_with_zero_balance_writes_nothing(make_entry) -> None:
    repository = _repository([make_entry("credit", "2"), make_entry("debit", "2")])
    use_case = RolloverLedgerUseCase(_customers(), repository, logger=MagicMock())

    with pytest.raises(NothingToSettle):
        use_case.execute("c1", "u1", today=TODAY)

    repository.insert_entry.assert_not_called()
    repository.delete_entries.assert_not_called()


def test_rollover_for_foreign_customer_writes_nothing(make_entry) -> None:
    repository = _repository([make_entry("credit", "2")])
    use_case = RolloverLedgerUseCase(_customers(None), repository, logger=MagicMock())

    with pytest.raises(InvalidInput, match="Customer not found."):
        use_case.execute("c1", "u2", today=TODAY)

    repository.list_entries.assert_not_called()
    repository.insert_entry.assert_not_called()
    repository.delete_entries.assert_not_called()


def test_failed_insert_is_a_clean_repository_error(make_entry) -> None:
    repository = _repository([make_entry("credit", "2")])
    repository.insert_entry.side_effect = RepositoryError("down")
    use_case = RolloverLedgerUseCase(_customers(), repository, logger=MagicMock())

    with pytest.raises(RepositoryError) as excinfo:
        use_case.execute("c1", "u1", today=TODAY)

    assert not isinstance(excinfo.value, PartialSettlementFailure)
    repository.delete_entries.assert_not_called()


def test_failed_delete_reports_partial_settlement(make_entry) -> None:
    entries = [make_entry("credit", "2"), make_entry("credit", "1")]
    repository = _repository(entries)
    repository.delete_entries.side_effect = [RepositoryError("timeout"), 2]
    use_case = RolloverLedgerUseCase(
        _customers(),
        repository,
        policy=AllActiveRemoval(),
        logger=MagicMock(),
    )

    with pytest.raises(PartialSettlementFailure) as excinfo:
        use_case.execute("c1", "u1", today=TODAY)

    failure = excinfo.value
    assert failure.customer_id == "c1"
    assert failure.inserted_entry.id == "settlement"
    assert failure.criteria.entry_ids == tuple(entry.id for entry in entries)

    assert use_case.retry_removal(failure, "u1") == 2
    assert repository.insert_entry.call_count == 1
    assert repository.delete_entries.call_args.args[0] == failure.criteria


def test_retry_removal_requires_the_owner(make_entry) -> None:
    repository = _repository([make_entry("credit", "2")])
    failure = PartialSettlementFailure(
        "pending",
        customer_id="c1",
        inserted_entry=MagicMock(),
        criteria=MagicMock(),
    )
    use_case = RolloverLedgerUseCase(_customers(None), repository, logger=MagicMock())

    with pytest.raises(InvalidInput, match="Customer not found."):
        use_case.retry_removal(failure, "u2")

    repository.delete_entries.assert_not_called()


def test_other_user_cannot_touch_a_stored_ledger(db_port) -> None:
    customers = SqlAlchemyCustomerRepository(db_port)
    entries = SqlAlchemyEntryRepository(db_port)
    asha = customers.insert_customer("u1", "Asha")
    RecordEntryUseCase(customers, entries, logger=MagicMock()).execute(
        asha.id, "u1", "credit", TODAY, "10", "F"
    )

    with pytest.raises(InvalidInput):
        RecordEntryUseCase(customers, entries, logger=MagicMock()).execute(
            asha.id, "u2", "debit", TODAY, "10", "F"
        )
    with pytest.raises(InvalidInput):
        RolloverLedgerUseCase(customers, entries, logger=MagicMock()).execute(
            asha.id, "u2", today=TODAY
        )

    stored = entries.list_entries(asha.id)
    assert [(e.entry_type, e.net_weight) for e in stored] == [
        ("credit", Decimal("10.000"))
    ]
