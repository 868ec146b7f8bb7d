"""Shared fixtures for the ledger tests."""

from datetime import date, datetime
from decimal import Decimal
import itertools

import pytest
from sqlalchemy import create_engine

from src.domain.models.ledger import Entry
from src.infrastructure.schema import create_schema

_ids = itertools.count(1)


class SqliteDbPort:
    """DatabaseEnginePort over a temporary SQLite file."""

    def __init__(self, engine) -> None:
        self.engine = engine

    def get_ledger_engine(self):
        return self.engine


@pytest.fixture
def db_port(tmp_path):
    """Return a database port with the ledger schema created."""
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}", future=True)
    create_schema(engine)
    yield SqliteDbPort(engine)
    engine.dispose()


@pytest.fixture
def make_entry():
    """Return a factory building entries with sensible defaults."""

    def _make_entry(
        entry_type: str = "credit",
        net_weight: str | Decimal | None = "10",
        *,
        entry_date: date = date(2024, 1, 1),
        archived: bool = False,
        customer_id: str = "c1",
        gross_weight: str | Decimal = "10",
        melting: str = "F",
        wastage: Decimal | None = None,
        created_at: datetime | None = None,
        entry_id: str | None = None,
    ) -> Entry:
        return Entry(
            id=entry_id or f"e{next(_ids)}",
            customer_id=customer_id,
            entry_type=entry_type,
            date=entry_date,
            gross_weight=Decimal(gross_weight),
            melting=melting,
            wastage=wastage,
            net_weight=Decimal(net_weight) if net_weight is not None else None,
            archived=archived,
            created_at=created_at,
        )

    return _make_entry
