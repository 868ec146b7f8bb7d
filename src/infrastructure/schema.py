"""SQLAlchemy Core schema for the ledger tables."""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

customer_table = Table(
    "customer",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column("user_id", String(36), nullable=False, index=True),
    Column("created_at", DateTime, nullable=False),
)

entries_table = Table(
    "entries",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "customer_id",
        String(36),
        ForeignKey("customer.id"),
        nullable=False,
    ),
    Column("type", String(10), nullable=False),
    Column("date", Date, nullable=False),
    Column("gross_weight", Numeric(12, 3), nullable=False),
    Column("melting", Text, nullable=False),
    Column("waistage", Numeric(12, 3), nullable=True),
    Column("net_weight", Numeric(12, 3), nullable=False),
    Column("archived", Boolean, nullable=False, default=False),
    Column("created_at", DateTime, nullable=False),
    CheckConstraint("type IN ('credit', 'debit')", name="ck_entries_type"),
    CheckConstraint("gross_weight >= 0", name="ck_entries_gross_nonneg"),
    Index("ix_entries_customer_date", "customer_id", "date", "created_at"),
)

user_account_table = Table(
    "user_account",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", Text, nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("created_at", DateTime, nullable=False),
)


def create_schema(engine: Engine) -> list[str]:
    """Create the ledger tables when they do not exist.

    Args:
        engine: Engine connected to the ledger database.

    Returns:
        list[str]: Names of the tables defined by the schema.
    """
    metadata.create_all(engine)
    return [table.name for table in metadata.sorted_tables]


__all__ = [
    "metadata",
    "customer_table",
    "entries_table",
    "user_account_table",
    "create_schema",
]
