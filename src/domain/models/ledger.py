"""Domain models for customers, ledger entries, and their aggregates."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import CREDIT, DEBIT


@dataclass(frozen=True)
class Customer:
    """Customer owned by a single user."""

    id: str
    name: str
    user_id: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class Entry:
    """Persisted ledger entry.

    Attributes:
        entry_type: Either ``credit`` or ``debit``.
        melting: ``F`` for full weight or a numeric percentage as text.
        wastage: Wastage percentage applied at valuation time.
        net_weight: Stored valuation result; readers never recompute it.
        created_at: Insertion timestamp used to order same-day entries.
    """

    id: str
    customer_id: str
    entry_type: str
    date: date
    gross_weight: Decimal
    melting: str
    wastage: Decimal | None
    net_weight: Decimal | None
    archived: bool = False
    created_at: datetime | None = None

    @property
    def is_credit(self) -> bool:
        return self.entry_type == CREDIT

    @property
    def is_debit(self) -> bool:
        return self.entry_type == DEBIT


@dataclass(frozen=True)
class EntryDraft:
    """Entry values ready to be inserted by a repository."""

    customer_id: str
    entry_type: str
    date: date
    gross_weight: Decimal
    melting: str
    wastage: Decimal | None
    net_weight: Decimal
    archived: bool = False


@dataclass(frozen=True)
class EntryValuation:
    """Validated entry values produced by the valuation service.

    Attributes:
        remembered_wastage: Wastage the caller should offer as default for
            the next entry.
    """

    entry_type: str
    date: date
    gross_weight: Decimal
    melting: str
    wastage: Decimal | None
    net_weight: Decimal
    remembered_wastage: Decimal | None


@dataclass(frozen=True)
class PartitionTotals:
    """Credit and debit totals for one archived/active partition."""

    credit_total: Decimal = Decimal("0.000")
    debit_total: Decimal = Decimal("0.000")
    credit_count: int = 0
    debit_count: int = 0

    @property
    def balance(self) -> Decimal:
        """Return credit_total minus debit_total."""
        return self.credit_total - self.debit_total

    @property
    def entry_count(self) -> int:
        return self.credit_count + self.debit_count


@dataclass(frozen=True)
class EntryCounts:
    """Number of entries per partition and type."""

    credit: int
    debit: int
    archived: int


@dataclass(frozen=True)
class LedgerSummary:
    """Aggregated totals of a customer ledger.

    The top-level totals describe the active partition; archived entries
    never contribute to the balance.
    """

    active: PartitionTotals = field(default_factory=PartitionTotals)
    archived: PartitionTotals = field(default_factory=PartitionTotals)

    @property
    def credit_total(self) -> Decimal:
        return self.active.credit_total

    @property
    def debit_total(self) -> Decimal:
        return self.active.debit_total

    @property
    def balance(self) -> Decimal:
        return self.active.balance

    @property
    def counts(self) -> EntryCounts:
        return EntryCounts(
            credit=self.active.credit_count,
            debit=self.active.debit_count,
            archived=self.archived.entry_count,
        )


@dataclass(frozen=True)
class EntryDeletionCriteria:
    """Selection of entries to delete.

    Either ``entry_ids`` is set, or the compound predicate made of
    ``customer_id``, ``archived`` and ``net_weight_not_equal`` applies.
    """

    customer_id: str
    entry_ids: tuple[str, ...] | None = None
    archived: bool | None = None
    net_weight_not_equal: Decimal | None = None


@dataclass(frozen=True)
class SettlementPlan:
    """Outcome of settling an active ledger.

    Attributes:
        balance: Active balance before settlement.
        new_entry: Balancing entry to insert first.
        entries_to_remove: Active entries to delete after the insert.
        criteria: Repository criteria selecting ``entries_to_remove``.
    """

    balance: Decimal
    new_entry: EntryDraft
    entries_to_remove: tuple[Entry, ...]
    criteria: EntryDeletionCriteria


__all__ = [
    "Customer",
    "Entry",
    "EntryDraft",
    "EntryValuation",
    "PartitionTotals",
    "EntryCounts",
    "LedgerSummary",
    "EntryDeletionCriteria",
    "SettlementPlan",
]
