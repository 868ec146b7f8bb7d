"""Removal policies deciding which entries a settlement clears."""

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol

from src.domain.models.ledger import Entry, EntryDeletionCriteria
from src.utils.decimal_utils import coerce_decimal

UNEQUAL_NET_WEIGHT = "unequal-net-weight"
ALL_ACTIVE = "all-active"


class SettlementRemovalPolicy(Protocol):
    """Selects the active entries replaced by a settlement entry."""

    name: str

    def select(
        self,
        active_entries: Sequence[Entry],
        amount: Decimal,
    ) -> tuple[Entry, ...]:
        """Return the entries to delete after the settlement insert."""

    def criteria(
        self,
        customer_id: str,
        active_entries: Sequence[Entry],
        amount: Decimal,
    ) -> EntryDeletionCriteria:
        """Return the repository criteria matching ``select``."""


class UnequalNetWeightRemoval:
    """Remove every active entry whose net weight differs from the amount.

    Active entries that happen to equal the settlement amount survive the
    rollover, and so does the settlement entry itself.
    """

    name = UNEQUAL_NET_WEIGHT

    def select(
        self,
        active_entries: Sequence[Entry],
        amount: Decimal,
    ) -> tuple[Entry, ...]:
        return tuple(
            entry
            for entry in active_entries
            if coerce_decimal(entry.net_weight) != amount
        )

    def criteria(
        self,
        customer_id: str,
        active_entries: Sequence[Entry],
        amount: Decimal,
    ) -> EntryDeletionCriteria:
        return EntryDeletionCriteria(
            customer_id=customer_id,
            archived=False,
            net_weight_not_equal=amount,
        )


class AllActiveRemoval:
    """Remove every active entry that existed before the settlement."""

    name = ALL_ACTIVE

    def select(
        self,
        active_entries: Sequence[Entry],
        amount: Decimal,
    ) -> tuple[Entry, ...]:
        return tuple(active_entries)

    def criteria(
        self,
        customer_id: str,
        active_entries: Sequence[Entry],
        amount: Decimal,
    ) -> EntryDeletionCriteria:
        return EntryDeletionCriteria(
            customer_id=customer_id,
            entry_ids=tuple(entry.id for entry in active_entries),
        )


_POLICIES = {
    UNEQUAL_NET_WEIGHT: UnequalNetWeightRemoval,
    ALL_ACTIVE: AllActiveRemoval,
}


def get_removal_policy(name: str) -> SettlementRemovalPolicy:
    """Return the removal policy registered under ``name``.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return _POLICIES[name]()
    except KeyError:
        raise ValueError(
            f"Unsupported settlement policy: {name}. "
            f"Expected one of {', '.join(sorted(_POLICIES))}."
        ) from None


__all__ = [
    "UNEQUAL_NET_WEIGHT",
    "ALL_ACTIVE",
    "SettlementRemovalPolicy",
    "UnequalNetWeightRemoval",
    "AllActiveRemoval",
    "get_removal_policy",
]
