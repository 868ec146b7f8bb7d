"""Settlement (rollover): replace an active ledger with one balancing entry."""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import CREDIT, DEBIT, FULL_WEIGHT_FLAG
from src.domain.exceptions import NothingToSettle
from src.domain.models.ledger import Entry, EntryDraft, SettlementPlan
from src.domain.policies.settlement import (
    SettlementRemovalPolicy,
    UnequalNetWeightRemoval,
)
from src.domain.services.aggregation import aggregate
from src.utils.decimal_utils import quantize_weight


def settle(
    active_entries: Iterable[Entry],
    *,
    today: date,
    policy: SettlementRemovalPolicy | None = None,
) -> SettlementPlan:
    """Plan the rollover of an active ledger.

    The new entry carries ``abs(balance)`` as both gross and net weight with
    the full-weight melting flag, on the side that brings the balance back
    to zero. Archived entries in the input are ignored.

    Args:
        active_entries: Active entries of a single customer.
        today: Date given to the settlement entry.
        policy: Removal policy; defaults to ``UnequalNetWeightRemoval``.

    Returns:
        SettlementPlan: Entry to insert and entries to delete afterwards.

    Raises:
        NothingToSettle: If the active balance is zero.
    """
    active = [entry for entry in active_entries if not entry.archived]
    balance = aggregate(active).balance
    if balance == 0:
        raise NothingToSettle("Balance is zero. Nothing to roll over.")

    resolved_policy = policy or UnequalNetWeightRemoval()
    amount = quantize_weight(abs(balance))
    customer_id = active[0].customer_id
    new_entry = EntryDraft(
        customer_id=customer_id,
        entry_type=DEBIT if balance > 0 else CREDIT,
        date=today,
        gross_weight=amount,
        melting=FULL_WEIGHT_FLAG,
        wastage=None,
        net_weight=amount,
        archived=False,
    )
    return SettlementPlan(
        balance=balance,
        new_entry=new_entry,
        entries_to_remove=resolved_policy.select(active, amount),
        criteria=resolved_policy.criteria(customer_id, active, amount),
    )


__all__ = ["settle"]
