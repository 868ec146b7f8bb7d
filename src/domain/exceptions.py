"""Exceptions raised by the ledger core, use cases, and adapters."""


class LedgerError(Exception):
    """Base class for every error surfaced to the user."""


class InvalidInput(LedgerError):
    """Malformed or missing input; the mutation is not attempted."""


class NothingToSettle(LedgerError):
    """The active balance is already zero."""


class NothingToExport(LedgerError):
    """A report was requested but no rows match."""


class AuthenticationError(LedgerError):
    """Sign-up or sign-in was rejected."""


class RepositoryError(LedgerError):
    """The data store rejected or failed a request."""


class PartialSettlementFailure(RepositoryError):
    """The settlement entry was stored but old entries were not removed.

    The ledger now double counts the settled balance until the pending
    removal is repeated or reconciled by hand.

    Attributes:
        customer_id: Customer whose ledger needs reconciliation.
        inserted_entry: Settlement entry that was persisted.
        criteria: Deletion criteria that still has to be applied.
    """

    def __init__(self, message: str, customer_id, inserted_entry, criteria):
        super().__init__(message)
        self.customer_id = customer_id
        self.inserted_entry = inserted_entry
        self.criteria = criteria


__all__ = [
    "LedgerError",
    "InvalidInput",
    "NothingToSettle",
    "NothingToExport",
    "AuthenticationError",
    "RepositoryError",
    "PartialSettlementFailure",
]
