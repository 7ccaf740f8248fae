"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for ledger errors.

    Subclasses provide the three semantic categories callers distinguish,
    while preserving ValueError compatibility for existing error handling.
    """


class StorageError(DomainError):
    """Failure originating from the underlying database engine."""


class NotFoundError(DomainError):
    """A point lookup expected exactly one record and found none."""


class InvalidDataError(DomainError):
    """A value failed validation or a stored value could not be decoded."""


def entry_not_found(entry_id: int) -> str:
    """Return message for missing entry."""
    return f"Entry {entry_id} not found"


def empty_category() -> str:
    """Return message for a blank category name."""
    return "Category cannot be empty"


def non_positive_amount(amount: object) -> str:
    """Return message for an entry amount that is zero or negative."""
    return f"Amount must be positive, got {amount}"


def currency_mismatch(left: str, right: str) -> str:
    """Return message when combining amounts in different currencies."""
    return f"Cannot combine amounts in {left} and {right}"


def unsupported_currency(currency: str, expected: str) -> str:
    """Return message for an entry amount in a currency the ledger does not store."""
    return f"Entries must be in {expected}, got {currency}"


def amount_too_large(amount: object) -> str:
    """Return message for an entry amount beyond the storable range."""
    return f"Amount is too large to store: {amount}"
