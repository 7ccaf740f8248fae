"""Domain model entities for tuimoney.

These are pure data classes representing ledger concepts, independent of the
database schema. Records handed out by the repository are instances of these
classes, never live database rows.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NewType, Optional

from tuimoney.domain.errors import (
    InvalidDataError,
    amount_too_large,
    empty_category,
    non_positive_amount,
    unsupported_currency,
)
from tuimoney.domain.money import DEFAULT_CURRENCY, MAX_MINOR_UNITS, Money

EntryId = NewType("EntryId", int)


class EntryKind(str, Enum):
    """Direction of an entry. Amounts are always positive magnitudes."""

    EXPENSE = "expense"
    INCOME = "income"


@dataclass(frozen=True)
class Category:
    """Free-text category name, trimmed and never blank."""

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidDataError(empty_category())
        object.__setattr__(self, "name", self.name.strip())

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class NewEntry:
    """An entry that has not been stored yet."""

    kind: EntryKind
    amount: Money
    category: Category
    occurred_on: date
    note: Optional[str] = None

    def validate(self) -> None:
        """Check the entry can be stored.

        Raises:
            InvalidDataError: If the amount is not a strictly positive, storable
                amount in the ledger currency, or the kind, category or date
                has the wrong shape
        """
        if not isinstance(self.kind, EntryKind):
            raise InvalidDataError(f"Unknown entry kind: {self.kind!r}")
        if not isinstance(self.amount, Money) or not self.amount.is_positive():
            raise InvalidDataError(non_positive_amount(self.amount))
        if self.amount.currency != DEFAULT_CURRENCY:
            raise InvalidDataError(unsupported_currency(self.amount.currency, DEFAULT_CURRENCY))
        if self.amount.minor_units > MAX_MINOR_UNITS:
            raise InvalidDataError(amount_too_large(self.amount))
        if not isinstance(self.category, Category) or not self.category.name.strip():
            raise InvalidDataError(empty_category())
        if not isinstance(self.occurred_on, date):
            raise InvalidDataError(f"Invalid entry date: {self.occurred_on!r}")


@dataclass(frozen=True)
class Entry:
    """A stored entry."""

    id: EntryId
    kind: EntryKind
    amount: Money
    category: Category
    occurred_on: date
    note: Optional[str] = None

    @classmethod
    def from_new_entry(cls, entry_id: int, new_entry: NewEntry) -> "Entry":
        """Combine a storage-assigned ID with the fields that were inserted."""
        return cls(
            id=EntryId(entry_id),
            kind=new_entry.kind,
            amount=new_entry.amount,
            category=new_entry.category,
            occurred_on=new_entry.occurred_on,
            note=new_entry.note,
        )


@dataclass(frozen=True)
class EntryFilter:
    """Optional constraints for listing entries. Date bounds are inclusive."""

    from_date: Optional[date] = None
    to_date: Optional[date] = None
    category: Optional[Category] = None


@dataclass(frozen=True)
class User:
    """Ledger user. Password material never leaves the repository."""

    id: int
    username: str
