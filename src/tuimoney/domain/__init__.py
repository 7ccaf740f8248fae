"""Domain layer for tuimoney application."""

from tuimoney.domain.entities import (
    Category,
    Entry,
    EntryFilter,
    EntryId,
    EntryKind,
    NewEntry,
    User,
)
from tuimoney.domain.errors import DomainError, InvalidDataError, NotFoundError, StorageError
from tuimoney.domain.money import Money

__all__ = [
    "Category",
    "DomainError",
    "Entry",
    "EntryFilter",
    "EntryId",
    "EntryKind",
    "InvalidDataError",
    "Money",
    "NewEntry",
    "NotFoundError",
    "StorageError",
    "User",
]
