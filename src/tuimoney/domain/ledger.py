"""Ledger entry domain service."""

from datetime import date
from typing import Optional, Union

from tuimoney.database.base import EntryRepository
from tuimoney.domain.entities import Category, Entry, EntryFilter, EntryKind, NewEntry
from tuimoney.domain.money import Money
from tuimoney.domain.summary import LedgerSummary, summarize


class LedgerService:
    """Service for recording and reviewing ledger entries."""

    def __init__(self, db: EntryRepository):
        """Initialize ledger service.

        Args:
            db: Entry repository
        """
        self.db = db

    def record(self, entry: NewEntry) -> Entry:
        """Validate and store an entry.

        Args:
            entry: Entry to store

        Returns:
            Stored entry with its assigned ID

        Raises:
            InvalidDataError: If the entry fails validation; storage is not touched
            StorageError: If the insert fails
        """
        entry.validate()
        return self.db.add(entry)

    def add_entry(
        self,
        kind: EntryKind,
        amount: Money,
        category: Union[str, Category],
        occurred_on: date,
        note: Optional[str] = None,
    ) -> Entry:
        """Build, validate and store an entry.

        Args:
            kind: Expense or income
            amount: Positive amount
            category: Category name or Category
            occurred_on: Date the entry happened
            note: Optional free-text note (blank notes are stored as None)

        Returns:
            Stored entry with its assigned ID
        """
        if not isinstance(category, Category):
            category = Category(category)
        if note is not None and not note.strip():
            note = None
        return self.record(
            NewEntry(
                kind=kind,
                amount=amount,
                category=category,
                occurred_on=occurred_on,
                note=note,
            )
        )

    def get_entry(self, entry_id: int) -> Entry:
        """Get entry by ID.

        Raises:
            NotFoundError: If no entry has that ID
        """
        return self.db.get(entry_id)

    def list_entries(
        self,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        category: Optional[Union[str, Category]] = None,
    ) -> list[Entry]:
        """List entries, newest first.

        Args:
            from_date: Optional inclusive lower date bound
            to_date: Optional inclusive upper date bound
            category: Optional exact category match
        """
        if category is not None and not isinstance(category, Category):
            category = Category(category)
        return self.db.list(EntryFilter(from_date=from_date, to_date=to_date, category=category))

    def summarize(self, entries: list[Entry]) -> LedgerSummary:
        """Total the given entries."""
        return summarize(entries)
