"""Abstract repository interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from tuimoney.domain.entities import Entry, EntryFilter, NewEntry, User


class EntryRepository(ABC):
    """Storage capability for ledger entries."""

    @abstractmethod
    def add(self, entry: NewEntry) -> Entry:
        """Insert a validated entry. Returns it with its storage-assigned ID."""
        pass

    @abstractmethod
    def list(self, entry_filter: EntryFilter) -> list[Entry]:
        """List entries matching the filter, newest first."""
        pass

    @abstractmethod
    def get(self, entry_id: int) -> Entry:
        """Get entry by ID. Raises NotFoundError if it does not exist."""
        pass


class UserRepository(ABC):
    """Storage capability for user credentials."""

    @abstractmethod
    def create_user(self, username: str, password: str) -> User:
        """Create a user, storing only a salted hash of the password."""
        pass

    @abstractmethod
    def verify_user(self, username: str, password: str) -> Optional[User]:
        """Return the user if the password matches, None otherwise.

        An unknown username and a wrong password are both reported as None.
        """
        pass

    @abstractmethod
    def list_users(self) -> list[str]:
        """List all usernames in lexicographic order."""
        pass


class Repository(EntryRepository, UserRepository):
    """Combined ledger storage, owning the underlying connection."""

    @abstractmethod
    def close(self) -> None:
        """Release the database connection."""
        pass

    def __enter__(self) -> Repository:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
