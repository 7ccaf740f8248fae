"""SQLAlchemy repository implementation."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional, Union

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from sqlalchemy.engine import URL
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from tuimoney.database.base import Repository
from tuimoney.database.mappers import (
    date_to_str,
    entry_to_domain,
    new_entry_to_orm,
    user_to_domain,
)
from tuimoney.database.migrations import apply_migrations
from tuimoney.database.models import Entry, User, create_sqlite_engine
from tuimoney.domain.entities import (
    Entry as DomainEntry,
    EntryFilter,
    NewEntry,
    User as DomainUser,
)
from tuimoney.domain.errors import NotFoundError, StorageError, entry_not_found

logger = logging.getLogger(__name__)

_hasher = PasswordHasher()


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    """Hash verified against when a username is unknown, to keep timing uniform."""
    return _hasher.hash("tuimoney-unknown-user")


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Re-raise engine errors as StorageError.

    Only the driver message is kept: SQLAlchemy's own message embeds the
    bound parameters, which may include password hashes.
    """
    try:
        yield
    except DBAPIError as e:
        raise StorageError(f"Failed to {action}: {e.orig}") from e
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to {action}: {e}") from e
    except OverflowError as e:
        # pysqlite rejects out-of-range integers while binding, before SQLAlchemy sees them
        raise StorageError(f"Failed to {action}: {e}") from e


class SQLAlchemyRepository(Repository):
    """SQLAlchemy-based implementation of the entry and user repositories."""

    def __init__(self, database_url: Union[str, URL]):
        """Open the database and bring its schema up to date.

        Args:
            database_url: SQLAlchemy SQLite URL, as a string (e.g., 'sqlite:///path/to.db')
                or a URL object

        Raises:
            StorageError: If the database cannot be opened or a migration fails
        """
        self.database_url = database_url
        with _storage_errors("open database"):
            self.engine = create_sqlite_engine(database_url)
        try:
            applied = apply_migrations(self.engine)
        except StorageError:
            self.engine.dispose()
            raise
        if applied:
            logger.info("Schema updated with %d migration(s)", len(applied))
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def close(self) -> None:
        """Dispose of the engine and its connection."""
        self.engine.dispose()

    # Entry operations
    def add(self, entry: NewEntry) -> DomainEntry:
        """Insert an entry. Returns it with its storage-assigned ID.

        Raises:
            InvalidDataError: If the entry fails NewEntry.validate()
            StorageError: If the insert fails
        """
        entry.validate()
        with _storage_errors("add entry"):
            with self.session_factory.begin() as session:
                row = new_entry_to_orm(entry)
                session.add(row)
                session.flush()
                entry_id = row.id
        return DomainEntry.from_new_entry(entry_id, entry)

    def list(self, entry_filter: EntryFilter) -> list[DomainEntry]:
        """List entries matching all given filter fields, newest first."""
        with _storage_errors("list entries"):
            with self.session_factory() as session:
                query = session.query(Entry)
                if entry_filter.from_date is not None:
                    query = query.filter(Entry.occurred_on >= date_to_str(entry_filter.from_date))
                if entry_filter.to_date is not None:
                    query = query.filter(Entry.occurred_on <= date_to_str(entry_filter.to_date))
                if entry_filter.category is not None:
                    query = query.filter(Entry.category == entry_filter.category.name)
                rows = query.order_by(Entry.occurred_on.desc(), Entry.id.desc()).all()
                return [entry_to_domain(row) for row in rows]

    def get(self, entry_id: int) -> DomainEntry:
        """Get entry by ID."""
        with _storage_errors("get entry"):
            with self.session_factory() as session:
                row = session.query(Entry).filter(Entry.id == entry_id).first()
                if row is None:
                    raise NotFoundError(entry_not_found(entry_id))
                return entry_to_domain(row)

    # User operations
    def create_user(self, username: str, password: str) -> DomainUser:
        """Create a user with an Argon2 hash of the password.

        Uniqueness is enforced by the users table; a duplicate username
        raises StorageError.
        """
        password_hash = _hasher.hash(password)
        with _storage_errors("create user"):
            with self.session_factory.begin() as session:
                row = User(username=username, password_hash=password_hash)
                session.add(row)
                session.flush()
                user = user_to_domain(row)
        logger.info("Created user %s", username)
        return user

    def verify_user(self, username: str, password: str) -> Optional[DomainUser]:
        """Check a password against the stored hash.

        Raises:
            StorageError: If the stored hash is malformed
        """
        with _storage_errors("verify user"):
            with self.session_factory() as session:
                row = session.query(User).filter(User.username == username).first()
                if row is None:
                    user, password_hash = None, _dummy_hash()
                else:
                    user, password_hash = user_to_domain(row), row.password_hash

        try:
            _hasher.verify(password_hash, password)
        except VerifyMismatchError:
            return None
        except (InvalidHashError, VerificationError, UnicodeError) as e:
            raise StorageError(f"Stored password hash for '{username}' is corrupt") from e
        return user

    def list_users(self) -> list[str]:
        """List all usernames in lexicographic order."""
        with _storage_errors("list users"):
            with self.session_factory() as session:
                rows = session.query(User.username).order_by(User.username).all()
                return [row.username for row in rows]
