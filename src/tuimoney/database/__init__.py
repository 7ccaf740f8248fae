"""Database layer for tuimoney application."""

from tuimoney.database.base import EntryRepository, Repository, UserRepository
from tuimoney.database.factories import create_sqlite_database, open_repository

__all__ = [
    "EntryRepository",
    "Repository",
    "UserRepository",
    "create_sqlite_database",
    "open_repository",
]
