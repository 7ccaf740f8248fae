"""Factory functions for opening the ledger database."""

import os
from pathlib import Path
from typing import Optional, Union

from sqlalchemy.engine import URL

from tuimoney.database.sqlalchemy_db import SQLAlchemyRepository

DB_PATH_ENV_VAR = "TUIMONEY_DB_PATH"


def open_repository(path: Union[str, Path]) -> SQLAlchemyRepository:
    """Open the SQLite database at path, applying pending migrations.

    Args:
        path: Database file path, or ":memory:" for a throwaway database

    Raises:
        StorageError: If the file cannot be opened or a migration fails
    """
    # Built from parts so "?" or "#" in a file name stays part of the path
    return SQLAlchemyRepository(URL.create("sqlite", database=str(path)))


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyRepository:
    """Create a repository for the configured database file.

    Args:
        database_path: Path to SQLite database file. If None, checks TUIMONEY_DB_PATH
            environment variable, then defaults to ~/.tuimoney/tuimoney.db

    Returns:
        SQLAlchemyRepository with an up-to-date schema
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV_VAR)

    if database_path is None:
        db_dir = Path.home() / ".tuimoney"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "tuimoney.db")

    return open_repository(database_path)
