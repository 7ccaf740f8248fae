"""Versioned schema migrations.

Each migration is a ``(version, script)`` pair. A version is applied at most
once: its script and the row recording it in ``schema_migrations`` commit in
the same transaction, so a failing script leaves no trace.
"""

import logging
import sqlite3
from importlib import resources
from typing import Optional, Sequence

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tuimoney.domain.errors import StorageError

logger = logging.getLogger(__name__)

Migration = tuple[str, str]

CREATE_VERSION_TABLE = """
CREATE TABLE IF NOT EXISTS schema_migrations (
    version TEXT PRIMARY KEY,
    applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""


def load_migrations() -> list[Migration]:
    """Load the bundled SQL scripts, ordered by file name."""
    sql_dir = resources.files("tuimoney.database") / "sql"
    scripts = sorted(
        (path for path in sql_dir.iterdir() if path.name.endswith(".sql")),
        key=lambda path: path.name,
    )
    return [(path.name, path.read_text(encoding="utf-8")) for path in scripts]


def split_statements(script: str) -> list[str]:
    """Split a SQL script into individual statements.

    Statement boundaries are found with sqlite3.complete_statement, so
    semicolons inside string literals do not split a statement.
    """
    statements = []
    buffer = ""
    for line in script.splitlines(keepends=True):
        buffer += line
        if sqlite3.complete_statement(buffer):
            statements.append(buffer.strip())
            buffer = ""

    remainder = [
        line for line in buffer.splitlines() if line.strip() and not line.strip().startswith("--")
    ]
    if remainder:
        statements.append(buffer.strip())
    return statements


def applied_versions(engine: Engine) -> list[str]:
    """Return recorded migration versions in the order they were applied."""
    try:
        with engine.connect() as conn:
            rows = conn.execute(
                text("SELECT version FROM schema_migrations ORDER BY applied_at, rowid")
            )
            return [row[0] for row in rows]
    except SQLAlchemyError as e:
        raise StorageError(f"Could not read applied migrations: {e}") from e


def apply_migrations(engine: Engine, migrations: Optional[Sequence[Migration]] = None) -> list[str]:
    """Apply every pending migration in order.

    Args:
        engine: Engine created by create_sqlite_engine
        migrations: Ordered (version, script) pairs. Defaults to the bundled scripts.

    Returns:
        Versions applied by this call (empty when the schema was up to date)

    Raises:
        StorageError: If any statement fails. The failing migration is rolled back.
    """
    if migrations is None:
        migrations = load_migrations()

    try:
        with engine.begin() as conn:
            conn.execute(text(CREATE_VERSION_TABLE))
    except SQLAlchemyError as e:
        raise StorageError(f"Could not create schema_migrations table: {e}") from e

    applied = set(applied_versions(engine))
    newly_applied = []

    for version, script in migrations:
        if version in applied:
            logger.debug("Migration %s already applied, skipping", version)
            continue

        try:
            with engine.begin() as conn:
                for statement in split_statements(script):
                    conn.exec_driver_sql(statement)
                conn.execute(
                    text("INSERT INTO schema_migrations (version) VALUES (:version)"),
                    {"version": version},
                )
        except SQLAlchemyError as e:
            logger.error("Migration %s failed and was rolled back", version)
            raise StorageError(f"Migration {version} failed: {e}") from e

        logger.info("Applied migration %s", version)
        applied.add(version)
        newly_applied.append(version)

    return newly_applied
