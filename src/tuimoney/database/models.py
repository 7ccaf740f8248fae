"""SQLAlchemy models for the tuimoney database.

The tables themselves are created by the versioned SQL scripts in
``tuimoney/database/sql``; these classes only map them for querying.
"""

from typing import Union

from sqlalchemy import Column, Integer, String, create_engine, event
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Entry(Base):
    """Ledger entry row. Dates and kinds are stored as text."""

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True)
    kind = Column(String, nullable=False)
    amount_cents = Column(Integer, nullable=False)
    category = Column(String, nullable=False)
    note = Column(String, nullable=True)
    occurred_on = Column(String, nullable=False)


class User(Base):
    """User credential row."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)


def create_sqlite_engine(database_url: Union[str, URL]) -> Engine:
    """Create an engine holding a single SQLite connection.

    pysqlite does not open a transaction before DDL statements, so the
    driver's own transaction handling is switched off and BEGIN is emitted
    by SQLAlchemy instead. This makes schema scripts atomic.
    """
    engine = create_engine(database_url, echo=False, poolclass=StaticPool)

    @event.listens_for(engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine
