"""Shared pytest fixtures for tuimoney tests."""

import os
import tempfile
from datetime import date

import pytest

from tuimoney.database.factories import open_repository
from tuimoney.domain.entities import Category, EntryKind, NewEntry
from tuimoney.domain.ledger import LedgerService
from tuimoney.domain.money import Money
from tuimoney.domain.users import UserService

from fakes import InMemoryRepository


@pytest.fixture
def db_path():
    """Path to a fresh, not yet created database file."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    os.unlink(path)

    yield path

    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def temp_db(db_path):
    """Create a temporary database for testing."""
    db = open_repository(db_path)
    # Store the path for tests that need it
    db.database_path = db_path

    yield db

    db.close()


@pytest.fixture
def fake_db():
    """In-memory repository for service tests that need no database file."""
    return InMemoryRepository()


@pytest.fixture
def ledger_service(fake_db):
    """Create a LedgerService backed by the in-memory repository."""
    return LedgerService(fake_db)


@pytest.fixture
def user_service(fake_db):
    """Create a UserService backed by the in-memory repository."""
    return UserService(fake_db)


@pytest.fixture
def make_entry():
    """Build a NewEntry with sensible defaults."""

    def _make_entry(
        amount_cents=1250,
        category="food",
        occurred_on=date(2024, 1, 15),
        kind=EntryKind.EXPENSE,
        note=None,
    ):
        return NewEntry(
            kind=kind,
            amount=Money.from_minor(amount_cents),
            category=Category(category),
            occurred_on=occurred_on,
            note=note,
        )

    return _make_entry


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
