"""Tests for database factory functions."""

from tuimoney.database.base import Repository
from tuimoney.database.factories import create_sqlite_database, open_repository


def test_open_repository_creates_file(tmp_path):
    db_path = tmp_path / "ledger.db"
    with open_repository(db_path) as repo:
        assert isinstance(repo, Repository)
    assert db_path.exists()


def test_path_with_url_characters(tmp_path):
    """Test "?" and "#" in a file name are kept as part of the path."""
    db_path = tmp_path / "ledger?mode=ro#1.db"
    open_repository(db_path).close()
    assert db_path.exists()
    assert not (tmp_path / "ledger").exists()


def test_explicit_path(tmp_path):
    db_path = tmp_path / "explicit.db"
    repo = create_sqlite_database(database_path=str(db_path))
    repo.close()
    assert db_path.exists()


def test_path_from_environment(tmp_path, monkeypatch):
    db_path = tmp_path / "from-env.db"
    monkeypatch.setenv("TUIMONEY_DB_PATH", str(db_path))

    create_sqlite_database().close()
    assert db_path.exists()


def test_default_path_in_home(tmp_path, monkeypatch):
    monkeypatch.delenv("TUIMONEY_DB_PATH", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    create_sqlite_database().close()
    assert (tmp_path / ".tuimoney" / "tuimoney.db").exists()
