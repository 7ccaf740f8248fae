"""Tests for the SQLAlchemy credential repository."""

import logging

import pytest
from sqlalchemy import text

from tuimoney.domain.entities import User
from tuimoney.domain.errors import StorageError


def _stored_hash(db, username):
    with db.engine.connect() as conn:
        return conn.execute(
            text("SELECT password_hash FROM users WHERE username = :username"),
            {"username": username},
        ).scalar_one()


class TestCreateUser:
    """Tests for create_user."""

    def test_create_user(self, temp_db):
        user = temp_db.create_user("alice", "pw123")

        assert isinstance(user, User)
        assert user.username == "alice"
        assert isinstance(user.id, int)

    def test_password_is_not_stored(self, temp_db):
        """Test only an Argon2 hash is stored."""
        temp_db.create_user("alice", "pw123")
        stored = _stored_hash(temp_db, "alice")

        assert "pw123" not in stored
        assert stored.startswith("$argon2id$")

    def test_salt_is_fresh_per_user(self, temp_db):
        temp_db.create_user("alice", "same-password")
        temp_db.create_user("bob", "same-password")

        assert _stored_hash(temp_db, "alice") != _stored_hash(temp_db, "bob")

    def test_duplicate_username_is_storage_error(self, temp_db):
        temp_db.create_user("alice", "pw123")
        with pytest.raises(StorageError, match="UNIQUE"):
            temp_db.create_user("alice", "other")

    def test_duplicate_error_does_not_leak_hash(self, temp_db):
        temp_db.create_user("alice", "pw123")
        with pytest.raises(StorageError) as excinfo:
            temp_db.create_user("alice", "other")
        assert "$argon2" not in str(excinfo.value)

    def test_password_not_logged(self, temp_db, caplog):
        with caplog.at_level(logging.DEBUG):
            temp_db.create_user("alice", "secret-pw")
        assert "secret-pw" not in caplog.text


class TestVerifyUser:
    """Tests for verify_user."""

    def test_correct_password(self, temp_db):
        created = temp_db.create_user("alice", "pw123")
        assert temp_db.verify_user("alice", "pw123") == created

    def test_wrong_password_and_unknown_user_look_the_same(self, temp_db):
        temp_db.create_user("alice", "pw123")

        wrong_password = temp_db.verify_user("alice", "wrong")
        unknown_user = temp_db.verify_user("bob", "anything")

        assert wrong_password is None
        assert unknown_user is None
        assert wrong_password == unknown_user

    @pytest.mark.parametrize("stored", ["not-a-hash", "$argon2id$\u00e9"])
    def test_corrupt_hash_is_storage_error(self, temp_db, stored):
        """Test a structurally broken stored hash is reported, not treated as a mismatch."""
        temp_db.create_user("alice", "pw123")
        with temp_db.engine.begin() as conn:
            conn.execute(
                text("UPDATE users SET password_hash = :stored WHERE username = 'alice'"),
                {"stored": stored},
            )

        with pytest.raises(StorageError, match="corrupt"):
            temp_db.verify_user("alice", "pw123")


class TestListUsers:
    def test_empty(self, temp_db):
        assert temp_db.list_users() == []

    def test_lexicographic_order(self, temp_db):
        for username in ["carol", "alice", "bob"]:
            temp_db.create_user(username, "pw")

        assert temp_db.list_users() == ["alice", "bob", "carol"]

    def test_usernames_only(self, temp_db):
        temp_db.create_user("alice", "pw123")
        users = temp_db.list_users()
        assert all(isinstance(username, str) for username in users)
        assert not any("$argon2" in username for username in users)
