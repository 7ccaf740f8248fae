"""Tests for database mappers."""

from datetime import date

import pytest

from tuimoney.database.mappers import (
    date_from_str,
    date_to_str,
    entry_to_domain,
    from_money,
    kind_from_str,
    kind_to_str,
    new_entry_to_orm,
    to_money,
    user_to_domain,
)
from tuimoney.database.models import Entry as ORMEntry, User as ORMUser
from tuimoney.domain.entities import Category, Entry, EntryKind, User
from tuimoney.domain.errors import InvalidDataError
from tuimoney.domain.money import Money


class TestMoneyMapper:
    """Tests for minor-unit conversion."""

    def test_to_money(self):
        assert to_money(1234) == Money(1234, "USD")

    def test_from_money(self):
        assert from_money(Money(99)) == 99

    def test_to_money_rejects_non_integer(self):
        """Test a non-integer value in the amount column is reported as invalid data."""
        with pytest.raises(InvalidDataError):
            to_money("12.34")


class TestKindMapper:
    def test_kind_to_str(self):
        assert kind_to_str(EntryKind.EXPENSE) == "expense"
        assert kind_to_str(EntryKind.INCOME) == "income"

    def test_kind_from_str(self):
        assert kind_from_str("income") is EntryKind.INCOME

    @pytest.mark.parametrize("value", ["refund", "Expense", ""])
    def test_unknown_kind(self, value):
        with pytest.raises(InvalidDataError):
            kind_from_str(value)


class TestDateMapper:
    def test_date_to_str(self):
        assert date_to_str(date(2024, 1, 5)) == "2024-01-05"

    def test_date_from_str(self):
        assert date_from_str("2024-01-05") == date(2024, 1, 5)

    @pytest.mark.parametrize("value", ["2024-13-01", "2024/01/05", "yesterday", "2024-1-5", None])
    def test_invalid_date(self, value):
        with pytest.raises(InvalidDataError):
            date_from_str(value)


class TestEntryMapper:
    """Tests for Entry mapper."""

    def test_entry_to_domain(self):
        """Test converting ORM Entry to domain Entry."""
        orm_entry = ORMEntry(
            id=3,
            kind="expense",
            amount_cents=1250,
            category="food",
            note="lunch",
            occurred_on="2024-01-15",
        )
        entry = entry_to_domain(orm_entry)

        assert isinstance(entry, Entry)
        assert entry.id == 3
        assert entry.kind is EntryKind.EXPENSE
        assert entry.amount == Money(1250)
        assert entry.category == Category("food")
        assert entry.occurred_on == date(2024, 1, 15)
        assert entry.note == "lunch"

    def test_entry_to_domain_rejects_blank_category(self):
        orm_entry = ORMEntry(
            id=1, kind="income", amount_cents=1, category=" ", note=None, occurred_on="2024-01-15"
        )
        with pytest.raises(InvalidDataError):
            entry_to_domain(orm_entry)

    def test_new_entry_to_orm(self, make_entry):
        orm_entry = new_entry_to_orm(make_entry(amount_cents=500, note="coffee"))

        assert orm_entry.id is None
        assert orm_entry.kind == "expense"
        assert orm_entry.amount_cents == 500
        assert orm_entry.category == "food"
        assert orm_entry.note == "coffee"
        assert orm_entry.occurred_on == "2024-01-15"


class TestUserMapper:
    def test_user_to_domain(self):
        orm_user = ORMUser(id=1, username="alice", password_hash="$argon2id$...")
        user = user_to_domain(orm_user)

        assert user == User(id=1, username="alice")
