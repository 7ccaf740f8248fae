"""Mapper functions to convert between domain models and SQLAlchemy models.

Storage keeps amounts as integer cents, dates as ``YYYY-MM-DD`` text and the
entry kind as a lowercase tag. Decoding is strict: a row that does not have
the expected shape raises InvalidDataError instead of being coerced.
"""

from datetime import date, datetime

from tuimoney.database.models import Entry as ORMEntry, User as ORMUser
from tuimoney.domain import entities as domain
from tuimoney.domain.errors import InvalidDataError
from tuimoney.domain.money import DEFAULT_CURRENCY, Money

DATE_FORMAT = "%Y-%m-%d"


def to_money(amount_cents: int, currency: str = DEFAULT_CURRENCY) -> Money:
    """Convert a stored minor-unit integer to Money."""
    if isinstance(amount_cents, bool) or not isinstance(amount_cents, int):
        raise InvalidDataError(f"Stored amount is not an integer: {amount_cents!r}")
    return Money.from_minor(amount_cents, currency)


def from_money(money: Money) -> int:
    """Convert Money to its stored minor-unit integer."""
    return money.minor_units


def kind_to_str(kind: domain.EntryKind) -> str:
    return kind.value


def kind_from_str(value: str) -> domain.EntryKind:
    try:
        return domain.EntryKind(value)
    except ValueError:
        raise InvalidDataError(f"Unknown entry kind: {value!r}") from None


def date_to_str(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def date_from_str(value: str) -> date:
    """Parse a stored date.

    Raises:
        InvalidDataError: If the text is not a valid YYYY-MM-DD date
    """
    if not isinstance(value, str) or len(value) != 10:
        raise InvalidDataError(f"Invalid stored date: {value!r}")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDataError(f"Invalid stored date {value!r}: {e}") from e


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity."""
    return domain.Entry(
        id=domain.EntryId(orm_entry.id),
        kind=kind_from_str(orm_entry.kind),
        amount=to_money(orm_entry.amount_cents),
        category=domain.Category(orm_entry.category),
        occurred_on=date_from_str(orm_entry.occurred_on),
        note=orm_entry.note,
    )


def new_entry_to_orm(new_entry: domain.NewEntry) -> ORMEntry:
    """Convert a domain NewEntry into an unsaved SQLAlchemy Entry."""
    return ORMEntry(
        kind=kind_to_str(new_entry.kind),
        amount_cents=from_money(new_entry.amount),
        category=new_entry.category.name,
        note=new_entry.note,
        occurred_on=date_to_str(new_entry.occurred_on),
    )


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(id=orm_user.id, username=orm_user.username)
