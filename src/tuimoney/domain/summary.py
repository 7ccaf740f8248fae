"""Totals over a set of ledger entries."""

from dataclasses import dataclass
from typing import Iterable

from tuimoney.domain.entities import Entry, EntryKind
from tuimoney.domain.money import DEFAULT_CURRENCY, Money


@dataclass(frozen=True)
class LedgerSummary:
    """Income and expense totals. Both totals are non-negative."""

    income: Money
    expenses: Money
    count: int

    @property
    def net(self) -> Money:
        """Income minus expenses; negative when spending exceeds income."""
        return self.income - self.expenses


def summarize(entries: Iterable[Entry], currency: str = DEFAULT_CURRENCY) -> LedgerSummary:
    """Sum income and expenses separately.

    Raises:
        InvalidDataError: If an entry is in a different currency
    """
    income = Money.zero(currency)
    expenses = Money.zero(currency)
    count = 0
    for entry in entries:
        if entry.kind is EntryKind.INCOME:
            income += entry.amount
        else:
            expenses += entry.amount
        count += 1
    return LedgerSummary(income=income, expenses=expenses, count=count)
