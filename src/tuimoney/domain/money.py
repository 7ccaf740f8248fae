"""Monetary value type.

Amounts are held as an integer count of minor units (cents) together with a
currency code. Arithmetic never leaves the integer domain; decimal values are
only produced for display.
"""

from dataclasses import dataclass
from decimal import Decimal

from tuimoney.domain.errors import InvalidDataError, currency_mismatch

DEFAULT_CURRENCY = "USD"

# Every supported currency uses two decimal places.
MINOR_UNIT_EXPONENT = 2

# Largest amount a stored entry can hold (signed 64-bit INTEGER column).
MAX_MINOR_UNITS = 2**63 - 1

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


@dataclass(frozen=True)
class Money:
    """Immutable amount in minor units of a single currency."""

    minor_units: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        if isinstance(self.minor_units, bool) or not isinstance(self.minor_units, int):
            raise InvalidDataError(
                f"Money requires an integer amount of minor units, got {self.minor_units!r}"
            )
        if not isinstance(self.currency, str) or len(self.currency) != 3 or not self.currency.isalpha():
            raise InvalidDataError(f"Invalid currency code: {self.currency!r}")
        object.__setattr__(self, "currency", self.currency.upper())

    @classmethod
    def from_minor(cls, minor_units: int, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Create an amount from a count of minor units (e.g. cents)."""
        return cls(minor_units=minor_units, currency=currency)

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        return cls(0, currency)

    def is_positive(self) -> bool:
        return self.minor_units > 0

    def is_negative(self) -> bool:
        return self.minor_units < 0

    def is_zero(self) -> bool:
        return self.minor_units == 0

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise InvalidDataError(currency_mismatch(self.currency, other.currency))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return Money(self.minor_units + other.minor_units, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_currency(other)
        return Money(self.minor_units - other.minor_units, self.currency)

    def __neg__(self) -> "Money":
        return Money(-self.minor_units, self.currency)

    def to_decimal(self) -> Decimal:
        """Return the amount in major units, for display only."""
        return Decimal(self.minor_units).scaleb(-MINOR_UNIT_EXPONENT)

    def format(self) -> str:
        """Format for display, e.g. ``$1,234.50`` or ``-12.00 CHF``."""
        value = self.to_decimal()
        sign = "-" if value < 0 else ""
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol is not None:
            return f"{sign}{symbol}{abs(value):,.2f}"
        return f"{sign}{abs(value):,.2f} {self.currency}"

    def __str__(self) -> str:
        return self.format()
