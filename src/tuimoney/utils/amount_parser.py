"""Amount parsing for user input.

Input text is converted to minor units with exact Decimal arithmetic. This is
only used at the presentation boundary; stored values are never re-derived
from formatted text.
"""

import re
from decimal import Decimal, InvalidOperation

from tuimoney.domain.errors import InvalidDataError
from tuimoney.domain.money import DEFAULT_CURRENCY, MINOR_UNIT_EXPONENT, Money

_MINOR_UNIT = Decimal(1).scaleb(-MINOR_UNIT_EXPONENT)


def parse_amount(amount_str: str, currency: str = DEFAULT_CURRENCY) -> Money:
    """Parse an amount string into Money.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "-12.50" or "(12.50)" (negative)

    Args:
        amount_str: Amount string
        currency: Currency of the resulting amount

    Returns:
        Money with the exact number of minor units

    Raises:
        InvalidDataError: If the string is not a number or has more than
            two decimal places
    """
    if not amount_str or not amount_str.strip():
        raise InvalidDataError("Empty amount string")

    cleaned = amount_str.strip()

    # Parentheses notation means negative
    is_negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        is_negative = True
        cleaned = cleaned[1:-1]

    cleaned = re.sub(r"[$€£]", "", cleaned).replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
        is_whole_minor_units = amount.is_finite() and amount == amount.quantize(_MINOR_UNIT)
    except InvalidOperation:
        raise InvalidDataError(f"Could not parse amount '{amount_str}'") from None

    if not amount.is_finite():
        raise InvalidDataError(f"Could not parse amount '{amount_str}'")
    if not is_whole_minor_units:
        raise InvalidDataError(
            f"Amount '{amount_str}' has more than {MINOR_UNIT_EXPONENT} decimal places"
        )

    minor_units = int(amount.scaleb(MINOR_UNIT_EXPONENT))
    if is_negative:
        minor_units = -minor_units
    return Money.from_minor(minor_units, currency)
