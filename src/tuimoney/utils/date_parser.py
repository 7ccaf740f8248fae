"""Date parsing utilities."""

from datetime import date, timedelta

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "this-year", "this-week", "last-month", "last-year", "last-week")

_PERIOD_STEPS = {
    "week": relativedelta(weeks=1),
    "month": relativedelta(months=1),
    "year": relativedelta(years=1),
}


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and relative
    phrases: "today", "yesterday", "tomorrow", and "this/last month|year|week"
    (which resolve to the first day of that period).

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    words = date_str.split()
    if len(words) == 2 and words[0] in ("this", "last"):
        try:
            start, _ = get_date_range(f"{words[0]}-{words[1]}")
            return start
        except ValueError:
            pass

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def get_date_range(period: str) -> tuple[date, date]:
    """Get inclusive start and end dates for a named period.

    Args:
        period: One of this-month, this-year, this-week, last-month, last-year, last-week

    Raises:
        ValueError: If period string is not recognized
    """
    relation, _, unit = period.strip().lower().partition("-")
    if relation not in ("this", "last") or unit not in _PERIOD_STEPS:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")

    today = date.today()
    current_start = _period_start(today, unit)
    if relation == "this":
        return current_start, today

    # The previous period ends the day before the current one starts
    return current_start - _PERIOD_STEPS[unit], current_start - timedelta(days=1)


def _period_start(day: date, unit: str) -> date:
    if unit == "week":
        return day - timedelta(days=day.weekday())
    if unit == "month":
        return day.replace(day=1)
    return day.replace(month=1, day=1)
