"""CLI helpers for date range resolution."""

from datetime import date

import click

from tuimoney.cli.error_handling import fail
from tuimoney.utils.date_parser import get_date_range, parse_date


def resolve_cli_date_range(
    ctx: click.Context,
    *,
    from_date: str | None,
    to_date: str | None,
    period: str | None,
) -> tuple[date | None, date | None]:
    """Resolve a date range from a named period or explicit dates."""
    if period is not None:
        if from_date or to_date:
            fail(ctx, "--period cannot be combined with --from or --to.")
        return get_date_range(period)

    start = None
    end = None
    if from_date:
        try:
            start = parse_date(from_date)
        except ValueError as e:
            fail(ctx, f"Invalid start date: {e}")
    if to_date:
        try:
            end = parse_date(to_date)
        except ValueError as e:
            fail(ctx, f"Invalid end date: {e}")
    return start, end
