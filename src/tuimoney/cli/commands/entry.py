"""Ledger entry commands."""

import click

from tuimoney.cli.date_filters import resolve_cli_date_range
from tuimoney.cli.error_handling import fail, handle_domain_error
from tuimoney.domain.entities import Entry, EntryKind
from tuimoney.domain.errors import DomainError
from tuimoney.domain.ledger import LedgerService
from tuimoney.utils.amount_parser import parse_amount
from tuimoney.utils.date_parser import PERIODS, parse_date


def format_entry_line(entry: Entry) -> str:
    """Render one entry as a table row. Expenses are shown with a minus sign."""
    amount = entry.amount if entry.kind is EntryKind.INCOME else -entry.amount
    note = (entry.note or "")[:30]
    return (
        f"{entry.id:<6} {entry.occurred_on.isoformat():<12} {entry.kind.value:<8} "
        f"{entry.category.name:<20} {amount.format():>14}  {note}"
    )


@click.command("add")
@click.option(
    "--kind",
    type=click.Choice([kind.value for kind in EntryKind]),
    default=EntryKind.EXPENSE.value,
    show_default=True,
    help="Entry kind",
)
@click.option("--amount", required=True, help="Positive amount (e.g., 12.50)")
@click.option("--category", required=True, help="Category name (e.g., food)")
@click.option("--note", help="Optional note")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.pass_context
def add_entry(ctx, kind: str, amount: str, category: str, note: str | None, date_str: str):
    """Record an income or expense entry.

    Examples:
        tuimoney add --amount 12.50 --category food --note lunch
        tuimoney add --kind income --amount 2500 --category salary --date 2024-01-31
    """
    service = LedgerService(ctx.obj["db"])

    try:
        occurred_on = parse_date(date_str)
    except ValueError as e:
        fail(ctx, f"Invalid date format: {e}")

    try:
        entry = service.add_entry(
            kind=EntryKind(kind),
            amount=parse_amount(amount),
            category=category,
            occurred_on=occurred_on,
            note=note,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created entry {entry.id}")
    click.echo(f"  Date: {entry.occurred_on.isoformat()}")
    click.echo(f"  Kind: {entry.kind.value}")
    click.echo(f"  Amount: {entry.amount.format()}")
    click.echo(f"  Category: {entry.category.name}")
    if entry.note:
        click.echo(f"  Note: {entry.note}")


@click.command("list")
@click.option("--from", "from_date", help="Start date, inclusive (YYYY-MM-DD)")
@click.option("--to", "to_date", help="End date, inclusive (YYYY-MM-DD)")
@click.option("--period", type=click.Choice(PERIODS), help="Named period instead of --from/--to")
@click.option("--category", help="Only show entries in this category")
@click.pass_context
def list_entries(ctx, from_date: str | None, to_date: str | None, period: str | None, category: str | None):
    """List entries, newest first, with totals."""
    service = LedgerService(ctx.obj["db"])
    start, end = resolve_cli_date_range(ctx, from_date=from_date, to_date=to_date, period=period)

    try:
        entries = service.list_entries(from_date=start, to_date=end, category=category)
        summary = service.summarize(entries)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 80)
    click.echo(f"{'ID':<6} {'Date':<12} {'Kind':<8} {'Category':<20} {'Amount':>14}  Note")
    click.echo("-" * 80)
    for entry in entries:
        click.echo(format_entry_line(entry))
    click.echo("-" * 80)
    click.echo(f"Income:   {summary.income.format():>14}")
    click.echo(f"Expenses: {summary.expenses.format():>14}")
    click.echo(f"Net:      {summary.net.format():>14}")


@click.command("show")
@click.argument("entry_id", type=int)
@click.pass_context
def show_entry(ctx, entry_id: int):
    """Show a single entry by ID."""
    service = LedgerService(ctx.obj["db"])

    try:
        entry = service.get_entry(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Entry ID: {entry.id}")
    click.echo(f"  Date: {entry.occurred_on.isoformat()}")
    click.echo(f"  Kind: {entry.kind.value}")
    click.echo(f"  Amount: {entry.amount.format()}")
    click.echo(f"  Category: {entry.category.name}")
    if entry.note:
        click.echo(f"  Note: {entry.note}")


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(add_entry)
    cli.add_command(list_entries)
    cli.add_command(show_entry)
