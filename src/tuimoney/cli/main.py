"""Main CLI entry point."""

import click

from tuimoney.cli.commands import entry, user
from tuimoney.cli.error_handling import handle_domain_error
from tuimoney.database.factories import create_sqlite_database
from tuimoney.domain.errors import StorageError


@click.group()
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help="Path to database file (overrides TUIMONEY_DB_PATH environment variable)",
    envvar="TUIMONEY_DB_PATH",
)
@click.pass_context
def cli(ctx, db_path: str | None):
    """tuimoney - Personal income and expense ledger."""
    ctx.ensure_object(dict)

    # Open the database only when actually running a command (not for --help)
    if ctx.invoked_subcommand is not None:
        try:
            db = create_sqlite_database(database_path=db_path)
        except StorageError as e:
            handle_domain_error(ctx, e)
        ctx.obj["db"] = db
        ctx.call_on_close(db.close)


entry.register_commands(cli)
user.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
