"""CLI error handling helpers.

These are the only places the CLI turns an error into output; every
failure is written to stderr as ``Error: <message>`` with exit code 1.
"""

import click

from tuimoney.domain.errors import DomainError

LOGIN_FAILED_MESSAGE = "Invalid username or password"


def fail(ctx: click.Context, message: str) -> None:
    """Print an error message to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain or parse error and exit with failure."""
    fail(ctx, str(error))


def handle_login_failure(ctx: click.Context) -> None:
    """Report a failed login without saying which half was wrong."""
    fail(ctx, LOGIN_FAILED_MESSAGE)
