"""User management commands."""

import click

from tuimoney.cli.error_handling import handle_domain_error, handle_login_failure
from tuimoney.domain.errors import DomainError
from tuimoney.domain.users import UserService


@click.group("user")
def user_group():
    """Manage users."""
    pass


@user_group.command("create")
@click.argument("username")
@click.password_option(help="Password (prompted if not given)")
@click.pass_context
def create_user(ctx, username: str, password: str):
    """Create a user.

    Examples:
        tuimoney user create alice
    """
    service = UserService(ctx.obj["db"])

    try:
        user = service.create_user(username, password)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created user '{user.username}' (ID: {user.id})")


@user_group.command("verify")
@click.argument("username")
@click.option("--password", prompt=True, hide_input=True, help="Password (prompted if not given)")
@click.pass_context
def verify_user(ctx, username: str, password: str):
    """Check a username and password."""
    service = UserService(ctx.obj["db"])

    try:
        user = service.verify_user(username, password)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if user is None:
        handle_login_failure(ctx)

    click.echo(f"Logged in as '{user.username}'")


@user_group.command("list")
@click.pass_context
def list_users(ctx):
    """List all users."""
    service = UserService(ctx.obj["db"])

    try:
        usernames = service.list_users()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not usernames:
        click.echo("No users found.")
        return

    click.echo("\nUsers:")
    click.echo("-" * 40)
    for username in usernames:
        click.echo(username)


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group)
