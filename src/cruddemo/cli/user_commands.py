"""Credential helper CLI commands."""

import typer
from rich.console import Console

from src.cruddemo.core.security import encode_password
from src.cruddemo.runtime.context import get_config

console = Console()

users_app = typer.Typer(help="Inspect configured users and encode passwords")


@users_app.command("list")
def list_users() -> None:
    """Show the configured users and their roles."""
    for user in get_config().security.users:
        console.print(f"[cyan]{user.username}[/cyan]: {', '.join(user.roles) or '-'}")


@users_app.command("encode")
def encode(
    password: str = typer.Argument(..., help="Plain-text password to encode"),
    encoder: str = typer.Option("pbkdf2", "--encoder", "-e", help="pbkdf2 or noop"),
) -> None:
    """Print the stored form of a password for the security.users config."""
    try:
        console.print(encode_password(password, encoder=encoder), soft_wrap=True)
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
