"""Main CLI application module."""

import typer

from src.cruddemo.runtime.context import get_config

from .db_commands import db_app
from .user_commands import users_app

app = typer.Typer(
    help="Employee directory API management tool",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(users_app, name="users")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (config app.host)"),
    port: int | None = typer.Option(None, "--port", help="Bind port (config app.port)"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    app_config = get_config().app
    uvicorn.run(
        "src.cruddemo.api.http.app:app",
        host=host or app_config.host,
        port=port or app_config.port,
        reload=reload,
        log_config=None,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
