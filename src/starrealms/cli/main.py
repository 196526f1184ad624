"""Main CLI application and entry point.

This module defines the main Typer application, the session commands and the
config command group.
"""

import logging
from typing import Annotated

import typer

from starrealms.cli.commands import config as config_commands
from starrealms.cli.commands import session as session_commands

app = typer.Typer(
    name="starrealms",
    help="Unofficial Star Realms client",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)

app.command("login")(session_commands.login)
app.command("activity")(session_commands.activity)
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Star Realms command-line client.

    Log in, store the session token, and inspect your games and challenges.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


if __name__ == "__main__":
    app()
