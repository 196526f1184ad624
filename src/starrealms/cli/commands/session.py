"""Session commands: log in and fetch activity."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from starrealms.cli.utils.output import (
    console,
    create_challenges_table,
    create_games_table,
    create_profile_panel,
    print_error,
    print_success,
)
from starrealms.client import StarRealms
from starrealms.config import ClientConfig, Credentials
from starrealms.config.client_config import ENV_PASSWORD, ENV_USERNAME
from starrealms.exceptions import SessionStateError, StarRealmsError
from starrealms.models import Activity, Token

logger = logging.getLogger(__name__)

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML client configuration (default: STARREALMS_* environment)",
        exists=True,
        dir_okay=False,
    ),
]
UsernameOption = Annotated[
    str | None,
    typer.Option("--username", "-u", envvar=ENV_USERNAME, help="Account username"),
]
PasswordOption = Annotated[
    str | None,
    typer.Option(
        "--password",
        "-p",
        envvar=ENV_PASSWORD,
        help="Account password",
        show_default=False,
    ),
]


def load_config(config_path: Path | None) -> ClientConfig:
    """Load a config file, or fall back to the environment."""
    try:
        if config_path is not None:
            return ClientConfig.from_yaml(config_path)
        return ClientConfig.from_env()
    except (TypeError, ValueError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)


def resolve_credentials(username: str | None, password: str | None) -> Credentials:
    if username and password:
        return Credentials(username=username, password=password)
    credentials = Credentials.from_env()
    if credentials is None:
        print_error(
            f"No credentials given. Pass --username/--password or set "
            f"{ENV_USERNAME} and {ENV_PASSWORD}."
        )
        raise typer.Exit(1)
    return credentials


def load_token(token_file: Path) -> Token:
    try:
        return Token.from_json(token_file.read_text())
    except ValidationError as e:
        print_error(f"Invalid token file {token_file}: {e}")
        raise typer.Exit(1)


def login(
    username: UsernameOption = None,
    password: PasswordOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the token JSON to this file"),
    ] = None,
    config_path: ConfigOption = None,
) -> None:
    """Log in and print the session token.

    The token can be reused later with `activity --token-file`.

    Examples:
        starrealms login --output token.json
        SR_USERNAME=me SR_PASSWORD=secret starrealms login
    """
    config = load_config(config_path)
    credentials = resolve_credentials(username, password)

    try:
        token, core_version = asyncio.run(_login(credentials, config))
    except (StarRealmsError, ValueError) as e:
        print_error(f"Login failed: {e}")
        raise typer.Exit(1)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(token.to_json())
        print_success(f"Logged in as {token.name} (core version {core_version})")
        console.print(f"Token written to {output}")
    else:
        # Plain stdout so the token can be piped
        typer.echo(token.to_json())


async def _login(credentials: Credentials, config: ClientConfig) -> tuple[Token, int]:
    async with await StarRealms.new(
        credentials.username, credentials.password, config=config
    ) as sr:
        if sr.core_version is None:
            raise SessionStateError("Login finished without a core version")
        return sr.token, sr.core_version


def activity(
    token_file: Annotated[
        Path | None,
        typer.Option(
            "--token-file",
            "-t",
            help="Token JSON written by `login`",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    session_secret: Annotated[
        str | None,
        typer.Option(
            "--session-secret",
            "-s",
            help="Bearer value (token2) obtained elsewhere",
            show_default=False,
        ),
    ] = None,
    username: UsernameOption = None,
    password: PasswordOption = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the raw activity JSON"),
    ] = False,
    config_path: ConfigOption = None,
) -> None:
    """Fetch and display the current activity feed.

    Authenticates with, in order of preference: --token-file,
    --session-secret, or credentials.

    Examples:
        starrealms activity --token-file token.json
        starrealms activity --json
    """
    config = load_config(config_path)

    token: Token | None = None
    credentials: Credentials | None = None
    if token_file is not None:
        token = load_token(token_file)
    elif session_secret:
        token = Token.from_session_secret(session_secret)
    else:
        credentials = resolve_credentials(username, password)

    try:
        result = asyncio.run(_fetch_activity(config, token, credentials))
    except (StarRealmsError, ValueError) as e:
        print_error(f"Failed to fetch activity: {e}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.model_dump(by_alias=True), indent=2))
        return

    console.print(create_profile_panel(result))
    if result.challenges:
        console.print(create_challenges_table(result.challenges))
    if result.active_games:
        console.print(create_games_table(result.active_games, "Active Games"))
    if result.finished_games:
        console.print(create_games_table(result.finished_games, "Finished Games"))


async def _fetch_activity(
    config: ClientConfig,
    token: Token | None,
    credentials: Credentials | None,
) -> Activity:
    if token is not None:
        session = await StarRealms.from_token(token, config=config)
    else:
        if credentials is None:
            raise ValueError("A token or credentials are required")
        session = await StarRealms.new(
            credentials.username, credentials.password, config=config
        )
    async with session:
        logger.debug("Fetching activity with core version %s", session.core_version)
        return await session.get_activity()
