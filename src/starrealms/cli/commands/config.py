"""Config subcommands for configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml

from starrealms.cli.utils.output import console, print_error, print_success, print_warning
from starrealms.config import DEFAULT_MIN_CORE_VERSION, ClientConfig

app = typer.Typer(no_args_is_help=True)


def _print_summary(config: ClientConfig) -> None:
    console.print("[bold]Configuration Summary:[/bold]")
    console.print(f"  Base URL: {config.base_url}")
    console.print(
        f"  Core Versions: {config.min_core_version}..{config.max_core_version}"
    )
    timeout = f"{config.timeout}s" if config.timeout is not None else "none"
    console.print(f"  Timeout: {timeout}")


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed configuration"),
    ] = False,
) -> None:
    """Validate a client configuration file.

    Examples:
        starrealms config validate starrealms.yaml
        starrealms config validate starrealms.yaml --verbose
    """
    # First, check if it's valid YAML
    try:
        with open(config_path) as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)

    if raw_data is None:
        print_error("Configuration file is empty")
        raise typer.Exit(1)

    if not isinstance(raw_data, dict):
        print_error("Configuration must be a YAML mapping (dictionary)")
        raise typer.Exit(1)

    try:
        config = ClientConfig.from_dict(raw_data)
    except TypeError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)
    except ValueError as e:
        print_error(f"Invalid configuration value: {e}")
        raise typer.Exit(1)

    warnings: list[str] = []
    if config.min_core_version > DEFAULT_MIN_CORE_VERSION:
        warnings.append(
            f"min_core_version ({config.min_core_version}) is above the default "
            f"({DEFAULT_MIN_CORE_VERSION}) - older servers will not be found"
        )
    if not config.base_url.startswith("https://"):
        warnings.append(f"base_url ({config.base_url}) does not use HTTPS")

    print_success(f"Configuration is valid: {config_path}")

    if warnings:
        console.print()
        for warning in warnings:
            print_warning(warning)

    if verbose:
        console.print()
        _print_summary(config)


@app.command("show")
def show(
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML file to show (default: STARREALMS_* environment)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Show the effective client configuration."""
    try:
        if config_path is not None:
            config = ClientConfig.from_yaml(config_path)
        else:
            config = ClientConfig.from_env()
    except (TypeError, ValueError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    _print_summary(config)


@app.command("init")
def init(
    output: Annotated[
        Path,
        typer.Argument(help="Where to write the default configuration"),
    ] = Path("starrealms.yaml"),
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Write a configuration file with default values."""
    if output.exists() and not force:
        print_error(f"{output} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    ClientConfig().to_yaml(output)
    print_success(f"Wrote default configuration to {output}")
