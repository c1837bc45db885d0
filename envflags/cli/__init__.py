"""
Command-Line Interface

CLI commands for inspecting how a configuration class binds to flags
and environment variables.

Commands:
    envflags inspect  - Bind a configuration class and show the resolved flags
    envflags names    - Show flag and environment names for identifiers

Usage:
    # Show flags of a dataclass with its defaults and the current environment
    envflags inspect myapp.settings:Config

    # Layer a .env file and pass flags to the configuration
    envflags inspect myapp.settings:Config --env-file .env -- -port 9090

    # Case conversion
    envflags names FieldAPIKey WebServerAddr
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from envflags.errors import EnvFlagsError

__all__ = ["main", "app"]

app = typer.Typer(
    name="envflags",
    help="Bind configuration classes to command-line flags and environment variables",
    no_args_is_help=True,
)
console = Console()

_SOURCE_STYLES = {"flag": "green", "env": "yellow", "default": "dim"}


def _import_target(target: str) -> Any:
    """Import "package.module:ClassName" and return the class."""
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise typer.BadParameter(f"expected MODULE:CLASS, got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"cannot import {module_name}: {e}") from e

    try:
        return getattr(module, attribute)
    except AttributeError as e:
        raise typer.BadParameter(f"{module_name} has no attribute {attribute!r}") from e


@app.command()
def inspect(
    target: str = typer.Argument(
        ...,
        help="Configuration class as MODULE:CLASS",
    ),
    args: Optional[list[str]] = typer.Argument(
        None,
        help="Flags passed to the configuration (after --)",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file", "-e",
        help=".env file layered beneath the process environment",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Log binding decisions",
    ),
) -> None:
    """Bind a configuration class and show the resolved flags."""
    from envflags.binding.loader import load
    from envflags.flags.flagset import FlagSet

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )

    config_cls = _import_target(target)
    flagset = FlagSet(target)

    try:
        config = config_cls()
    except TypeError as e:
        raise typer.BadParameter(f"cannot instantiate {target} with defaults: {e}") from e

    try:
        load(config, args or [], flagset=flagset, dotenv_path=env_file)
    except EnvFlagsError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"Configuration: {target}")
    table.add_column("Flag", style="cyan")
    table.add_column("Env", style="magenta")
    table.add_column("Kind")
    table.add_column("Value", style="bold")
    table.add_column("Source")
    table.add_column("Usage", style="dim")

    for flag in flagset.flags():
        source = flagset.source(flag.name)
        table.add_row(
            f"-{flag.name}",
            flag.env_name or "",
            flag.kind.value,
            escape(flag.kind.render(flag.value)),
            f"[{_SOURCE_STYLES[source]}]{source}[/]",
            escape(flag.usage),
        )

    console.print(table)

    if flagset.args:
        console.print(f"[dim]Positional arguments: {' '.join(flagset.args)}[/]")


@app.command()
def names(
    identifiers: list[str] = typer.Argument(
        ...,
        help="Identifiers to convert",
    ),
) -> None:
    """Show the flag and environment names derived from identifiers."""
    from envflags.utils.naming import to_env_style, to_flag_style

    table = Table()
    table.add_column("Identifier", style="cyan")
    table.add_column("Flag", style="green")
    table.add_column("Env", style="magenta")

    for identifier in identifiers:
        table.add_row(identifier, to_flag_style(identifier), to_env_style(identifier))

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()
