"""Top-level callback for the gwf CLI."""

from typing import Optional

import typer

from gwf import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gwf {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Conventional-commit feature branches for git."""
    # Without a subcommand there is nothing to do: show help and fail
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(2)
