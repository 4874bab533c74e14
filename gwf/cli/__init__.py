"""CLI entry point for gwf.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from gwf.cli.config import config_app
from gwf.cli.finish import finish_command
from gwf.cli.main import main_command
from gwf.cli.message import message_app
from gwf.cli.new import new_command

# Main application
app = typer.Typer(
    name="gwf",
    help="gwf: conventional-commit branch workflow for git",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(message_app, name="message")
app.add_typer(config_app, name="config")

# Add individual commands
app.command("new")(new_command)
app.command("nfb", help="Alias for 'new'.")(new_command)
app.command("finish")(finish_command)

# Show help and exit non-zero when no subcommand is given
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "message_app",
    "config_app",
    "new_command",
    "finish_command",
    "main_command",
]
