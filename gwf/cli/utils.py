"""Shared utility functions for CLI commands."""

from typing import NoReturn

import typer

from gwf.git import GitError
from gwf.paths import get_gwf_dir
from gwf.store import MessageStore


def get_message_store() -> MessageStore:
    """Return the message store rooted at the user-level gwf directory."""
    return MessageStore(get_gwf_dir())


def fail(error: Exception) -> NoReturn:
    """Report a workflow error on stderr and exit with status 1."""
    if isinstance(error, GitError):
        typer.echo(f"Git error: {error}", err=True)
    else:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)
