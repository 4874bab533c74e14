"""CLI commands for the pending message of the current branch."""

import typer

from gwf.branch_name import decode
from gwf.exceptions import GwfError
from gwf.git import get_current_branch, get_repo_root
from gwf.cli.utils import fail, get_message_store

# Subcommand group for pending message management
message_app = typer.Typer(
    name="message",
    help="Show or change the pending commit message of the current branch",
    add_completion=False,
)


def _current_branch() -> str:
    """Return the current feature branch, validating its format."""
    branch = get_current_branch(get_repo_root())
    decode(branch)
    return branch


@message_app.command("show")
def message_show() -> None:
    """Show the pending message for the current branch."""
    try:
        branch = _current_branch()
        text = get_message_store().get(branch)
    except GwfError as e:
        fail(e)

    typer.echo(text)


@message_app.command("set")
def message_set(
    text: str = typer.Argument(..., help="Commit message text"),
) -> None:
    """Store or replace the pending message for the current branch."""
    text = text.strip()
    if not text:
        typer.echo("Error: message must not be empty.", err=True)
        raise typer.Exit(1)

    try:
        branch = _current_branch()
        path = get_message_store().put(branch, text)
    except GwfError as e:
        fail(e)

    typer.echo(f"Saved message for {branch} to {path}")


@message_app.command("path")
def message_path() -> None:
    """Print the location of the pending message file."""
    try:
        branch = _current_branch()
    except GwfError as e:
        fail(e)

    typer.echo(str(get_message_store().path_for(branch)))
