"""CLI command for starting a feature branch."""

from typing import Optional

import typer

from gwf.exceptions import GwfError, MessageStoreError
from gwf.prompts import TyperPrompter
from gwf.workflow import FeatureBranchRequest, create_feature_branch
from gwf.cli.utils import fail, get_message_store


def new_command(
    commit_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Type of the commit (e.g. feat, fix)",
    ),
    scope: Optional[str] = typer.Option(
        None,
        "--scope",
        "-s",
        help="Scope of the commit (e.g. ui, api)",
    ),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Message for the commit",
    ),
) -> None:
    """Create a feature branch named after a conventional commit.

    Missing options are asked for interactively. The message is saved outside
    the repository and used by 'gwf finish'.
    """
    request = FeatureBranchRequest(commit_type=commit_type, scope=scope, message=message)
    request = request.complete(TyperPrompter())

    store = get_message_store()
    try:
        created = create_feature_branch(
            request.commit_type,
            request.scope,
            request.message,
            store=store,
        )
    except MessageStoreError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo(
            "The branch was created and checked out, but its message was not saved.",
            err=True,
        )
        typer.echo("Save it with: gwf message set \"<message>\"", err=True)
        raise typer.Exit(1)
    except GwfError as e:
        fail(e)

    if created.restored_files:
        typer.echo(f"Restored {len(created.restored_files)} missing file(s).", err=True)
    typer.echo(f"Branch created and checked out: {created.name}")
