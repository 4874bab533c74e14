"""CLI command for finishing a feature branch."""

import typer

from gwf.exceptions import GwfError
from gwf.hooks import PostCommitResult
from gwf.paths import get_gwf_dir
from gwf.workflow import finish_branch
from gwf.cli.utils import fail, get_message_store


def finish_command(
    allow_empty: bool = typer.Option(
        False,
        "--allow-empty",
        help="Commit even when nothing is staged",
    ),
    keep_message: bool = typer.Option(
        False,
        "--keep-message",
        help="Keep the pending message file after committing",
    ),
) -> None:
    """Commit staged changes with the branch's conventional commit message.

    Runs the configured post-commit command afterwards, if any.
    """
    try:
        result = finish_branch(
            get_message_store(),
            allow_empty=allow_empty,
            keep_message=keep_message,
            gwf_dir=get_gwf_dir(),
        )
    except GwfError as e:
        fail(e)

    typer.echo(f"Created commit: {result.commit}")
    typer.echo(f"  {result.message}", err=True)

    if result.cleanup_error:
        typer.echo(f"Warning: {result.cleanup_error}", err=True)

    if result.post_commit is None:
        typer.echo("No post-commit command configured.", err=True)
        return

    _report_post_commit(result.post_commit)


def _report_post_commit(outcome: PostCommitResult) -> None:
    """Print the post-commit command output and status."""
    if outcome.stdout.strip():
        typer.echo(f"Post-commit command output:\n{outcome.stdout.rstrip()}")
    if outcome.stderr.strip():
        typer.echo(f"Post-commit command errors:\n{outcome.stderr.rstrip()}", err=True)

    if outcome.succeeded:
        typer.echo("Post-commit command executed successfully", err=True)
    elif outcome.error:
        typer.echo(f"Post-commit command failed: {outcome.error}", err=True)
    else:
        typer.echo(f"Post-commit command failed with exit code: {outcome.returncode}", err=True)
