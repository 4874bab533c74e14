"""CLI commands for inspecting gwf configuration."""

import typer

from gwf.config import find_config_file, load_post_commit_config
from gwf.git import GitError, get_repo_root
from gwf.paths import get_global_config_file, get_gwf_dir, get_repo_config_file
from gwf.cli.utils import fail

# Subcommand group for configuration
config_app = typer.Typer(
    name="config",
    help="Inspect the post-commit configuration (gwf.toml)",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show which gwf.toml applies and the command it configures."""
    try:
        repo_root = get_repo_root()
    except GitError as e:
        fail(e)

    gwf_dir = get_gwf_dir()
    typer.echo("Config lookup order:")
    typer.echo(f"  1. {get_repo_config_file(repo_root)}")
    typer.echo(f"  2. {get_global_config_file(gwf_dir)}")
    typer.echo()

    config_file = find_config_file(repo_root, gwf_dir)
    if config_file is None:
        typer.echo("No config file found; finish will not run a post-commit command.")
        return

    typer.echo(f"Using: {config_file}")
    config = load_post_commit_config(repo_root, gwf_dir)
    if config is None:
        typer.echo("  The file could not be parsed; it will be ignored.")
        return

    typer.echo(f"  post_commit_command: {config.post_commit_command}")
    if config.post_commit_timeout is not None:
        typer.echo(f"  post_commit_timeout: {config.post_commit_timeout:g}s")
