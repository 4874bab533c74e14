"""Post-commit configuration for gwf.

The config is a TOML file with a single required key:

    post_commit_command = "git push -u origin HEAD"
    post_commit_timeout = 120   # optional, seconds

It is read from <repo_root>/gwf.toml if that file exists, otherwise from
~/.gwf/gwf.toml. Configuration is optional: a missing, unreadable or invalid
file means there is no post-commit step, never an error.
"""

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

from gwf.paths import get_global_config_file, get_repo_config_file


class PostCommitConfig(BaseModel):
    """Settings for the command run after a successful finish."""

    post_commit_command: str
    post_commit_timeout: Optional[float] = None  # None waits indefinitely


def find_config_file(repo_root: Path, gwf_dir: Optional[Path] = None) -> Optional[Path]:
    """Return the config file that applies to a repository.

    The repository file takes precedence over the user-level one.

    Args:
        repo_root: The root directory of the git repository.
        gwf_dir: gwf directory to use instead of ~/.gwf.

    Returns:
        Path to the config file, or None if neither exists.
    """
    repo_file = get_repo_config_file(repo_root)
    if repo_file.exists():
        return repo_file

    global_file = get_global_config_file(gwf_dir)
    if global_file.exists():
        return global_file

    return None


def load_post_commit_config(
    repo_root: Path,
    gwf_dir: Optional[Path] = None,
) -> Optional[PostCommitConfig]:
    """Load the post-commit config for a repository.

    Args:
        repo_root: The root directory of the git repository.
        gwf_dir: gwf directory to use instead of ~/.gwf.

    Returns:
        PostCommitConfig, or None if no usable config exists.
    """
    config_file = find_config_file(repo_root, gwf_dir)
    if config_file is None:
        return None

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
        return PostCommitConfig(**data)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError):
        return None
