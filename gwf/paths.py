"""Filesystem locations used by gwf.

Contains:
- get_gwf_dir: The user-level ~/.gwf directory
- get_global_config_file: Path to ~/.gwf/gwf.toml
- get_repo_config_file: Path to <repo>/gwf.toml
"""

from pathlib import Path
from typing import Optional

CONFIG_FILE_NAME = "gwf.toml"

_GWF_DIR = Path.home() / ".gwf"


def get_gwf_dir() -> Path:
    """Get the user-level gwf directory.

    Returns:
        Path to ~/.gwf/
    """
    return _GWF_DIR


def get_global_config_file(gwf_dir: Optional[Path] = None) -> Path:
    """Return path to the user-level config file.

    Args:
        gwf_dir: gwf directory to use instead of ~/.gwf.

    Returns:
        Path to ~/.gwf/gwf.toml
    """
    return (gwf_dir or get_gwf_dir()) / CONFIG_FILE_NAME


def get_repo_config_file(repo_root: Path) -> Path:
    """Return path to the repository config file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to <repo_root>/gwf.toml
    """
    return repo_root / CONFIG_FILE_NAME
