"""Git tree and commit plumbing.

Contains:
- write_index_tree: Snapshot the index into a tree object
- get_commit_tree: Get the tree id of a commit
- create_commit: Write a commit object and advance HEAD to it
"""

from pathlib import Path
from typing import Optional

from gwf.git.runner import _run_git_command


def write_index_tree(cwd: Optional[Path] = None) -> str:
    """Write the current index contents to a tree object.

    Only staged content is included; unstaged edits are not.

    Returns:
        The tree id.

    Raises:
        GitError: If the index has unresolved conflicts.
    """
    return _run_git_command(["write-tree"], cwd=cwd)


def get_commit_tree(commit: str, cwd: Optional[Path] = None) -> str:
    """Return the tree id of a commit."""
    return _run_git_command(["rev-parse", f"{commit}^{{tree}}"], cwd=cwd)


def create_commit(tree: str, parent: str, message: str, cwd: Optional[Path] = None) -> str:
    """Create a commit from a tree and point HEAD's branch at it.

    Args:
        tree: Tree id to commit.
        parent: Sole parent commit id.
        message: Full commit message.
        cwd: Repository directory.

    Returns:
        The new commit id.
    """
    commit = _run_git_command(["commit-tree", tree, "-p", parent, "-m", message], cwd=cwd)
    subject = message.splitlines()[0] if message else ""
    # Passing the old value makes the update fail if HEAD moved meanwhile
    _run_git_command(["update-ref", "-m", f"commit: {subject}", "HEAD", commit, parent], cwd=cwd)
    return commit
