"""Git branch utilities.

Contains:
- get_head_commit: Resolve the commit HEAD points at
- get_current_branch: Get the short name of the checked-out branch
- branch_exists: Check whether a local branch exists
- create_branch: Create a branch at a given commit
- checkout_branch: Switch HEAD and the working tree to a branch
- restore_missing_files: Recreate tracked files deleted from the working tree
"""

from pathlib import Path
from typing import Optional

from gwf.git.exceptions import (
    BranchAlreadyExistsError,
    DetachedHeadError,
    GitError,
    NoCommitsYetError,
)
from gwf.git.runner import _run_git_command


def get_head_commit(cwd: Optional[Path] = None) -> str:
    """Resolve the commit id HEAD points at.

    Returns:
        The full commit sha.

    Raises:
        NoCommitsYetError: If HEAD is unborn.
    """
    try:
        sha = _run_git_command(["rev-parse", "--verify", "--quiet", "HEAD^{commit}"], cwd=cwd)
    except GitError:
        raise NoCommitsYetError("The repository has no commits yet. Make an initial commit first.")
    if not sha:
        raise NoCommitsYetError("The repository has no commits yet. Make an initial commit first.")
    return sha


def get_current_branch(cwd: Optional[Path] = None) -> str:
    """Get the short name of the current branch.

    Raises:
        DetachedHeadError: If HEAD is not a symbolic ref to a branch.
    """
    try:
        branch = _run_git_command(["symbolic-ref", "--short", "--quiet", "HEAD"], cwd=cwd)
    except GitError:
        raise DetachedHeadError("HEAD is detached. Check out a feature branch first.")
    if not branch:
        raise DetachedHeadError("HEAD is detached. Check out a feature branch first.")
    return branch


def branch_exists(name: str, cwd: Optional[Path] = None) -> bool:
    """Check whether refs/heads/<name> exists."""
    try:
        _run_git_command(["show-ref", "--verify", "--quiet", f"refs/heads/{name}"], cwd=cwd)
        return True
    except GitError:
        return False


def create_branch(name: str, start_point: str, cwd: Optional[Path] = None) -> None:
    """Create a new branch pointing at start_point.

    Args:
        name: Branch short name.
        start_point: Commit the branch should point at.
        cwd: Repository directory.

    Raises:
        BranchAlreadyExistsError: If the branch exists.
        GitError: If git rejects the name (e.g. it clashes with an existing ref path).
    """
    if branch_exists(name, cwd=cwd):
        raise BranchAlreadyExistsError(name)
    _run_git_command(["branch", "--no-track", name, start_point], cwd=cwd)


def checkout_branch(name: str, cwd: Optional[Path] = None) -> None:
    """Switch HEAD and the working tree to an existing branch.

    Plain `git checkout` refuses to overwrite local modifications, so
    uncommitted work is kept. A branch created at the current commit never
    conflicts with the working tree.
    """
    _run_git_command(["checkout", "--quiet", name], cwd=cwd)


def restore_missing_files(cwd: Optional[Path] = None) -> list[str]:
    """Recreate tracked files that are missing from the working tree.

    Files are restored from the index, so staged content is what comes back.

    Returns:
        List of restored paths, relative to the repository root.
    """
    output = _run_git_command(["ls-files", "--deleted", "-z"], cwd=cwd)
    missing = [path for path in output.split("\0") if path]
    if not missing:
        return []
    _run_git_command(["checkout-index", "--force", "--"] + missing, cwd=cwd)
    return missing
