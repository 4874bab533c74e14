"""Git access layer for gwf.

This package wraps the git executable with:
- exceptions: GitError and the workflow-specific git failures
- runner: _run_git_command, get_repo_root
- branch: get_head_commit, get_current_branch, branch_exists, create_branch,
          checkout_branch, restore_missing_files
- commit: write_index_tree, get_commit_tree, create_commit
"""

# Exceptions
from gwf.git.exceptions import (
    GitError,
    RepositoryNotFoundError,
    NoCommitsYetError,
    DetachedHeadError,
    BranchAlreadyExistsError,
    NoStagedChangesError,
)

# Runner utilities
from gwf.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Branch utilities
from gwf.git.branch import (
    get_head_commit,
    get_current_branch,
    branch_exists,
    create_branch,
    checkout_branch,
    restore_missing_files,
)

# Commit plumbing
from gwf.git.commit import (
    write_index_tree,
    get_commit_tree,
    create_commit,
)


__all__ = [
    # Exceptions
    "GitError",
    "RepositoryNotFoundError",
    "NoCommitsYetError",
    "DetachedHeadError",
    "BranchAlreadyExistsError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Branch
    "get_head_commit",
    "get_current_branch",
    "branch_exists",
    "create_branch",
    "checkout_branch",
    "restore_missing_files",
    # Commit
    "write_index_tree",
    "get_commit_tree",
    "create_commit",
]
