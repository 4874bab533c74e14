"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- RepositoryNotFoundError: Not inside a git repository
- NoCommitsYetError: HEAD is unborn
- DetachedHeadError: HEAD does not point at a branch
- BranchAlreadyExistsError: A branch with the requested name exists
- NoStagedChangesError: The index matches HEAD
"""

from gwf.exceptions import GwfError


class GitError(GwfError):
    """Custom exception for git-related errors."""

    pass


class RepositoryNotFoundError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass


class NoCommitsYetError(GitError):
    """Raised when the repository has no commits yet."""

    pass


class DetachedHeadError(GitError):
    """Raised when HEAD is detached."""

    pass


class BranchAlreadyExistsError(GitError):
    """Raised when creating a branch whose name is taken."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"A branch named '{branch}' already exists.")


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass
