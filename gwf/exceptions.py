"""Exception classes shared across gwf.

Contains:
- GwfError: Base exception for all gwf errors
- InvalidBranchFormatError: Branch name does not encode type/scope/message
- MessageNotFoundError: No pending message stored for a branch
- MessageStoreError: Filesystem failure while reading or writing a message
"""

from pathlib import Path
from typing import Optional


class GwfError(Exception):
    """Base exception for gwf errors."""

    pass


class InvalidBranchFormatError(GwfError):
    """Raised when a branch name is not 'type/message' or 'type/scope/message'."""

    def __init__(self, branch: str, reason: Optional[str] = None):
        self.branch = branch
        detail = reason or "expected 'type/message' or 'type/scope/message'"
        super().__init__(f"Invalid branch name format '{branch}': {detail}")


class MessageNotFoundError(GwfError):
    """Raised when no pending commit message exists for a branch."""

    def __init__(self, branch: str, path: Path):
        self.branch = branch
        self.path = path
        super().__init__(
            f"No pending commit message for branch '{branch}' (expected {path})"
        )


class MessageStoreError(GwfError):
    """Raised when the side-message store cannot be read or written."""

    pass
