"""Side-message store for gwf.

Pending commit messages live outside the repository, one file per branch,
named after the slug of the branch name:

    ~/.gwf/feat-api-add-login   ->   "add login\n"

The store root is passed in so tests (and alternative layouts) never touch
the real home directory.
"""

from pathlib import Path

from gwf.branch_name import slugify
from gwf.exceptions import MessageNotFoundError, MessageStoreError


class MessageStore:
    """Maps branch names to pending free-text commit messages."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, branch: str) -> Path:
        """Return the message file path for a branch."""
        return self.root / slugify(branch)

    def put(self, branch: str, text: str) -> Path:
        """Store the message for a branch, replacing any previous one.

        Args:
            branch: Branch name the message belongs to.
            text: Single-line commit message text.

        Returns:
            Path of the written file.

        Raises:
            MessageStoreError: If the directory or file cannot be written.
        """
        path = self.path_for(branch)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            path.write_text(f"{text}\n", encoding="utf-8")
        except OSError as e:
            raise MessageStoreError(f"Failed to save pending message to {path}: {e}")
        return path

    def get(self, branch: str) -> str:
        """Load the message stored for a branch.

        Returns:
            The message text without its trailing newline.

        Raises:
            MessageNotFoundError: If no message is stored for the branch.
            MessageStoreError: If the file exists but cannot be read.
        """
        path = self.path_for(branch)
        try:
            content = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise MessageNotFoundError(branch, path)
        except UnicodeDecodeError as e:
            raise MessageStoreError(f"Pending message {path} is not valid UTF-8: {e}")
        except OSError as e:
            raise MessageStoreError(f"Failed to read pending message from {path}: {e}")
        return content.rstrip("\r\n")

    def exists(self, branch: str) -> bool:
        return self.path_for(branch).is_file()

    def delete(self, branch: str) -> bool:
        """Remove the message stored for a branch.

        Returns:
            True if a file was removed, False if none existed.
        """
        path = self.path_for(branch)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise MessageStoreError(f"Failed to remove pending message {path}: {e}")
        return True
