"""Branch name codec for gwf.

A feature branch name encodes the conventional-commit header of the work done
on it:

    <type>/<message-slug>
    <type>/<scope>/<message-slug>

The message segment is a lossy slug; the real commit text is kept in the
side-message store (see gwf.store).
"""

import re
import unicodedata
from dataclasses import dataclass

from gwf.exceptions import InvalidBranchFormatError


# Conventional commit types offered by the interactive type prompt
CONVENTIONAL_TYPES = [
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
]

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class BranchSpec:
    """Decoded components of a feature branch name."""

    type: str
    scope: str
    message: str


def slugify(text: str) -> str:
    """Convert arbitrary text to a lowercase, hyphen-joined ASCII slug.

    Accents are folded to their ASCII base letter and characters with no
    ASCII equivalent are dropped.

    Examples:
        "Add Login!" -> "add-login"
        "Crème brûlée" -> "creme-brulee"
    """
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", folded.lower()).strip("-")


def encode(commit_type: str, scope: str, message: str) -> str:
    """Build a branch name from a commit type, optional scope and message.

    Args:
        commit_type: Conventional commit type, e.g. "feat".
        scope: Commit scope; empty for none.
        message: Free-text commit message.

    Returns:
        "type/message" when the scope is empty, otherwise "type/scope/message",
        with every segment slugified.

    Raises:
        InvalidBranchFormatError: If the type or message has no slug characters.
    """
    type_slug = slugify(commit_type)
    scope_slug = slugify(scope)
    message_slug = slugify(message)

    segments = [type_slug, scope_slug, message_slug] if scope_slug else [type_slug, message_slug]
    name = "/".join(segments)

    if not type_slug:
        raise InvalidBranchFormatError(name, f"commit type {commit_type!r} is empty after slugifying")
    if not message_slug:
        raise InvalidBranchFormatError(name, f"message {message!r} is empty after slugifying")
    return name


def decode(branch: str) -> BranchSpec:
    """Split a branch name into its type, scope and message segments.

    Raises:
        InvalidBranchFormatError: If the name does not have 2 or 3 segments.
    """
    parts = branch.split("/")
    if len(parts) == 2:
        return BranchSpec(type=parts[0], scope="", message=parts[1])
    if len(parts) == 3:
        return BranchSpec(type=parts[0], scope=parts[1], message=parts[2])
    raise InvalidBranchFormatError(branch)


def format_commit_message(commit_type: str, scope: str, text: str) -> str:
    """Render a conventional commit header.

    Returns:
        "type(scope): text", or "type: text" when scope is empty.
    """
    text = text.strip()
    if scope:
        return f"{commit_type}({scope}): {text}"
    return f"{commit_type}: {text}"
