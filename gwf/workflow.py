"""Branch workflow orchestration.

Contains:
- create_feature_branch: Create and check out a branch, remembering its message
- finish_branch: Commit the staged tree with the remembered message
- FeatureBranchRequest / CreatedBranch / FinishResult: inputs and outcomes

Each step runs only if the previous one succeeded; failures propagate to the
caller and nothing is rolled back.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from gwf.branch_name import CONVENTIONAL_TYPES, decode, encode, format_commit_message
from gwf.config import load_post_commit_config
from gwf.exceptions import MessageStoreError
from gwf.git import (
    NoStagedChangesError,
    checkout_branch,
    create_branch,
    create_commit,
    get_commit_tree,
    get_current_branch,
    get_head_commit,
    get_repo_root,
    restore_missing_files,
    write_index_tree,
)
from gwf.hooks import PostCommitResult, run_post_commit_command
from gwf.prompts import Prompter
from gwf.store import MessageStore


@dataclass
class FeatureBranchRequest:
    """Values for a new feature branch; None means not yet provided."""

    commit_type: Optional[str] = None
    scope: Optional[str] = None
    message: Optional[str] = None

    def complete(self, prompter: Prompter) -> "FeatureBranchRequest":
        """Prompt for every missing field and return the filled-in request."""
        commit_type = self.commit_type
        if commit_type is None:
            commit_type = prompter.choose("Type of the commit", CONVENTIONAL_TYPES)
        scope = self.scope
        if scope is None:
            scope = prompter.text("Scope of the commit (e.g. ui, api; empty for none)", allow_empty=True)
        message = self.message
        if message is None:
            message = prompter.text("Message for the commit")
        return FeatureBranchRequest(commit_type=commit_type, scope=scope, message=message)


@dataclass
class CreatedBranch:
    """Outcome of create_feature_branch."""

    name: str
    base_commit: str
    message_file: Path
    restored_files: list[str] = field(default_factory=list)


@dataclass
class FinishResult:
    """Outcome of finish_branch."""

    branch: str
    commit: str
    message: str
    message_removed: bool = False
    cleanup_error: Optional[str] = None
    post_commit: Optional[PostCommitResult] = None


def create_feature_branch(
    commit_type: str,
    scope: str,
    message: str,
    store: MessageStore,
    cwd: Optional[Path] = None,
) -> CreatedBranch:
    """Create a feature branch from HEAD, check it out and store its message.

    Args:
        commit_type: Conventional commit type.
        scope: Commit scope, empty for none.
        message: Free-text commit message to use when finishing.
        store: Where the pending message is saved.
        cwd: Directory inside the repository.

    Returns:
        CreatedBranch describing the new branch.

    Raises:
        RepositoryNotFoundError: Not inside a git repository.
        NoCommitsYetError: HEAD is unborn.
        InvalidBranchFormatError: The inputs do not make a valid branch name.
        BranchAlreadyExistsError: The branch name is taken.
        MessageStoreError: The message could not be saved (the branch stays).
    """
    repo_root = get_repo_root(cwd)
    parent = get_head_commit(repo_root)

    branch = encode(commit_type, scope, message)
    create_branch(branch, parent, cwd=repo_root)

    checkout_branch(branch, cwd=repo_root)
    restored = restore_missing_files(cwd=repo_root)

    message_file = store.put(branch, message.strip())

    return CreatedBranch(
        name=branch,
        base_commit=parent,
        message_file=message_file,
        restored_files=restored,
    )


def finish_branch(
    store: MessageStore,
    cwd: Optional[Path] = None,
    allow_empty: bool = False,
    keep_message: bool = False,
    gwf_dir: Optional[Path] = None,
) -> FinishResult:
    """Commit the staged changes on the current feature branch.

    Args:
        store: Where pending messages are kept.
        cwd: Directory inside the repository.
        allow_empty: Commit even if the index matches HEAD.
        keep_message: Leave the pending message file in place after committing.
        gwf_dir: gwf directory for the user-level config lookup.

    Returns:
        FinishResult with the new commit and the post-commit outcome, if any.

    Raises:
        RepositoryNotFoundError: Not inside a git repository.
        NoCommitsYetError: HEAD is unborn.
        DetachedHeadError: HEAD is not on a branch.
        InvalidBranchFormatError: The branch name does not encode a commit header.
        MessageNotFoundError: No pending message for the branch.
        NoStagedChangesError: Nothing staged and allow_empty is False.
    """
    repo_root = get_repo_root(cwd)
    tree = write_index_tree(cwd=repo_root)
    parent = get_head_commit(repo_root)
    branch = get_current_branch(repo_root)
    spec = decode(branch)
    text = store.get(branch)

    commit_message = format_commit_message(spec.type, spec.scope, text)

    if not allow_empty and tree == get_commit_tree(parent, cwd=repo_root):
        raise NoStagedChangesError("No staged changes to commit. Stage files with 'git add' first.")

    commit = create_commit(tree, parent, commit_message, cwd=repo_root)

    removed = False
    cleanup_error = None
    if not keep_message:
        # The commit is final at this point; a leftover file is only reported
        try:
            removed = store.delete(branch)
        except MessageStoreError as e:
            cleanup_error = str(e)

    post_commit = None
    config = load_post_commit_config(repo_root, gwf_dir)
    if config is not None:
        post_commit = run_post_commit_command(config, cwd=repo_root)

    return FinishResult(
        branch=branch,
        commit=commit,
        message=commit_message,
        message_removed=removed,
        cleanup_error=cleanup_error,
        post_commit=post_commit,
    )
