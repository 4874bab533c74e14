"""Shared test fixtures and configuration."""

import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest

from gwf.store import MessageStore


def git(repo: Path, *args: str) -> str:
    """Run a git command in repo and return its stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def run_git():
    """Helper that runs git commands in a repository."""
    return git


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def gwf_dir(temp_dir, mocker):
    """Point the user-level ~/.gwf directory at a temporary location."""
    directory = temp_dir / "home" / ".gwf"
    mocker.patch("gwf.paths._GWF_DIR", directory)
    return directory


@pytest.fixture
def store(gwf_dir):
    """Message store rooted in the temporary gwf directory."""
    return MessageStore(gwf_dir)


@pytest.fixture
def git_repo(temp_dir, monkeypatch):
    """Create a real git repository on 'main' with one commit."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    # Keep the user's global git config out of the tests
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(temp_dir / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")

    repo = temp_dir / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "commit.gpgsign", "false")

    (repo / "README.md").write_text("# test\n")
    git(repo, "add", "README.md")
    git(repo, "commit", "-q", "-m", "Initial commit")
    return repo


@pytest.fixture
def empty_git_repo(temp_dir, monkeypatch):
    """Create a real git repository without any commits."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(temp_dir / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")

    repo = temp_dir / "empty"
    repo.mkdir()
    git(repo, "init", "-q")
    return repo


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
