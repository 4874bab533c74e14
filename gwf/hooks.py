"""Post-commit command execution."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from gwf.config import PostCommitConfig


@dataclass
class PostCommitResult:
    """Outcome of running the post-commit command."""

    command: str
    returncode: Optional[int]  # None if the process never finished
    stdout: str = ""
    stderr: str = ""
    error: Optional[str] = None  # Spawn failure or timeout description

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.returncode == 0


def run_post_commit_command(config: PostCommitConfig, cwd: Path) -> PostCommitResult:
    """Run the configured command through the shell and wait for it.

    Output is captured in full. Failures are returned, not raised: by the time
    this runs the commit has already been made.

    Args:
        config: Loaded post-commit configuration.
        cwd: Directory to run the command in (the repository root).

    Returns:
        PostCommitResult describing how the command ended.
    """
    command = config.post_commit_command
    try:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            errors="replace",
            cwd=cwd,
            timeout=config.post_commit_timeout,
        )
    except subprocess.TimeoutExpired as e:
        return PostCommitResult(
            command=command,
            returncode=None,
            stdout=_decode(e.stdout),
            stderr=_decode(e.stderr),
            error=f"timed out after {config.post_commit_timeout:g}s",
        )
    except OSError as e:
        return PostCommitResult(command=command, returncode=None, error=str(e))

    return PostCommitResult(
        command=command,
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )


def _decode(output) -> str:
    # TimeoutExpired carries bytes even when text=True was requested
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors="replace")
    return output
