"""Diff Collector - Capture the working-tree diff from git."""

import subprocess
from enum import Enum
from typing import Protocol, Sequence

from git_commit_message import CommitMessageError


class DiffErrorReason(Enum):
    EXECUTION_FAILED = "execution_failed"


class DiffError(CommitMessageError):
    """Raised when git cannot be run or exits non-zero."""

    def __init__(self, message: str, reason: DiffErrorReason = DiffErrorReason.EXECUTION_FAILED):
        super().__init__(message, reason)


class CommandRunner(Protocol):
    def run(self, args: Sequence[str]) -> str:
        ...


class SubprocessRunner:
    """Runs a command in the current directory and returns its stdout."""

    def run(self, args: Sequence[str]) -> str:
        try:
            result = subprocess.run(
                list(args),
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            detail = f"\n{stderr}" if stderr else ""
            raise DiffError(f"failed to execute '{' '.join(args)}' (exit status {e.returncode}){detail}") from e
        except FileNotFoundError as e:
            raise DiffError(f"failed to execute '{' '.join(args)}': {args[0]} is not installed or not in PATH") from e
        except OSError as e:
            raise DiffError(f"failed to execute '{' '.join(args)}': {e}") from e


class DiffCollector:
    """Collects the text of `git diff`.

    By default this is the unstaged working-tree diff; pass staged=True
    for `git diff --staged`.
    """

    def __init__(self, runner: CommandRunner | None = None, staged: bool = False):
        self.runner = runner or SubprocessRunner()
        self.staged = staged

    @property
    def command(self) -> list[str]:
        if self.staged:
            return ['git', 'diff', '--staged']
        return ['git', 'diff']

    def collect(self) -> str:
        return self.runner.run(self.command)
