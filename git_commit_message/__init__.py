"""
Git Commit Message

Suggests a one-line commit message for the current git diff using a local Ollama server.
"""

__version__ = "1.0.0"

APP_NAME = "git_commit_message"


class CommitMessageError(Exception):
    """Base class for every failure that aborts a run."""

    def __init__(self, message: str, reason=None):
        super().__init__(message)
        self.reason = reason
