"""Git Operations Package"""

from git_commit_message.git.collector import (
    CommandRunner,
    DiffCollector,
    DiffError,
    DiffErrorReason,
    SubprocessRunner,
)

__all__ = [
    "CommandRunner",
    "DiffCollector",
    "DiffError",
    "DiffErrorReason",
    "SubprocessRunner",
]
