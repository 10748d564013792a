"""Git-related services for git-branch-explorer."""

from .operations import GitOperations, describe_git_error

__all__ = [
    "GitOperations",
    "describe_git_error",
]
