"""Custom exceptions for git-branch-explorer"""

from typing import Optional


class GitBranchExplorerError(Exception):
    """Base exception for all git-branch-explorer errors."""
    pass


class RepositoryOpenError(GitBranchExplorerError):
    """Exception raised when the repository connection cannot be established."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Could not open a Git repository at '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class GitOperationError(GitBranchExplorerError):
    """Exception raised for errors in Git operations.

    The string form is the backend's own error text, so callers can prefix it
    with their own context without losing diagnostic detail.
    """

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        super().__init__(message or f"Git operation '{operation}' failed")


class InvalidBranchNameError(GitOperationError):
    """Exception raised when a branch name is not valid UTF-8."""

    def __init__(self, operation: str):
        super().__init__(operation, message="Invalid UTF-8 in branch name")


class UncommittedChangesError(GitOperationError):
    """Exception raised when a switch is refused because the working tree is dirty."""

    def __init__(self, branch: str, current: str):
        self.current = current
        super().__init__(
            "switch", branch, f"Uncommitted local changes on branch {current}"
        )
