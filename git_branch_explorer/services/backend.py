"""Abstract interface for the version control operations the session needs."""

from abc import ABC, abstractmethod
from typing import List

from git_branch_explorer.constants import REMOTE_NAME
from git_branch_explorer.models.branch import Branch, HeadRef


def tracking_refspec(branch_name: str, remote_name: str = REMOTE_NAME) -> str:
    """Build the forced refspec that updates the remote-tracking ref of a branch.

    >>> tracking_refspec("dev")
    '+refs/heads/dev:refs/remotes/origin/dev'
    """
    return f"+refs/heads/{branch_name}:refs/remotes/{remote_name}/{branch_name}"


class VersionControlBackend(ABC):
    """Abstract interface for repository I/O.

    All implementations (GitPython-backed, fakes used in tests) must implement
    this interface. Every method raises a ``GitOperationError`` subclass on
    failure; the session turns those into user-visible statuses.
    """

    @abstractmethod
    def list_local_branches(self) -> List[Branch]:
        """List all local branches, in whatever order the repository yields them."""
        ...

    @abstractmethod
    def current_head(self) -> HeadRef:
        """Resolve HEAD to a branch name, or to a commit id when detached."""
        ...

    @abstractmethod
    def is_working_tree_clean(self) -> bool:
        """True only when there are no staged, unstaged or untracked changes."""
        ...

    @abstractmethod
    def checkout(self, branch: Branch) -> None:
        """Move HEAD and the working tree to ``branch``.

        Must fail without changing anything if the branch cannot be resolved.
        """
        ...

    @abstractmethod
    def fetch_remote_for(self, branch: Branch) -> None:
        """Update ``refs/remotes/origin/<name>`` from origin without fetching tags.

        Local branches and the working tree are left untouched.
        """
        ...

    def close(self) -> None:
        """Release the repository connection."""
