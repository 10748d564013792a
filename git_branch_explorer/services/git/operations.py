"""GitPython-backed implementation of the version control backend"""

from typing import List

import git

from git_branch_explorer.constants import REMOTE_NAME
from git_branch_explorer.exceptions import (
    GitOperationError,
    InvalidBranchNameError,
    RepositoryOpenError,
)
from git_branch_explorer.models.branch import Branch, HeadRef
from git_branch_explorer.services.backend import VersionControlBackend, tracking_refspec
from git_branch_explorer.logging_config import get_logger

logger = get_logger(__name__)


def describe_git_error(error: Exception) -> str:
    """Return git's own error text for an exception raised by GitPython.

    ``CommandError`` wraps stderr as ``"\\n  stderr: '<text>'"``; only the text
    git printed is kept. Anything else falls back to ``str(error)``.
    """
    if isinstance(error, git.exc.CommandError):
        stderr = (error.stderr or "").strip()
        if stderr.startswith("stderr: '") and stderr.endswith("'"):
            stderr = stderr[len("stderr: '"):-1].strip()
        if stderr:
            return stderr
    return str(error)


class GitOperations(VersionControlBackend):
    """Repository access through GitPython.

    The repository is opened once and kept for the whole session; call
    :meth:`close` when the session ends.
    """

    def __init__(self, repo_path: str, remote_name: str = REMOTE_NAME):
        """Open the repository containing ``repo_path``.

        Args:
            repo_path: Any directory inside the working copy
            remote_name: Remote used for fetches

        Raises:
            RepositoryOpenError: if no repository can be opened
        """
        self.repo_path = repo_path
        self.remote_name = remote_name
        try:
            self.repo = git.Repo(repo_path, search_parent_directories=True)
        except git.exc.InvalidGitRepositoryError as e:
            raise RepositoryOpenError(repo_path, "not a git repository") from e
        except git.exc.NoSuchPathError as e:
            raise RepositoryOpenError(repo_path, "no such path") from e
        except git.exc.GitError as e:
            raise RepositoryOpenError(repo_path, describe_git_error(e)) from e

        if self.repo.bare:
            self.repo.close()
            raise RepositoryOpenError(repo_path, "repository has no working tree")

        logger.info(f"Git operations initialized for {self.repo.working_tree_dir}")

    def list_local_branches(self) -> List[Branch]:
        try:
            heads = list(self.repo.heads)
        except (git.exc.GitError, ValueError, OSError) as e:
            logger.debug(f"Error listing local branches: {e}")
            raise GitOperationError("list_branches", message=describe_git_error(e)) from e

        branches = [Branch.from_name(head.name, head) for head in heads]
        logger.debug(f"Found {len(branches)} local branches")
        return branches

    def current_head(self) -> HeadRef:
        try:
            head = self.repo.head
            if head.is_detached:
                return HeadRef(commit=head.commit.hexsha)
            return HeadRef(name=self.repo.active_branch.name)
        except (git.exc.GitError, ValueError, TypeError) as e:
            logger.debug(f"Error resolving HEAD: {e}")
            raise GitOperationError("resolve_head", message=describe_git_error(e)) from e

    def is_working_tree_clean(self) -> bool:
        try:
            dirty = self.repo.is_dirty(index=True, working_tree=True, untracked_files=True)
        except git.exc.GitError as e:
            logger.debug(f"Error checking working tree status: {e}")
            raise GitOperationError("status", message=describe_git_error(e)) from e
        return not dirty

    def _resolve_head(self, branch: Branch, operation: str) -> git.Head:
        """Find the ``git.Head`` for a branch, failing before anything is changed."""
        ref_path = branch.ref_path
        if ref_path is None:
            raise InvalidBranchNameError(operation)

        head = git.Head(self.repo, ref_path)
        if not head.is_valid():
            raise GitOperationError(
                operation, branch.name, f"Reference '{ref_path}' not found"
            )
        return head

    def checkout(self, branch: Branch) -> None:
        head = self._resolve_head(branch, "checkout")
        logger.debug(f"Checking out {head.name}")
        try:
            head.checkout()
        except git.exc.GitError as e:
            logger.debug(f"Error checking out {head.name}: {e}")
            raise GitOperationError("checkout", head.name, describe_git_error(e)) from e

    def fetch_remote_for(self, branch: Branch) -> None:
        name = branch.name
        if name is None:
            raise InvalidBranchNameError("fetch")

        try:
            remote = self.repo.remote(self.remote_name)
        except ValueError as e:
            raise GitOperationError("fetch", name, str(e)) from e

        refspec = tracking_refspec(name, self.remote_name)
        logger.debug(f"Fetching {refspec} from {self.remote_name}")
        try:
            remote.fetch(refspec, no_tags=True)
        except git.exc.GitError as e:
            logger.debug(f"Error fetching {name}: {e}")
            raise GitOperationError("fetch", name, describe_git_error(e)) from e

    def close(self) -> None:
        self.repo.close()
        logger.debug("Repository closed")
