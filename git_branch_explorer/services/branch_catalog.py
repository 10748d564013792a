"""In-memory cache of the repository's local branches"""
from typing import List, Optional

from git_branch_explorer.models.branch import Branch
from git_branch_explorer.services.backend import VersionControlBackend
from git_branch_explorer.logging_config import get_logger

logger = get_logger(__name__)


class BranchCatalog:
    """Ordered local branches as of the last successful refresh.

    The order is whatever the backend returned for that refresh. The catalog
    refers to the backend's branch handles but never owns the repository.
    """

    def __init__(self, backend: VersionControlBackend):
        self.backend = backend
        self._branches: List[Branch] = []

    def refresh(self) -> None:
        """Reload branches from the backend.

        On failure the previous contents are kept and the backend error propagates.
        """
        branches = list(self.backend.list_local_branches())
        self._branches = branches
        logger.debug(f"Catalog refreshed with {len(branches)} branches")

    def names(self) -> List[str]:
        """Display names in catalog order, skipping names that are not valid UTF-8."""
        names = []
        for branch in self._branches:
            name = branch.name
            if name is None:
                logger.debug(f"Skipping branch with undecodable name {branch.raw_name!r}")
                continue
            names.append(name)
        return names

    def at(self, index: Optional[int]) -> Optional[Branch]:
        if index is None or index < 0 or index >= len(self._branches):
            return None
        return self._branches[index]

    def __len__(self) -> int:
        return len(self._branches)

    def __iter__(self):
        return iter(self._branches)
