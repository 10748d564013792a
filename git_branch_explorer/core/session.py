"""Branch session: selection, actions and their outcomes"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from git_branch_explorer.config import Config
from git_branch_explorer.constants import HEAD_ERROR_DISPLAY, UNKNOWN_BRANCH, UNKNOWN_HEAD
from git_branch_explorer.exceptions import GitBranchExplorerError, UncommittedChangesError
from git_branch_explorer.models.branch import Branch
from git_branch_explorer.models.status import Severity
from git_branch_explorer.services.backend import VersionControlBackend
from git_branch_explorer.services.branch_catalog import BranchCatalog
from git_branch_explorer.services.status_channel import StatusChannel
from git_branch_explorer.ui.controls import Action, KeyMapper
from git_branch_explorer.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class SessionState:
    """Everything the session mutates while handling actions."""

    catalog: BranchCatalog
    status: StatusChannel
    cursor: Optional[int] = None
    exit_requested: bool = False


class BranchSessionController:
    """Owns the branch list, the selection and the last operation status.

    Actions run synchronously: a backend call blocks until it returns, and its
    failure is turned into an error status instead of being raised. A switch is
    never attempted while the working tree has uncommitted changes.

    The renderer only reads through the accessor methods at the bottom of this
    class.
    """

    def __init__(
        self,
        backend: VersionControlBackend,
        config: Optional[Config] = None,
        mapper: Optional[KeyMapper] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.backend = backend
        self.config = config or Config()
        self.mapper = mapper or KeyMapper()
        self.state = SessionState(
            catalog=BranchCatalog(backend),
            status=StatusChannel(ttl=self.config.status_ttl, clock=clock),
        )
        self._handlers = {
            Action.MOVE_UP: self.move_up,
            Action.MOVE_DOWN: self.move_down,
            Action.SWITCH: self.switch,
            Action.FETCH: self.fetch,
            Action.REFRESH: self.refresh,
            Action.QUIT: self.quit,
        }
        self._load_branches()

    def _load_branches(self) -> None:
        """Initial catalog load; a failure is reported, not fatal."""
        try:
            self.state.catalog.refresh()
        except GitBranchExplorerError as e:
            logger.error(f"Error loading branches: {e}")
            self.state.status.set(f"Failed to refresh branches: {e}", Severity.ERROR)
        self._clamp_cursor()

    @property
    def catalog(self) -> BranchCatalog:
        return self.state.catalog

    @property
    def status(self) -> StatusChannel:
        return self.state.status

    @property
    def exit_requested(self) -> bool:
        return self.state.exit_requested

    # Dispatch

    def handle_key(self, key: str) -> Optional[Action]:
        """Resolve a key and run its action. Unknown keys do nothing."""
        action = self.mapper.resolve(key)
        if action is not None:
            self.dispatch(action)
        return action

    def dispatch(self, action: Action) -> None:
        if self.state.exit_requested:
            logger.debug(f"Ignoring {action.value}: exit requested")
            return
        logger.debug(f"Dispatching {action.value}")
        self._handlers[action]()

    # Navigation

    def _clamp_cursor(self) -> None:
        count = len(self.state.catalog)
        if count == 0:
            self.state.cursor = None
        elif self.state.cursor is None:
            self.state.cursor = 0
        else:
            self.state.cursor = max(0, min(self.state.cursor, count - 1))

    def _move(self, delta: int) -> None:
        count = len(self.state.catalog)
        if count == 0:
            self.state.cursor = None
            return
        cursor = self.state.cursor if self.state.cursor is not None else 0
        self.state.cursor = max(0, min(cursor + delta, count - 1))

    def move_up(self) -> None:
        """Move the selection up one row, holding at the first branch."""
        self._move(-1)

    def move_down(self) -> None:
        """Move the selection down one row, holding at the last branch."""
        self._move(1)

    # Branch operations

    def selected_branch(self) -> Optional[Branch]:
        """Return the branch under the cursor, or None if nothing is selected."""
        return self.state.catalog.at(self.state.cursor)

    def _head_for_message(self) -> str:
        try:
            return self.backend.current_head().display()
        except GitBranchExplorerError as e:
            logger.debug(f"Could not resolve HEAD: {e}")
            return UNKNOWN_HEAD

    def refresh(self) -> None:
        """Reload the branch list and clamp the cursor to the new length.

        On failure the previous list stays and the error is shown as status.
        """
        status = self.state.status
        status.set("Refreshing", Severity.INFO)
        try:
            self.state.catalog.refresh()
        except GitBranchExplorerError as e:
            logger.error(f"Error refreshing branches: {e}")
            status.set(f"Failed to refresh branches: {e}", Severity.ERROR)
        else:
            status.set("Refreshed Branches", Severity.SUCCESS)
        self._clamp_cursor()

    def switch(self) -> None:
        """Check out the selected branch.

        The switch is refused while the working tree has uncommitted changes;
        checkout is only attempted on a clean tree. HEAD is read just to name
        the current branch in the refusal message, so failing to resolve it
        does not block the switch.
        """
        status = self.state.status
        branch = self.selected_branch()
        if branch is None:
            status.set("No branch selected", Severity.INFO)
            return

        name = branch.name or UNKNOWN_BRANCH
        status.set(f"Switching to {name}...", Severity.INFO)

        try:
            current = self._head_for_message()
            if not self.backend.is_working_tree_clean():
                raise UncommittedChangesError(name, current)
            self.backend.checkout(branch)
        except GitBranchExplorerError as e:
            logger.error(f"Error switching to {name}: {e}")
            status.set(f"Error switching to {name}: {e}", Severity.ERROR)
            return

        logger.info(f"Switched to branch {name}")
        status.set(f"Successfully switched to branch {name}", Severity.SUCCESS)

    def fetch(self) -> None:
        """Update origin's tracking ref for the selected branch.

        The working tree is left alone, so no cleanliness check is made.
        """
        status = self.state.status
        branch = self.selected_branch()
        if branch is None:
            status.set("No branch selected", Severity.INFO)
            return

        name = branch.name or UNKNOWN_BRANCH
        status.set(f"Fetching {name}...", Severity.INFO)

        try:
            self.backend.fetch_remote_for(branch)
        except GitBranchExplorerError as e:
            logger.error(f"Error fetching {name}: {e}")
            status.set(f"Error fetching {name}: {e}", Severity.ERROR)
            return

        logger.info(f"Fetched {name}")
        status.set(f"Successfully fetched {name}", Severity.SUCCESS)

    def quit(self) -> None:
        """Request exit; later actions are ignored."""
        self.state.exit_requested = True

    # Read-only accessors for the renderer

    def current_head_display(self) -> str:
        try:
            return self.backend.current_head().display()
        except GitBranchExplorerError as e:
            logger.debug(f"Could not resolve HEAD for display: {e}")
            return HEAD_ERROR_DISPLAY

    def branch_names(self) -> List[str]:
        return self.state.catalog.names()

    @property
    def selected_index(self) -> Optional[int]:
        return self.state.cursor

    def selected_row(self) -> Optional[int]:
        """Position of the selection within :meth:`branch_names`, if it is shown there."""
        branch = self.selected_branch()
        if branch is None or branch.name is None:
            return None
        row = 0
        for index, other in enumerate(self.state.catalog):
            if index == self.state.cursor:
                return row
            if other.name is not None:
                row += 1
        return None

    def current_status(self) -> Tuple[str, Severity]:
        return self.state.status.current_or_default()

    def help_text(self) -> str:
        return self.mapper.help_text()
