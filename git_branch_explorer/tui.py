"""Interactive TUI for git-branch-explorer using Textual."""

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static

from .__version__ import __version__
from .constants import APP_TITLE
from .core.session import BranchSessionController
from .ui.widgets import BranchTable, StatusBar, TitleBar
from .logging_config import get_logger

logger = get_logger(__name__)


class BranchExplorerApp(App):
    """Single-screen renderer over a :class:`BranchSessionController`.

    The app never changes session state itself: keys are handed to the
    controller and the screen is redrawn from its accessors afterwards.
    """

    TITLE = APP_TITLE
    SUB_TITLE = f"v{__version__}"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $surface;
    }

    #header-row {
        height: 3;
    }

    #branch-table {
        height: 1fr;
        border: round white;
    }

    #help-bar {
        height: 1;
        content-align: center middle;
        text-style: bold;
    }
    """

    def __init__(self, controller: BranchSessionController, render_interval: float = 0.0):
        super().__init__()
        self.controller = controller
        self.render_interval = render_interval

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        with Horizontal(id="header-row"):
            yield TitleBar(id="title-bar")
            yield StatusBar(id="status-bar")
        yield BranchTable(id="branch-table")
        yield Static(id="help-bar")

    def on_mount(self) -> None:
        self.query_one(BranchTable).border_title = "Branches"
        self.query_one("#help-bar", Static).update(self.controller.help_text())
        self.render_session()
        if self.render_interval > 0:
            # Only re-reads the session, so expired statuses clear without input
            self.set_interval(self.render_interval, self._render_status)

    def render_session(self) -> None:
        """Redraw every widget from the controller's current state."""
        head = self.controller.current_head_display()
        self.query_one(TitleBar).show_head(head)
        self.query_one(BranchTable).show_branches(
            self.controller.branch_names(), head, self.controller.selected_row()
        )
        self._render_status()

    def _render_status(self) -> None:
        message, severity = self.controller.current_status()
        self.query_one(StatusBar).show_status(message, severity)

    def on_key(self, event: events.Key) -> None:
        action = self.controller.handle_key(event.key)
        if action is None:
            return

        event.stop()
        event.prevent_default()
        logger.debug(f"Key {event.key!r} -> {action.value}")

        if self.controller.exit_requested:
            self.exit()
            return
        self.render_session()
