"""Custom widgets for git-branch-explorer TUI."""

from typing import List, Optional

from rich.text import Text
from textual.widgets import DataTable, Static

from git_branch_explorer.formatters import (
    format_branch_row,
    format_header_title,
    format_status_text,
    get_status_color,
)
from git_branch_explorer.models.status import Severity


class TitleBar(Static):
    """Title box showing where HEAD points."""

    DEFAULT_CSS = """
    TitleBar {
        width: 30%;
        height: 3;
        border: round white;
        content-align: center middle;
        text-style: bold;
        color: green;
    }
    """

    def show_head(self, head: str) -> None:
        self.update(format_header_title(head))


class StatusBar(Static):
    """Status box whose border and text follow the status severity."""

    DEFAULT_CSS = """
    StatusBar {
        width: 1fr;
        height: 3;
        border: round white;
        content-align: center middle;
    }
    """

    def show_status(self, message: str, severity: Severity) -> None:
        color = get_status_color(severity)
        self.styles.border = ("round", color)
        self.update(Text(format_status_text(message, severity), style=color))


class BranchTable(DataTable, can_focus=False):
    """Branch list. It never takes focus, so every key reaches the session."""

    def __init__(self, **kwargs):
        super().__init__(cursor_type="row", zebra_stripes=True, show_header=False, **kwargs)

    def show_branches(self, names: List[str], current: str, selected_row: Optional[int]) -> None:
        """Redraw rows from scratch and mirror the session's selection."""
        if not self.columns:
            self.add_column("Branches", key="branch")
        self.clear()
        for name in names:
            self.add_row(format_branch_row(name, is_current=name == current))

        self.show_cursor = selected_row is not None
        if selected_row is not None:
            self.move_cursor(row=selected_row)
