"""Formatting utilities for git-branch-explorer.

This package provides the text shown by the TUI, organized into logical modules:
- branch: Header title and branch row formatting
- status: Status bar formatting
"""

# Branch formatters
from .branch import (
    format_header_title,
    format_branch_row,
)

# Status formatters
from .status import (
    format_status_text,
    get_status_color,
)

__all__ = [
    # Branch
    "format_header_title",
    "format_branch_row",
    # Status
    "format_status_text",
    "get_status_color",
]
