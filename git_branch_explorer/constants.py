"""Shared constants for git-branch-explorer."""

APP_TITLE = "Git Branch Explorer"

# The only remote fetch ever targets
REMOTE_NAME = "origin"

# Status bar
STATUS_TTL_SECONDS = 3.0
DEFAULT_STATUS_MESSAGE = "Ready"
DEFAULT_RENDER_INTERVAL = 0.5

# Shown in the header when HEAD cannot be resolved
HEAD_ERROR_DISPLAY = "ERROR"
# Used in messages when HEAD cannot be resolved
UNKNOWN_HEAD = "unknown"
# Used in messages when the selected branch name cannot be decoded
UNKNOWN_BRANCH = "unknown branch"

# Symbol constants
SYMBOL_BRANCH = "\uf126"  # Nerd Font code-branch glyph

HELP_SEPARATOR = " | "


# Severity names, shared by the status model and the color tables
class SeverityName:
    """Severity values for operation statuses."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


STATUS_EMOJI = {
    SeverityName.INFO: "ℹ️ ",
    SeverityName.SUCCESS: "✅",
    SeverityName.ERROR: "❌",
}

# TUI colors (color names for Textual / Rich)
TUI_COLORS = {
    SeverityName.INFO: "white",
    SeverityName.SUCCESS: "green",
    SeverityName.ERROR: "red",
}

CURRENT_BRANCH_COLOR = "green"
BRANCH_COLOR = "white"
