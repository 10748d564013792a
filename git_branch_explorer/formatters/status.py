"""Status bar formatting utilities."""

from git_branch_explorer.constants import DEFAULT_STATUS_MESSAGE, STATUS_EMOJI, TUI_COLORS
from git_branch_explorer.models.status import Severity


def format_status_text(message: str, severity: Severity) -> str:
    """
    Format a status for the status bar.

    The default status is shown as plain text; anything else gets the
    severity emoji in front.
    """
    if not message or message == DEFAULT_STATUS_MESSAGE:
        return DEFAULT_STATUS_MESSAGE
    return f"{STATUS_EMOJI[severity.value]} {message}"


def get_status_color(severity: Severity) -> str:
    return TUI_COLORS[severity.value]
