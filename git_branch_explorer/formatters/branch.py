"""Header and branch row formatting utilities."""

from rich.text import Text

from git_branch_explorer.constants import (
    APP_TITLE,
    BRANCH_COLOR,
    CURRENT_BRANCH_COLOR,
    SYMBOL_BRANCH,
)


def format_header_title(head: str) -> str:
    """
    Format the title shown in the header.

    Args:
        head: Current branch name, commit id for a detached HEAD, or an error marker

    Returns:
        Title text with the branch glyph before the HEAD name
    """
    return f"{APP_TITLE} ({SYMBOL_BRANCH} {head})"


def format_branch_row(name: str, is_current: bool = False) -> Text:
    """
    Format a branch for the branch table, highlighting the checked-out branch.

    Args:
        name: Branch name
        is_current: Whether HEAD points at this branch

    Returns:
        Styled text for the row
    """
    return Text(name, style=CURRENT_BRANCH_COLOR if is_current else BRANCH_COLOR)
