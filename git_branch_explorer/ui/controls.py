"""Key bindings: the fixed table from keys to session actions."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from git_branch_explorer.constants import HELP_SEPARATOR


class Action(Enum):
    """Commands the session understands."""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    SWITCH = "switch"
    FETCH = "fetch"
    REFRESH = "refresh"
    QUIT = "quit"


# Glyphs for keys that are not printable characters (Textual key names)
KEY_GLYPHS = {
    "up": "↑",
    "down": "↓",
}


@dataclass(frozen=True)
class Control:
    """One row of the key table."""

    action: Action
    key: str
    label: str

    @property
    def glyph(self) -> str:
        return f"<{KEY_GLYPHS.get(self.key, self.key)}>"

    def help_entry(self) -> str:
        return f"{self.label} {self.glyph}"


# Order matters: first match wins and help text follows it
CONTROLS: List[Control] = [
    Control(Action.SWITCH, "s", "Switch"),
    Control(Action.FETCH, "f", "Fetch"),
    Control(Action.REFRESH, "r", "Refresh"),
    Control(Action.MOVE_UP, "up", "Up"),
    Control(Action.MOVE_DOWN, "down", "Down"),
    Control(Action.QUIT, "q", "Quit"),
]


class KeyMapper:
    """Resolves key names to actions and renders the help line."""

    def __init__(self, controls: Optional[List[Control]] = None):
        self.controls = list(controls) if controls is not None else list(CONTROLS)

    def resolve(self, key: str) -> Optional[Action]:
        for control in self.controls:
            if control.key == key:
                return control.action
        return None

    def help_text(self) -> str:
        return HELP_SEPARATOR.join(control.help_entry() for control in self.controls)
