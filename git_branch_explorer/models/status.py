"""Operation status model and severity enum"""
from enum import Enum
from dataclasses import dataclass

from git_branch_explorer.constants import SeverityName


class Severity(Enum):
    """Severity of an operation outcome."""
    INFO = SeverityName.INFO
    SUCCESS = SeverityName.SUCCESS
    ERROR = SeverityName.ERROR


@dataclass
class OperationStatus:
    """Outcome of the most recent operation.

    An empty message means "nothing to report"; the renderer shows the default
    text in that case.
    """
    message: str = ""
    severity: Severity = Severity.INFO
    created_at: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.message

    def age(self, now: float) -> float:
        """Seconds since the status was set, measured on the caller's clock."""
        return now - self.created_at
