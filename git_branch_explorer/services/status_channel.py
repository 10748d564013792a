"""Single most-recent operation status with lazy expiry"""
import time
from typing import Callable, Tuple

from git_branch_explorer.constants import DEFAULT_STATUS_MESSAGE, STATUS_TTL_SECONDS
from git_branch_explorer.models.status import OperationStatus, Severity
from git_branch_explorer.logging_config import get_logger

logger = get_logger(__name__)


class StatusChannel:
    """Holds the outcome of the last operation.

    There is no timer: expiry is checked when the status is read, against
    ``clock`` (monotonic seconds). A status is expired once its age is strictly
    greater than ``ttl`` and its message is non-empty.
    """

    def __init__(self, ttl: float = STATUS_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._status = OperationStatus(created_at=clock())

    @property
    def status(self) -> OperationStatus:
        return self._status

    def set(self, message: str, severity: Severity) -> None:
        """Replace the current status and restart its age."""
        self._status = OperationStatus(message, severity, self._clock())
        logger.debug(f"Status [{severity.value}]: {message}")

    def reset(self) -> None:
        self._status = OperationStatus(created_at=self._clock())

    def is_expired(self) -> bool:
        if self._status.is_empty:
            return False
        return self._status.age(self._clock()) > self.ttl

    def current_or_default(self) -> Tuple[str, Severity]:
        """Return (text, severity), reverting an expired status to the default first."""
        if self.is_expired():
            self.reset()
        if self._status.is_empty:
            return DEFAULT_STATUS_MESSAGE, Severity.INFO
        return self._status.message, self._status.severity
