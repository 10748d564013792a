"""Branch model and HEAD reference"""
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Branch:
    """A local branch as returned by the backend.

    ``raw_name`` keeps the ref name bytes exactly as stored so that names which
    are not valid UTF-8 can still be carried around (and skipped for display).
    ``handle`` is the backend's own object for the branch; it is borrowed, not owned.
    """
    raw_name: bytes
    handle: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_name(cls, name: str, handle: Any = None) -> "Branch":
        """Build a branch from a decoded name (surrogate escapes are preserved)."""
        return cls(name.encode("utf-8", "surrogateescape"), handle)

    @property
    def name(self) -> Optional[str]:
        """The branch name, or None if it is not valid UTF-8."""
        try:
            return self.raw_name.decode("utf-8")
        except UnicodeDecodeError:
            return None

    @property
    def ref_path(self) -> Optional[str]:
        name = self.name
        return f"refs/heads/{name}" if name is not None else None


@dataclass(frozen=True)
class HeadRef:
    """Where HEAD points: a branch name, or a commit id when detached."""
    name: Optional[str] = None
    commit: Optional[str] = None

    @property
    def is_detached(self) -> bool:
        return self.name is None

    def display(self) -> str:
        """Branch name for a symbolic HEAD, commit id for a detached one."""
        if self.name is not None:
            return self.name
        return self.commit or "HEAD"

    def __str__(self) -> str:
        return self.display()
