"""Configuration handling for git-branch-explorer"""

from dataclasses import dataclass

from git_branch_explorer.constants import (
    DEFAULT_RENDER_INTERVAL,
    REMOTE_NAME,
    STATUS_TTL_SECONDS,
)


@dataclass
class Config:
    """Configuration for git-branch-explorer with validation."""

    # Repository location (any directory inside the working copy)
    repo_path: str = "."
    remote_name: str = REMOTE_NAME

    # Status bar
    status_ttl: float = STATUS_TTL_SECONDS

    # Renderer refresh tick in seconds (0 disables)
    render_interval: float = DEFAULT_RENDER_INTERVAL

    # Logging
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_remote_name()
        self._validate_status_ttl()
        self._validate_render_interval()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path or not self.repo_path.strip():
            raise ValueError("repo_path cannot be empty")
        self.repo_path = self.repo_path.strip()

    def _validate_remote_name(self):
        """Only the 'origin' remote is supported."""
        if self.remote_name != REMOTE_NAME:
            raise ValueError(f"remote_name must be '{REMOTE_NAME}', got '{self.remote_name}'")

    def _validate_status_ttl(self):
        """Validate status_ttl is positive."""
        if self.status_ttl <= 0:
            raise ValueError(f"status_ttl must be positive, got {self.status_ttl}")

    def _validate_render_interval(self):
        """Validate render_interval is not negative."""
        if self.render_interval < 0:
            raise ValueError(f"render_interval cannot be negative, got {self.render_interval}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repo_path": self.repo_path,
            "remote_name": self.remote_name,
            "status_ttl": self.status_ttl,
            "render_interval": self.render_interval,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {
            "repo_path",
            "remote_name",
            "status_ttl",
            "render_interval",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
