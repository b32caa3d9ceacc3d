"""Configuration handling for git-stacker"""

from dataclasses import dataclass, field
from pathlib import Path

from git_stacker.constants import (
    DEFAULT_CREDENTIALS_PATH,
    DEFAULT_REMOTE_NAME,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_TRUNK,
    MAX_BRANCH_NAME_ATTEMPTS,
    SCRATCH_BRANCH_NAME,
)


@dataclass
class Config:
    """Configuration for git-stacker with validation."""

    # Repository
    remote_name: str = DEFAULT_REMOTE_NAME
    scratch_branch: str = SCRATCH_BRANCH_NAME
    max_branch_name_attempts: int = MAX_BRANCH_NAME_ATTEMPTS
    default_trunk: str = DEFAULT_TRUNK

    # Provider integration
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT
    credentials_path: Path = field(default_factory=lambda: DEFAULT_CREDENTIALS_PATH)

    # Output
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_remote_name()
        self._validate_scratch_branch()
        self._validate_max_branch_name_attempts()
        self._validate_request_timeout()
        self.credentials_path = Path(self.credentials_path).expanduser()

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def _validate_scratch_branch(self):
        """Validate scratch_branch is not empty."""
        if not self.scratch_branch or not self.scratch_branch.strip():
            raise ValueError("scratch_branch cannot be empty")
        self.scratch_branch = self.scratch_branch.strip()

    def _validate_max_branch_name_attempts(self):
        """Validate max_branch_name_attempts is positive."""
        if self.max_branch_name_attempts <= 0:
            raise ValueError(
                f"max_branch_name_attempts must be positive, got {self.max_branch_name_attempts}"
            )

    def _validate_request_timeout(self):
        """Validate request_timeout is positive."""
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "remote_name": self.remote_name,
            "scratch_branch": self.scratch_branch,
            "max_branch_name_attempts": self.max_branch_name_attempts,
            "default_trunk": self.default_trunk,
            "request_timeout": self.request_timeout,
            "credentials_path": str(self.credentials_path),
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)
