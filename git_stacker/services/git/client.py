"""Version control client interface.

Architecture:
- VersionControlClient: Abstract base class defining the operations the
  workflows run against a checkout and its object database
- GitOperations: Production implementation backed by GitPython
- Tests substitute an in-memory fake
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from git_stacker.constants import MAX_BRANCH_NAME_ATTEMPTS
from git_stacker.exceptions import BranchNameExhaustedError
from git_stacker.logging_config import get_logger
from git_stacker.models.branch import CommitOutcome, WorkingAreaSnapshot

logger = get_logger(__name__)


class VersionControlClient(ABC):
    """Discrete operations against a local checkout. No business logic lives here."""

    max_branch_name_attempts: int = MAX_BRANCH_NAME_ATTEMPTS

    def create_branch(self, name: str) -> str:
        """Create a branch at HEAD, appending a numeric suffix on collision.

        Tries ``name``, then ``name1``, ``name2`` and so on until a name is free
        or ``max_branch_name_attempts`` candidates have been tried.

        Returns:
            The name the branch was actually created under

        Raises:
            BranchNameExhaustedError: If every candidate already exists
        """
        for attempt in range(self.max_branch_name_attempts):
            candidate = name if attempt == 0 else f"{name}{attempt}"
            if self.try_create_branch(candidate):
                logger.debug(f"Created branch {candidate}")
                return candidate
            logger.debug(f"Branch name {candidate} is taken")

        raise BranchNameExhaustedError(name, self.max_branch_name_attempts)

    @abstractmethod
    def try_create_branch(self, name: str) -> bool:
        """Create ``name`` at HEAD. Returns False if a branch with that name exists."""

    @abstractmethod
    def get_current_branch(self) -> Optional[str]:
        """Name of the checked out branch, None when HEAD is detached."""

    @abstractmethod
    def get_working_area(self) -> WorkingAreaSnapshot:
        """Staged and unstaged paths of the working tree."""

    @abstractmethod
    def stage_all(self) -> None:
        """Stage every tracked and untracked change."""

    @abstractmethod
    def checkout(self, name: str) -> None:
        """Switch to an existing branch."""

    @abstractmethod
    def delete_branch(self, name: str) -> None:
        """Delete a local branch even if it is not merged."""

    @abstractmethod
    def interactive_commit(self) -> CommitOutcome:
        """Let the operator write a commit message and commit the staged changes."""

    @abstractmethod
    def get_current_commit_title(self) -> str:
        """Subject line of HEAD."""

    @abstractmethod
    def get_current_commit_body(self) -> str:
        """Body of HEAD with sign-off trailers removed and whitespace trimmed."""

    @abstractmethod
    def get_repository_root(self) -> Optional[Path]:
        """Top of the working tree, None for a bare repository."""

    @abstractmethod
    def get_control_directory(self) -> Path:
        """The repository's .git directory."""

    @abstractmethod
    def get_current_branch_revision(self, branch: str) -> str:
        """Commit id of the tip of ``branch``."""

    @abstractmethod
    def create_blob(self, content: str) -> str:
        """Write ``content`` to the object database and return its object id."""

    @abstractmethod
    def read_object(self, object_id: str) -> str:
        """Return the content of a blob."""

    @abstractmethod
    def resolve_ref(self, ref_name: str) -> Optional[str]:
        """Object id a reference points at, None if the reference does not exist."""

    @abstractmethod
    def update_ref(self, ref_name: str, object_id: str) -> None:
        """Point ``ref_name`` at ``object_id``, creating it if needed."""

    @abstractmethod
    def push_branch(self, name: str) -> None:
        """Push ``name`` to the configured remote and track it."""

    @abstractmethod
    def get_remote_url(self) -> str:
        """URL of the configured remote."""
