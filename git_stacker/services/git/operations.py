"""Git operations service"""

import shutil
import subprocess
from io import BytesIO
from pathlib import Path
from typing import Optional, List, TYPE_CHECKING, Union

import git
from gitdb.base import IStream

from git_stacker.constants import SIGN_OFF_PREFIX
from git_stacker.exceptions import (
    CheckoutFailedError,
    DeleteFailedError,
    GitNotInstalledError,
    GitOperationError,
    NotARepositoryError,
    PushFailedError,
    RefUpdateFailedError,
)
from git_stacker.logging_config import get_logger
from git_stacker.models.branch import CommitOutcome, WorkingAreaSnapshot
from git_stacker.services.git.client import VersionControlClient

if TYPE_CHECKING:
    from git_stacker.config import Config

logger = get_logger(__name__)


def strip_sign_off(body: str) -> str:
    """Remove sign-off trailer lines from a commit body and trim it."""
    lines = [
        line for line in body.splitlines()
        if not line.strip().startswith(SIGN_OFF_PREFIX)
    ]
    return "\n".join(lines).strip()


def parse_porcelain_status(status: str) -> WorkingAreaSnapshot:
    """Split ``git status --porcelain`` output into staged and unstaged paths.

    Untracked files count as unstaged. For renames and copies the new path is
    reported.
    """
    staged: List[str] = []
    unstaged: List[str] = []

    for line in status.splitlines():
        if len(line) < 4:
            continue
        index_state, worktree_state, path = line[0], line[1], line[3:]
        if " -> " in path:
            path = path.split(" -> ", 1)[1]
        path = path.strip('"')

        if index_state == "?":
            unstaged.append(path)
            continue
        if index_state not in (" ", "!"):
            staged.append(path)
        if worktree_state not in (" ", "!"):
            unstaged.append(path)

    return WorkingAreaSnapshot(staged_files=tuple(staged), unstaged_files=tuple(unstaged))


class GitOperations(VersionControlClient):
    """GitPython backed version control client."""

    def __init__(self, repo_path: Union[str, Path], config: Union["Config", dict]):
        """Initialize the service.

        Args:
            repo_path: Any path inside the git repository
            config: Configuration dictionary or Config object

        Raises:
            GitNotInstalledError: If the git executable is missing
            NotARepositoryError: If repo_path is not inside a repository
        """
        self.config = config
        self.remote_name = config.get("remote_name", "origin")
        self.max_branch_name_attempts = config.get(
            "max_branch_name_attempts", self.max_branch_name_attempts
        )
        self.git_executable = git.Git.GIT_PYTHON_GIT_EXECUTABLE or "git"

        if shutil.which(self.git_executable) is None:
            raise GitNotInstalledError()

        try:
            repo = git.Repo(repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
            raise NotARepositoryError(str(repo_path))

        # Keep the discovered root, not the starting path
        self.repo_path = repo.working_tree_dir or repo.git_dir
        repo.close()
        logger.info(f"Git operations initialized for {self.repo_path}")

    def _get_repo(self) -> git.Repo:
        """Get a fresh git.Repo instance.

        GitPython repos are lightweight - they don't clone, just open the existing repo.
        """
        return git.Repo(self.repo_path)

    def try_create_branch(self, name: str) -> bool:
        repo = self._get_repo()
        try:
            repo.git.branch(name)
            return True
        except git.exc.GitCommandError as e:
            if "already exists" in str(e.stderr):
                return False
            raise GitOperationError("create_branch", name, str(e.stderr).strip())

    def get_current_branch(self) -> Optional[str]:
        try:
            return self._get_repo().active_branch.name
        except TypeError:
            # Detached HEAD
            return None

    def get_working_area(self) -> WorkingAreaSnapshot:
        try:
            status = self._get_repo().git.status("--porcelain", "--untracked-files=all")
        except git.exc.GitCommandError as e:
            raise GitOperationError("status", message=str(e.stderr).strip())
        return parse_porcelain_status(status)

    def stage_all(self) -> None:
        try:
            self._get_repo().git.add("--all")
        except git.exc.GitCommandError as e:
            raise GitOperationError("add", message=str(e.stderr).strip())

    def checkout(self, name: str) -> None:
        logger.debug(f"Checking out {name}")
        try:
            self._get_repo().git.checkout(name)
        except git.exc.GitCommandError as e:
            raise CheckoutFailedError(name, str(e.stderr).strip())

    def delete_branch(self, name: str) -> None:
        logger.debug(f"Deleting branch {name}")
        try:
            self._get_repo().git.branch("-D", name)
        except git.exc.GitCommandError as e:
            raise DeleteFailedError(name, str(e.stderr).strip())

    def interactive_commit(self) -> CommitOutcome:
        # GitPython captures stdio, so the editor needs a process attached to the terminal
        logger.debug("Starting interactive commit")
        try:
            result = subprocess.run([self.git_executable, "commit"], cwd=self.repo_path)
        except FileNotFoundError:
            raise GitNotInstalledError()

        if result.returncode != 0:
            logger.info(f"git commit exited with {result.returncode}, treating as aborted")
            return CommitOutcome.ABORTED
        return CommitOutcome.SUCCESS

    def _log_head(self, fmt: str) -> str:
        try:
            return self._get_repo().git.log("-1", f"--format={fmt}")
        except git.exc.GitCommandError as e:
            raise GitOperationError(
                "log",
                "HEAD",
                str(e.stderr).strip(),
                suggestion="Check if you have any commits in your branch",
            )

    def get_current_commit_title(self) -> str:
        return self._log_head("%s").strip()

    def get_current_commit_body(self) -> str:
        return strip_sign_off(self._log_head("%b"))

    def get_repository_root(self) -> Optional[Path]:
        root = self._get_repo().working_tree_dir
        return Path(root) if root else None

    def get_control_directory(self) -> Path:
        return Path(self._get_repo().git_dir)

    def get_current_branch_revision(self, branch: str) -> str:
        try:
            return self._get_repo().git.rev_parse("--verify", f"refs/heads/{branch}")
        except git.exc.GitCommandError as e:
            raise GitOperationError("rev_parse", branch, str(e.stderr).strip())

    def create_blob(self, content: str) -> str:
        data = content.encode("utf-8")
        try:
            stored = self._get_repo().odb.store(IStream(git.Blob.type, len(data), BytesIO(data)))
        except (OSError, ValueError) as e:
            raise GitOperationError("hash_object", message=str(e))
        return stored.binsha.hex()

    def read_object(self, object_id: str) -> str:
        try:
            return self._get_repo().git.cat_file("blob", object_id, strip_newline_in_stdout=False)
        except git.exc.GitCommandError as e:
            raise GitOperationError("cat_file", object_id, str(e.stderr).strip())

    def resolve_ref(self, ref_name: str) -> Optional[str]:
        repo = self._get_repo()
        try:
            return repo.git.rev_parse("--verify", "--quiet", ref_name)
        except git.exc.GitCommandError:
            # --quiet exits non-zero without output when the ref is missing
            return None

    def update_ref(self, ref_name: str, object_id: str) -> None:
        logger.debug(f"Updating {ref_name} -> {object_id}")
        try:
            self._get_repo().git.update_ref(ref_name, object_id)
        except git.exc.GitCommandError as e:
            raise RefUpdateFailedError(ref_name, str(e.stderr).strip())

    def push_branch(self, name: str) -> None:
        logger.info(f"Pushing {name} to {self.remote_name}")
        try:
            self._get_repo().git.push("--set-upstream", self.remote_name, name)
        except git.exc.GitCommandError as e:
            raise PushFailedError(name, str(e.stderr).strip())

    def get_remote_url(self) -> str:
        repo = self._get_repo()
        try:
            return repo.remote(self.remote_name).url
        except ValueError:
            raise GitOperationError(
                "get_remote_url",
                self.remote_name,
                "Remote not found",
                suggestion=f"Add the remote with `git remote add {self.remote_name} <url>`.",
            )

