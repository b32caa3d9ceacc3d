"""Turn the current working tree change into a named, lineage-tagged branch.

The workflow runs these steps in order:

1. Require a current branch (the base).
2. Require staged or unstaged changes.
3. If nothing is staged, offer to stage everything or abort.
4. Create and check out a scratch branch so the commit does not land on the base.
5. Run the interactive commit. An aborted commit rolls back to the base branch.
6. Rename: create ``<MM-DD>-<title>`` at the new commit and drop the scratch branch.
7. Record the base branch and its revision as the new branch's lineage.
"""

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, TYPE_CHECKING

from git_stacker.constants import ABORT_CHOICE, STAGE_ALL_CHOICE
from git_stacker.exceptions import GitOperationError, NoChangesError, NoCurrentBranchError
from git_stacker.logging_config import get_logger
from git_stacker.models.branch import BranchMetadata, CommitOutcome

if TYPE_CHECKING:
    from git_stacker.context import StackerContext

logger = get_logger(__name__)

NON_ALPHANUMERIC = re.compile(r"[\W_]+")


class CreateStatus(Enum):
    CREATED = "created"
    ABORTED = "aborted"


@dataclass(frozen=True)
class CreateResult:
    status: CreateStatus
    branch_name: Optional[str] = None
    parent: Optional[BranchMetadata] = None

    @classmethod
    def aborted(cls) -> "CreateResult":
        return cls(status=CreateStatus.ABORTED)


def sanitize_title(title: str) -> str:
    """Replace every run of non-alphanumeric characters with one underscore."""
    return NON_ALPHANUMERIC.sub("_", title)


def derive_branch_name(title: str, day: date) -> str:
    """Branch name for a commit: ``"Hello, World"`` on Dec 31 gives ``12-31-Hello_World``."""
    return f"{day.strftime('%m-%d')}-{sanitize_title(title)}"


class StackedBranchWorkflow:
    """The ``create`` command."""

    def __init__(self, ctx: "StackerContext"):
        self.ctx = ctx
        self.git = ctx.git

    def run(self) -> CreateResult:
        base_branch = self.git.get_current_branch()
        if base_branch is None:
            raise NoCurrentBranchError(
                "Can't create a new stacked commit without a current branch."
            )
        logger.debug(f"Base branch is {base_branch}")

        working_area = self.git.get_working_area()
        if working_area.is_clean:
            raise NoChangesError()

        if not working_area.has_staged:
            if not self._confirm_stage_all(len(working_area.unstaged_files)):
                logger.info("Operator aborted at the staging prompt")
                return CreateResult.aborted()
            self.git.stage_all()

        # The scratch and rename steps never move the base branch
        base_revision = self.git.get_current_branch_revision(base_branch)

        scratch_branch = self.git.create_branch(self.ctx.config.scratch_branch)
        try:
            self.git.checkout(scratch_branch)
            outcome = self.git.interactive_commit()
        except BaseException:
            logger.warning("Commit step did not finish, restoring base branch")
            self._restore_base(base_branch, scratch_branch)
            raise

        if outcome is CommitOutcome.ABORTED:
            logger.info("Commit aborted, restoring base branch")
            self.git.checkout(base_branch)
            self._discard_branch(scratch_branch)
            return CreateResult.aborted()

        title = self.git.get_current_commit_title()
        new_branch = self.git.create_branch(derive_branch_name(title, self.ctx.today()))
        self.git.checkout(new_branch)
        self._discard_branch(scratch_branch)

        lineage = BranchMetadata(
            parent_branch_name=base_branch,
            parent_branch_revision=base_revision,
        )
        self.ctx.metadata.record(new_branch, lineage)

        logger.info(f"Created {new_branch} on top of {base_branch}")
        return CreateResult(status=CreateStatus.CREATED, branch_name=new_branch, parent=lineage)

    def _confirm_stage_all(self, unstaged_count: int) -> bool:
        choice = self.ctx.prompter.ask_choice(
            f"No changes are staged ({unstaged_count} unstaged). "
            f"Type '{STAGE_ALL_CHOICE}' to stage everything and continue or '{ABORT_CHOICE}' to stop",
            [STAGE_ALL_CHOICE, ABORT_CHOICE],
            default=STAGE_ALL_CHOICE,
        )
        return choice == STAGE_ALL_CHOICE

    def _restore_base(self, base_branch: str, scratch_branch: str) -> None:
        # Runs while another exception is propagating
        try:
            self.git.checkout(base_branch)
        except GitOperationError as e:
            logger.warning(f"Could not check out {base_branch}: {e}")
        self._discard_branch(scratch_branch)

    def _discard_branch(self, name: str) -> None:
        # Cleanup failures must not hide the outcome of the workflow
        try:
            self.git.delete_branch(name)
        except GitOperationError as e:
            logger.warning(f"Could not delete scratch branch {name}: {e}")
