"""Push the current branch and open a pull request against trunk."""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from git_stacker.exceptions import NoCurrentBranchError
from git_stacker.logging_config import get_logger
from git_stacker.models.branch import BranchMetadata
from git_stacker.models.repository import RepositoryIdentity
from git_stacker.services import repository_identity

if TYPE_CHECKING:
    from git_stacker.context import StackerContext

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubmitResult:
    branch: str
    trunk: str
    repository: RepositoryIdentity
    pull_request_url: str
    parent: Optional[BranchMetadata] = None


class SubmissionWorkflow:
    """The ``submit`` command.

    A failure at any step ends the run. A provider failure after a successful
    push leaves the pushed branch in place; running submit again re-pushes and
    retries the request.
    """

    def __init__(self, ctx: "StackerContext"):
        self.ctx = ctx
        self.git = ctx.git

    def run(self) -> SubmitResult:
        branch = self.git.get_current_branch()
        if branch is None:
            raise NoCurrentBranchError("Failed to get the current branch")

        trunk = self.ctx.settings.get_trunk(self.ctx.prompter, self.ctx.config.default_trunk)

        identity = repository_identity.resolve(self.git.get_remote_url())
        forge = self.ctx.forge_factory(identity.provider)
        # Every prompt runs before anything is pushed
        forge.resolve_credential()

        parent = self.ctx.metadata.lookup(branch)
        if parent is not None:
            logger.info(
                f"{branch} was stacked on {parent.parent_branch_name}@{parent.parent_branch_revision[:8]}"
            )

        title = self._ask_title(self.git.get_current_commit_title())
        body = self._ask_body(self.git.get_current_commit_body())

        self.git.push_branch(branch)

        url = forge.create_pull_request(identity.owner, identity.repo, title, branch, trunk, body)
        logger.info(f"Opened {url}")
        return SubmitResult(
            branch=branch,
            trunk=trunk,
            repository=identity,
            pull_request_url=url,
            parent=parent,
        )

    def _ask_title(self, commit_title: str) -> str:
        title = self.ctx.prompter.ask_text("Pull request title", default=commit_title).strip()
        return title or commit_title

    def _ask_body(self, commit_body: str) -> str:
        if self.ctx.prompter.confirm("Edit the pull request body?", default=False):
            return self.ctx.prompter.edit_text(commit_body).strip()
        return commit_body
