"""Custom exceptions for git-stacker"""

from typing import Iterable, Optional


class StackerError(Exception):
    """Base exception for all git-stacker errors.

    Every error carries a human readable message and a suggestion line that
    the CLI prints underneath it.
    """

    default_suggestion: Optional[str] = None

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion or self.default_suggestion
        super().__init__(message)


class GitNotInstalledError(StackerError):
    """Raised when the git executable cannot be found."""

    default_suggestion = (
        "Install git: https://git-scm.com/book/en/v2/Getting-Started-Installing-Git"
    )

    def __init__(self):
        super().__init__("Git is not installed")


class NotARepositoryError(StackerError):
    """Raised when the working directory is not inside a git repository."""

    default_suggestion = (
        "Run git-stacker inside a git repository or run `git init` to create a new one."
    )

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"You are not inside a git repository: {path}")


class NoCurrentBranchError(StackerError):
    """Raised when the repository is in detached HEAD state."""

    default_suggestion = "Checkout onto a branch and try again."

    def __init__(self, message: str = "This command needs a current branch, but HEAD is detached."):
        super().__init__(message)


class NoChangesError(StackerError):
    """Raised when there is nothing to commit."""

    default_suggestion = "Modify some files before creating a stacked branch."

    def __init__(self):
        super().__init__("There are no staged or unstaged changes.")


class GitOperationError(StackerError):
    """Exception raised for errors in Git operations."""

    default_suggestion = "Run the equivalent git command manually to see the full error."

    def __init__(
        self,
        operation: str,
        target: Optional[str] = None,
        message: Optional[str] = None,
        suggestion: Optional[str] = None,
    ):
        self.operation = operation
        self.target = target
        self.detail = message

        error_msg = f"Git operation '{operation}' failed"
        if target:
            error_msg += f" for '{target}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg, suggestion)


class CheckoutFailedError(GitOperationError):
    """Exception raised when a branch cannot be checked out."""

    default_suggestion = "Check that the branch exists and that local changes do not block the switch."

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("checkout", branch, message)


class DeleteFailedError(GitOperationError):
    """Exception raised when a branch cannot be deleted."""

    default_suggestion = "Delete the branch manually with `git branch -D <name>`."

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("delete_branch", branch, message)


class PushFailedError(GitOperationError):
    """Exception raised when pushing a branch is rejected."""

    default_suggestion = "Check your network connection and your permissions on the remote."

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("push", branch, message)


class RefUpdateFailedError(GitOperationError):
    """Exception raised when git refuses to update a reference."""

    default_suggestion = "Check that the reference name is valid and the repository is writable."

    def __init__(self, ref_name: str, message: Optional[str] = None):
        super().__init__("update_ref", ref_name, message)


class BranchNameExhaustedError(StackerError):
    """Raised when every candidate name for a new branch already exists."""

    default_suggestion = "Delete some old branches or use a different commit title."

    def __init__(self, name: str, attempts: int):
        self.name = name
        self.attempts = attempts
        super().__init__(
            f"Could not find a free branch name based on '{name}' after {attempts} attempts."
        )


class UnrecognizedRemoteUrlError(StackerError):
    """Raised when the remote URL matches neither the HTTPS nor the SSH shape."""

    default_suggestion = "Check the remote with `git remote -v`."

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Unrecognized remote URL: '{url}'")


class UnsupportedProviderError(StackerError):
    """Raised when the remote is hosted on a provider git-stacker cannot talk to."""

    def __init__(self, provider: str, supported: Iterable[str]):
        self.provider = provider
        self.supported = list(supported)
        super().__init__(
            f"Unsupported git provider '{provider}'.",
            f"Supported providers: {', '.join(self.supported)}",
        )


class CorruptMetadataError(StackerError):
    """Raised when a branch metadata ref points at unreadable content."""

    default_suggestion = "Remove the broken reference with `git update-ref -d <ref>`."

    def __init__(self, branch: str, message: str):
        self.branch = branch
        super().__init__(f"Metadata for branch '{branch}' is corrupt: {message}")


class CredentialError(StackerError):
    """Raised when an access token cannot be obtained or stored securely."""

    default_suggestion = "Check the permissions of your git-stacker configuration directory."


class ProjectSettingsError(StackerError):
    """Raised when project settings cannot be written."""

    default_suggestion = "Check if you have write permissions to the .git directory."


class ForgeRequestFailedError(StackerError):
    """Exception raised for errors in git provider API operations."""

    default_suggestion = "Please check your credentials and network connection."

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.detail = message

        error_msg = f"Provider API operation '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
