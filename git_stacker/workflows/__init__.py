"""The create and submit workflows."""

from .create import CreateResult, CreateStatus, StackedBranchWorkflow, derive_branch_name, sanitize_title
from .submit import SubmissionWorkflow, SubmitResult

__all__ = [
    "CreateResult",
    "CreateStatus",
    "StackedBranchWorkflow",
    "derive_branch_name",
    "sanitize_title",
    "SubmissionWorkflow",
    "SubmitResult",
]
