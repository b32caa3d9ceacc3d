"""Git-related services for git-stacker."""

from .client import VersionControlClient
from .operations import GitOperations, parse_porcelain_status, strip_sign_off

__all__ = [
    "VersionControlClient",
    "GitOperations",
    "parse_porcelain_status",
    "strip_sign_off",
]
