"""Resolve the hosting provider, owner and repository name from a remote URL."""

import re
from typing import Optional

from git_stacker.exceptions import UnrecognizedRemoteUrlError, UnsupportedProviderError
from git_stacker.logging_config import get_logger
from git_stacker.models.repository import ProviderKind, RepositoryIdentity

logger = get_logger(__name__)

# https://github.com/acme/widgets.git, https://user@github.com/group/acme/widgets
HTTPS_PATTERN = re.compile(
    r"^https://(?:[^@/]+@)?(?P<provider>[^/:]+)(?::\d+)?/(?:[^/]+/)*"
    r"(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"
)

# git@github.com:acme/widgets.git, ssh://git@github.com/acme/widgets.git
SSH_PATTERN = re.compile(
    r"^(?:ssh://)?(?:[^@/]+@)?(?P<provider>[^/:]+)(?::\d+/|[:/])(?:[^/]+/)*"
    r"(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$"
)


def resolve_provider(host: str) -> ProviderKind:
    """Map a remote host to a known provider by prefix.

    Raises:
        UnsupportedProviderError: If no provider matches
    """
    lowered = host.lower()
    for kind in ProviderKind:
        if lowered.startswith(kind.value):
            return kind

    raise UnsupportedProviderError(host, [kind.display_name for kind in ProviderKind])


def _match(candidate: str) -> Optional[re.Match]:
    pattern = HTTPS_PATTERN if candidate.startswith("https") else SSH_PATTERN
    return pattern.match(candidate)


def resolve(remote_url: str) -> RepositoryIdentity:
    """Parse a remote URL into a RepositoryIdentity.

    Accepts the bare URL or ``git remote -v`` style output, in which case the
    first line is used.

    Raises:
        UnrecognizedRemoteUrlError: If the text is not an HTTPS or SSH remote URL
        UnsupportedProviderError: If the host is not a known provider
    """
    lines = [line.strip() for line in remote_url.strip().splitlines() if line.strip()]
    if not lines:
        raise UnrecognizedRemoteUrlError(remote_url)

    match = None
    for token in lines[0].split():
        match = _match(token)
        if match:
            break

    if match is None:
        raise UnrecognizedRemoteUrlError(remote_url)

    provider = resolve_provider(match.group("provider"))
    identity = RepositoryIdentity(
        provider=provider,
        owner=match.group("owner"),
        repo=match.group("repo"),
    )
    logger.debug(f"Resolved {remote_url!r} to {identity}")
    return identity
