"""GitHub API integration"""

import os
from typing import Optional, TYPE_CHECKING

import requests
from github import Auth, Github, GithubException

from git_stacker.exceptions import CredentialError, ForgeRequestFailedError
from git_stacker.logging_config import get_logger
from git_stacker.models.repository import ProviderKind
from git_stacker.services.forge.base import ForgeProvider

if TYPE_CHECKING:
    from git_stacker.config import Config
    from git_stacker.prompts import Prompter
    from git_stacker.services.credentials import CredentialStore

logger = get_logger(__name__)

TOKEN_ENV_VAR = "GITHUB_TOKEN"
TOKEN_URL = "https://github.com/settings/tokens"


def _describe(error: GithubException) -> str:
    data = error.data if isinstance(error.data, dict) else {}
    message = data.get("message") or str(error)
    details = [
        item.get("message") for item in data.get("errors", [])
        if isinstance(item, dict) and item.get("message")
    ]
    if details:
        message += f" ({'; '.join(details)})"
    return f"HTTP {error.status}: {message}"


class GitHubProvider(ForgeProvider):
    """Opens pull requests through the GitHub REST API."""

    kind = ProviderKind.GITHUB

    def __init__(self, config: "Config", prompter: "Prompter", credentials: "CredentialStore"):
        self.config = config
        self.prompter = prompter
        self.credentials = credentials
        self.timeout = config.get("request_timeout", 30)
        self.github_token: Optional[str] = None
        self.github: Optional[Github] = None

    def resolve_credential(self) -> str:
        if self.github_token:
            return self.github_token

        token = os.environ.get(TOKEN_ENV_VAR)
        if token:
            logger.debug(f"[GitHub] Using token from {TOKEN_ENV_VAR}")
        else:
            token = self.credentials.load()

        if not token:
            token = self.prompter.ask_secret(
                f"Enter a GitHub access token with the 'repo' scope ({TOKEN_URL})"
            ).strip()
            if not token:
                raise CredentialError(
                    "No GitHub access token provided.",
                    f"Create a token at {TOKEN_URL} and run the command again.",
                )
            self.credentials.save(token)

        self.github_token = token
        return token

    def _client(self) -> Github:
        if self.github is None:
            token = self.resolve_credential()
            self.github = Github(auth=Auth.Token(token), timeout=self.timeout)
        return self.github

    def create_pull_request(
        self,
        owner: str,
        repo: str,
        title: str,
        head_branch: str,
        base_branch: str,
        body: str,
    ) -> str:
        full_name = f"{owner}/{repo}"
        logger.info(f"[GitHub] Creating pull request {head_branch} -> {base_branch} on {full_name}")

        try:
            gh_repo = self._client().get_repo(full_name)
            pull = gh_repo.create_pull(
                title=title,
                body=body,
                head=head_branch,
                base=base_branch,
            )
        except GithubException as e:
            raise ForgeRequestFailedError("create_pull_request", _describe(e))
        except requests.exceptions.RequestException as e:
            raise ForgeRequestFailedError("create_pull_request", str(e))

        logger.debug(f"[GitHub] Created pull request #{pull.number}")
        return pull.html_url
