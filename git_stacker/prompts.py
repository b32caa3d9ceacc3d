"""Operator interaction.

Workflows never talk to the terminal directly; they receive a Prompter so the
interactive steps can be replaced in tests.
"""

import os
import shlex
import subprocess
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.prompt import Confirm, Prompt

from git_stacker.logging_config import get_logger

logger = get_logger(__name__)


class Prompter(ABC):
    """Synchronous operator prompts."""

    @abstractmethod
    def ask_text(self, message: str, default: Optional[str] = None) -> str:
        """Ask for a single line of text."""

    @abstractmethod
    def ask_secret(self, message: str) -> str:
        """Ask for a value without echoing it."""

    @abstractmethod
    def ask_choice(self, message: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        """Ask the operator to pick one of ``choices``."""

    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def edit_text(self, initial: str) -> str:
        """Open an editor on ``initial`` and return the saved text."""


class RichPrompter(Prompter):
    """Prompter backed by rich prompts and the operator's editor."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask_text(self, message: str, default: Optional[str] = None) -> str:
        if default is None:
            return Prompt.ask(message, console=self.console)
        return Prompt.ask(message, console=self.console, default=default)

    def ask_secret(self, message: str) -> str:
        return Prompt.ask(message, console=self.console, password=True)

    def ask_choice(self, message: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        if default is None:
            return Prompt.ask(message, console=self.console, choices=list(choices))
        return Prompt.ask(message, console=self.console, choices=list(choices), default=default)

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, console=self.console, default=default)

    def edit_text(self, initial: str) -> str:
        editor = os.environ.get("VISUAL") or os.environ.get("EDITOR") or "vi"
        fd, name = tempfile.mkstemp(suffix=".md", prefix="git-stacker-")
        path = Path(name)
        try:
            with os.fdopen(fd, "w") as f:
                f.write(initial)
            logger.debug(f"Opening {path} with {editor}")
            subprocess.run([*shlex.split(editor), str(path)], check=True)
            return path.read_text()
        finally:
            path.unlink(missing_ok=True)
