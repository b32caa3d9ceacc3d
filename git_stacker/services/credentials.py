"""Per-user access token storage."""

import json
import os
from pathlib import Path
from typing import Optional

from git_stacker.exceptions import CredentialError
from git_stacker.logging_config import get_logger

logger = get_logger(__name__)

# Owner read/write only
CREDENTIAL_FILE_MODE = 0o600
CREDENTIAL_DIR_MODE = 0o700


class CredentialStore:
    """Reads and writes ``{"accessToken": ...}`` at a fixed path."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[str]:
        """Return the stored token, None if missing or unreadable."""
        if not self.path.exists():
            logger.debug(f"No credential file at {self.path}")
            return None

        try:
            with open(self.path, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in credential file: {e}")
            return None
        except OSError as e:
            logger.warning(f"Failed to read credential file: {e}")
            return None

        token = data.get("accessToken") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token.strip():
            logger.warning("Credential file has no access token")
            return None
        return token.strip()

    def save(self, token: str) -> None:
        """Persist ``token`` readable only by the current user.

        Raises:
            CredentialError: If the file cannot be created or restricted
        """
        try:
            self.path.parent.mkdir(mode=CREDENTIAL_DIR_MODE, parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CREDENTIAL_FILE_MODE)
            with os.fdopen(fd, 'w') as f:
                # os.open keeps the mode of an existing file
                os.fchmod(f.fileno(), CREDENTIAL_FILE_MODE)
                json.dump({"accessToken": token}, f)
        except OSError as e:
            raise CredentialError(f"Failed to store credentials at {self.path}: {e}")

        logger.info(f"Saved credentials to {self.path}")
