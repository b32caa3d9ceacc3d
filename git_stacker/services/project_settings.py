"""Per-repository settings stored under the .git directory."""

import json
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from git_stacker.constants import DEFAULT_TRUNK, PROJECT_SETTINGS_FILENAME
from git_stacker.exceptions import ProjectSettingsError
from git_stacker.logging_config import get_logger

if TYPE_CHECKING:
    from git_stacker.prompts import Prompter

logger = get_logger(__name__)


@dataclass
class ProjectSettings:
    """Settings for one repository."""

    trunk: Optional[str] = None


class ProjectSettingsStore:
    """Loads lazily and saves ProjectSettings as JSON."""

    def __init__(self, control_dir: Path):
        self.settings_file = Path(control_dir) / PROJECT_SETTINGS_FILENAME
        self._settings: Optional[ProjectSettings] = None

    def load(self) -> ProjectSettings:
        """Read settings from disk. Missing or corrupt files give defaults."""
        if self._settings is not None:
            return self._settings

        self._settings = self._read()
        return self._settings

    def _read(self) -> ProjectSettings:
        if not self.settings_file.exists():
            logger.debug("No project settings file found")
            return ProjectSettings()

        try:
            with open(self.settings_file, 'r') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON in project settings: {e}")
            return ProjectSettings()
        except OSError as e:
            logger.warning(f"Failed to read project settings: {e}")
            return ProjectSettings()

        if not isinstance(data, dict):
            logger.warning("Project settings are not a JSON object, ignoring")
            return ProjectSettings()

        trunk = data.get("trunk")
        if trunk is not None and not isinstance(trunk, str):
            logger.warning("Project settings 'trunk' is not a string, ignoring")
            trunk = None
        return ProjectSettings(trunk=trunk)

    def save(self, settings: ProjectSettings) -> None:
        """Write settings atomically.

        Raises:
            ProjectSettingsError: If the file cannot be written
        """
        temp_file = self.settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w') as f:
                json.dump(asdict(settings), f)
                f.flush()
            temp_file.replace(self.settings_file)
        except OSError as e:
            raise ProjectSettingsError(f"Failed to save project settings: {e}")
        finally:
            if temp_file.exists():
                temp_file.unlink()

        self._settings = settings
        logger.debug(f"Saved project settings to {self.settings_file}")

    def set_trunk(self, trunk: str) -> None:
        settings = self.load()
        settings.trunk = trunk
        self.save(settings)

    def get_trunk(self, prompter: "Prompter", default: str = DEFAULT_TRUNK) -> str:
        """Configured trunk, asking the operator and saving the answer on first use."""
        settings = self.load()
        if settings.trunk:
            return settings.trunk

        trunk = prompter.ask_text("What is the name of the trunk branch?", default=default).strip()
        if not trunk:
            trunk = default
        self.set_trunk(trunk)
        return trunk
