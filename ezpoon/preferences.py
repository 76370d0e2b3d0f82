"""User preferences for EZpoon.

Loads settings from ~/.config/ezpoon/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .log import logger
from .platform import default_config_dir, default_data_dir

PREFS_PATH = default_config_dir() / "preferences.yaml"

_DEFAULT_YAML = """\
# EZpoon Preferences
# Delete this file to reset to defaults.

storage:
  data_dir: ""                   # where slot files live (empty = platform default)

context:
  git_timeout: 10.0              # seconds to wait for `git rev-parse`

editor:
  command: ""                    # editor used by `ezpoon jump` (empty = $VISUAL / $EDITOR)

menu:
  error_marker: "X"              # shown at the end of lines that fail validation
"""


@dataclass
class StoragePreferences:
    data_dir: str = ""

    def resolved_data_dir(self) -> Path:
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return default_data_dir()


@dataclass
class ContextPreferences:
    git_timeout: float = 10.0


@dataclass
class EditorPreferences:
    command: str = ""


@dataclass
class MenuPreferences:
    error_marker: str = "X"


@dataclass
class Preferences:
    """Top-level EZpoon preferences."""

    storage: StoragePreferences = field(default_factory=StoragePreferences)
    context: ContextPreferences = field(default_factory=ContextPreferences)
    editor: EditorPreferences = field(default_factory=EditorPreferences)
    menu: MenuPreferences = field(default_factory=MenuPreferences)


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text()) or {}
            if isinstance(data.get("storage"), dict):
                sdata = data["storage"]
                if "data_dir" in sdata:
                    prefs.storage.data_dir = str(sdata["data_dir"] or "")
            if isinstance(data.get("context"), dict):
                cdata = data["context"]
                if "git_timeout" in cdata:
                    prefs.context.git_timeout = float(cdata["git_timeout"])
            if isinstance(data.get("editor"), dict):
                edata = data["editor"]
                if "command" in edata:
                    prefs.editor.command = str(edata["command"] or "")
            if isinstance(data.get("menu"), dict):
                mdata = data["menu"]
                if mdata.get("error_marker"):
                    prefs.menu.error_marker = str(mdata["error_marker"])
        except Exception:
            logger.debug("Invalid preferences file %s", path, exc_info=True)
            return Preferences()
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML)
        except OSError:
            logger.debug("Could not write default preferences to %s", path, exc_info=True)

    return prefs
