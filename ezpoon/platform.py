"""Cross-platform abstractions for EZpoon.

Detects the runtime platform once at import time and provides
platform-appropriate paths and editor fallbacks. Every other module
imports from here instead of doing its own platform detection.

Supported platforms:
  - linux   (native Linux)
  - wsl     (Windows Subsystem for Linux)
  - macos   (macOS / Darwin)
  - windows (native Windows / PowerShell)
"""

from __future__ import annotations

import os
import platform
import shutil
import subprocess
from pathlib import Path

from .log import logger

# ---------------------------------------------------------------------------
# Platform detection (runs once at import time)
# ---------------------------------------------------------------------------

_system = platform.system()  # "Linux", "Darwin", "Windows"

try:
    _uname_release = platform.uname().release.lower()
except OSError:
    _uname_release = ""

IS_WINDOWS = _system == "Windows"
IS_MACOS = _system == "Darwin"
IS_LINUX = _system == "Linux"
IS_WSL = IS_LINUX and "microsoft" in _uname_release

if IS_WINDOWS:
    PLATFORM = "windows"
elif IS_WSL:
    PLATFORM = "wsl"
elif IS_MACOS:
    PLATFORM = "macos"
else:
    PLATFORM = "linux"

APP_NAME = "ezpoon"

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def default_data_dir() -> Path:
    """Return the per-user directory where slot files are stored.

    Linux / WSL honour ``$XDG_DATA_HOME`` (default ``~/.local/share``),
    macOS uses ``~/Library/Application Support`` and Windows uses
    ``%LOCALAPPDATA%``.
    """
    if IS_WINDOWS:
        local = os.environ.get("LOCALAPPDATA")
        if local:
            return Path(local) / APP_NAME
        return Path.home() / "AppData" / "Local" / APP_NAME
    if IS_MACOS:
        return Path.home() / "Library" / "Application Support" / APP_NAME
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def default_config_dir() -> Path:
    """Return the per-user directory holding ``preferences.yaml``."""
    if IS_WINDOWS:
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_NAME
        return Path.home() / "AppData" / "Roaming" / APP_NAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


# ---------------------------------------------------------------------------
# Editors
# ---------------------------------------------------------------------------


def editor_candidates() -> list[str | None]:
    """Return an ordered list of editor candidates for the current platform.

    Includes $VISUAL and $EDITOR (which may be None), followed by
    platform-appropriate fallbacks.
    """
    env_editors: list[str | None] = [
        os.environ.get("VISUAL"),
        os.environ.get("EDITOR"),
    ]
    if IS_WINDOWS:
        return [*env_editors, "code", "notepad"]
    if IS_MACOS:
        return [*env_editors, "nano", "vim", "vi", "code"]
    # Linux / WSL
    return [*env_editors, "nano", "vim", "vi"]


def find_editor(preferred: str = "") -> str | None:
    """Return the first editor command that resolves on ``PATH``.

    *preferred* (from preferences) wins when set.  Env values may carry
    arguments (``"code --wait"``); only the program name is looked up.
    """
    for candidate in [preferred or None, *editor_candidates()]:
        if not candidate:
            continue
        program = candidate.split()[0]
        if shutil.which(program):
            return candidate
    return None


def no_editor_message() -> str:
    """Return a helpful error message when no editor is found."""
    if IS_WINDOWS:
        return "No editor found. Set %EDITOR% or install VS Code."
    return "No editor found. Set $EDITOR or install vim/nano."


def open_in_editor(path: str, editor: str) -> bool:
    """Open *path* with *editor*, blocking until it exits.

    Returns True when the editor exited with status 0.
    """
    try:
        result = subprocess.run([*editor.split(), path])
    except OSError:
        logger.debug("Failed to launch editor %s", editor, exc_info=True)
        return False
    return result.returncode == 0
