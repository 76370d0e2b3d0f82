"""In-memory slot registry operations.

A registry is a plain ``dict`` mapping slot keys to file paths.  It is
loaded from the store at the start of each operation and handed back
explicitly, never kept as shared module state.
"""

from __future__ import annotations

import os
import re
from typing import NewType, TypeGuard

SlotKey = NewType("SlotKey", str)

_KEY_RE = re.compile(r"[0-9a-z]")


def is_valid_key(key: str | None) -> TypeGuard[SlotKey]:
    """Return True if *key* is exactly one lowercase alphanumeric character."""
    return key is not None and _KEY_RE.fullmatch(key) is not None


def add(registry: dict[str, str], key: str, path: str) -> dict[str, str]:
    """Bind *key* to *path*, replacing any previous binding.

    The key shape is not checked here; callers validate it first.
    """
    registry[key] = path
    return registry


def jump_target(registry: dict[str, str], key: str) -> str | None:
    """Return the path bound to *key*, or None if the slot is empty."""
    return registry.get(key)


def expand_path(path: str) -> str:
    """Expand ``~`` and ``$VARS`` and make *path* absolute."""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(path)))
