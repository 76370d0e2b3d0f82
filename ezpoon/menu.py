"""Menu formatting, line validation, and reconciliation.

The menu shows a registry as one ``[<key>] = <path>`` line per slot.  The
user edits those lines freely; on submit every line is parsed and
validated, and the registry is replaced only if all of them pass.

Nothing here touches a UI.  :class:`MenuReconciler` reports back through
an injected ``notify`` callback, and the editing surface draws the
per-line markers from the returned :class:`ReconcileResult`.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .log import logger
from .persistence import SlotStore
from .slots import add, expand_path, is_valid_key

# ``notify(message, severity)`` with Textual severities ("information", "error").
Notify = Callable[[str, str], object]

SAVED_MESSAGE = "EZpoon: State saved!"
INVALID_MESSAGE = (
    "EZpoon: Please ensure syntax is correct ([<key>] = <valid fp>), "
    "and that the file exists!"
)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def sort_keys(registry: dict[str, str]) -> list[str]:
    """Return the keys of *registry* ordered by byte value."""
    return sorted(registry, key=lambda k: str(k).encode("utf-8")[:1])


def format_line(key: str, path: str) -> str:
    return f"[{key}] = {path}"


def render(registry: dict[str, str]) -> list[str]:
    """Render *registry* as sorted menu lines."""
    return [format_line(k, registry[k]) for k in sort_keys(registry)]


def parse_line(line: str) -> tuple[str | None, str | None]:
    """Split a menu line into ``(key, path)``.

    The key is whatever sits between a leading ``[`` and the next ``]``;
    its shape is checked later.  The path is everything after the first
    ``=``, stripped.  Either part is None when missing.
    """
    key = None
    if line.startswith("["):
        end = line.find("]", 1)
        if end != -1:
            key = line[1:end]

    _, sep, rest = line.partition("=")
    path = rest.strip() if sep else None
    return key, path


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def is_readable_file(path: str | None) -> bool:
    if not path:
        return False
    expanded = expand_path(path)
    return os.path.isfile(expanded) and os.access(expanded, os.R_OK)


@dataclass
class ValidationResult:
    all_valid: bool
    failed_lines: list[int] = field(default_factory=list)


def validate_lines(lines: Sequence[str]) -> ValidationResult:
    """Check every line; line numbers in the result are 1-indexed."""
    failed: list[int] = []
    for number, line in enumerate(lines, start=1):
        key, path = parse_line(line)
        if not (is_readable_file(path) and is_valid_key(key)):
            failed.append(number)
    return ValidationResult(all_valid=not failed, failed_lines=failed)


# ---------------------------------------------------------------------------
# Reconciliation
# ---------------------------------------------------------------------------


class MenuState(enum.Enum):
    EDITING = "editing"
    SUBMITTED = "submitted"
    COMMITTED = "committed"
    REJECTED = "rejected"


@dataclass
class ReconcileResult:
    state: MenuState
    registry: dict[str, str] | None = None
    failed_lines: list[int] = field(default_factory=list)


class MenuReconciler:
    """Turn submitted menu lines back into a persisted registry.

    A rejected submit leaves the store untouched and returns to
    ``EDITING`` so the user can fix the lines and submit again.
    """

    def __init__(self, store: SlotStore, context: str, notify: Notify) -> None:
        self._store = store
        self._context = context
        self._notify = notify
        self.state = MenuState.EDITING

    def submit(self, lines: Sequence[str]) -> ReconcileResult:
        if self.state is MenuState.COMMITTED:
            raise RuntimeError("menu already committed")
        self.state = MenuState.SUBMITTED

        result = validate_lines(lines)
        if not result.all_valid:
            logger.debug("Menu rejected, failing lines: %s", result.failed_lines)
            self._notify(INVALID_MESSAGE, "error")
            self.state = MenuState.EDITING
            return ReconcileResult(MenuState.REJECTED, failed_lines=result.failed_lines)

        registry: dict[str, str] = {}
        for line in lines:
            key, path = parse_line(line)
            # validated above
            add(registry, key, path)  # type: ignore[arg-type]
        self._store.save(registry, self._context)

        self.state = MenuState.COMMITTED
        self._notify(SAVED_MESSAGE, "information")
        return ReconcileResult(MenuState.COMMITTED, registry=registry)
