"""Host-facing slot actions: add, jump, and menu.

:class:`SlotActions` owns no registry of its own.  Each action resolves the
current context, reloads the registry from the store, and saves after any
change, so two terminals working on the same project always see the
latest state.  It talks back to the host through callbacks injected at
construction time, keeping it decoupled from Textual and the CLI.
"""

from __future__ import annotations

import os
from typing import Callable

from . import slots
from .log import logger
from .menu import MenuReconciler, Notify, render
from .persistence import SlotStore


class SlotActions:
    """Bookmark operations for whatever context is active.

    Parameters
    ----------
    store:
        Where registries are read and written.
    resolve_context:
        Zero-argument callable returning the current context id.
    notify:
        ``notify(message, severity)`` sink for user-facing messages.
    opener:
        Callback that opens a file path (e.g. launches the editor).
    """

    def __init__(
        self,
        store: SlotStore,
        *,
        resolve_context: Callable[[], str],
        notify: Notify,
        opener: Callable[[str], object],
    ) -> None:
        self.store = store
        self._resolve_context = resolve_context
        self._notify = notify
        self._opener = opener

    @property
    def context(self) -> str:
        return self._resolve_context()

    def load(self) -> dict[str, str]:
        return self.store.load(self.context)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add(self, key: str, current_file: str | None) -> bool:
        """Bind *current_file* to *key*.  Returns False if nothing was added.

        Adding without a current file, or with something that is not a
        regular file, is silently ignored.
        """
        context = self.context
        registry = self.store.load(context)
        if not current_file or not os.path.isfile(current_file):
            logger.debug("add(%s): no active file (%r)", key, current_file)
            return False

        path = os.path.abspath(current_file)
        slots.add(registry, key, path)
        self.store.save(registry, context)
        self._notify(f"EZpoon: {path} added to [{key}]", "information")
        return True

    def jump(self, key: str) -> str | None:
        """Open the file bound to *key*; unset keys do nothing.

        Stored paths may use ``~``, ``$VARS`` or be relative, exactly as
        typed in the menu; they are expanded before opening.
        """
        path = slots.jump_target(self.load(), key)
        if path is None:
            logger.debug("jump(%s): slot is empty", key)
            return None
        target = slots.expand_path(path)
        self._opener(target)
        return target

    def menu(self) -> list[str]:
        """Return the lines that pre-populate the editing menu."""
        return render(self.load())

    def listing(self) -> list[str]:
        return self.menu()

    def reconciler(self, notify: Notify | None = None) -> MenuReconciler:
        """Build a reconciler bound to the current context.

        *notify* overrides the action sink, e.g. with ``App.notify`` while
        the menu screen is up.
        """
        return MenuReconciler(self.store, self.context, notify or self._notify)
