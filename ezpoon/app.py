"""Textual host for the EZpoon menu."""

from __future__ import annotations

from textual.app import App

from .actions import SlotActions
from .widgets import MenuScreen


class EzpoonApp(App[bool]):
    """Shows the menu screen and exits with its result.

    Errors are shown as toasts while the menu is open.  Informational
    messages arrive as the menu closes, so the last one is printed once
    to the terminal after the app exits instead.
    """

    TITLE = "EZpoon"

    def __init__(
        self,
        actions: SlotActions,
        lines: list[str],
        error_marker: str = "X",
    ) -> None:
        super().__init__()
        self._actions = actions
        self._lines = lines
        self._error_marker = error_marker
        self.exit_message: str | None = None

    def _notify(self, message: str, severity: str) -> None:
        if severity == "error":
            self.notify(message, severity="error")
        else:
            self.exit_message = message

    def on_mount(self) -> None:
        screen = MenuScreen(
            self._lines,
            self._actions.reconciler(notify=self._notify),
            error_marker=self._error_marker,
        )
        self.push_screen(screen, callback=self._on_menu_closed)

    def _on_menu_closed(self, saved: bool | None) -> None:
        self.exit(bool(saved), message=self.exit_message if saved else None)


def run_menu(actions: SlotActions, error_marker: str = "X") -> bool:
    """Run the menu; returns True if the edited slots were saved.

    The registry is loaded before the UI starts so a corrupt store file
    surfaces as a :class:`~ezpoon.persistence.DecodeError` here.
    """
    app = EzpoonApp(actions, actions.menu(), error_marker=error_marker)
    return bool(app.run())
