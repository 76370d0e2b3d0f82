"""Modal menu screen for bulk-editing slots."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static, TextArea

from ..menu import MenuReconciler, MenuState


class MenuScreen(ModalScreen[bool]):
    """Free-text editor over the slot registry.

    Ctrl+S submits the buffer.  A committed submit dismisses the screen
    with ``True``; a rejected one marks the failing lines and keeps the
    buffer open.  Escape dismisses with ``False`` without saving.
    """

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("escape", "quit_menu", "Quit", show=False, priority=True),
    ]

    DEFAULT_CSS = """
    MenuScreen {
        align: center middle;
    }
    #menu-modal {
        width: 60%;
        height: 60%;
        border: round $accent;
        border-title-align: center;
        border-subtitle-align: center;
    }
    #menu-body {
        height: 1fr;
    }
    #menu-text {
        width: 1fr;
        border: none;
    }
    #menu-markers {
        width: 3;
        color: $error;
        text-style: bold;
    }
    """

    def __init__(
        self,
        lines: list[str],
        reconciler: MenuReconciler,
        error_marker: str = "X",
    ) -> None:
        super().__init__()
        self._lines = lines
        self._reconciler = reconciler
        self._error_marker = error_marker
        self.failed_lines: list[int] = []
        self.dirty = False

    def compose(self) -> ComposeResult:
        with Vertical(id="menu-modal") as modal:
            modal.border_title = "EZpoon Menu"
            modal.border_subtitle = "ctrl+s to save | esc to quit"
            with Horizontal(id="menu-body"):
                yield TextArea(
                    "\n".join(self._lines),
                    id="menu-text",
                    show_line_numbers=True,
                    soft_wrap=False,
                )
                yield Static("", id="menu-markers")

    def on_mount(self) -> None:
        area = self.query_one("#menu-text", TextArea)
        area.focus()
        self.watch(area, "scroll_y", self._on_text_scrolled, init=False)

    def _on_text_scrolled(self, _scroll_y: float) -> None:
        self._render_markers()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.dirty = True

    def current_lines(self) -> list[str]:
        return self.query_one("#menu-text", TextArea).text.splitlines()

    def marker_rows(self) -> list[str]:
        """Marker column contents, one entry per visible row of the text area.

        Rows start at the first line scrolled into view; with soft wrap off
        each document line is exactly one row.
        """
        first = self.query_one("#menu-text", TextArea).scroll_offset.y + 1
        last = max(self.failed_lines, default=0)
        return [
            self._error_marker if number in self.failed_lines else ""
            for number in range(first, last + 1)
        ]

    def _render_markers(self) -> None:
        self.query_one("#menu-markers", Static).update("\n".join(self.marker_rows()))

    def _show_markers(self, failed: list[int]) -> None:
        self.failed_lines = failed
        self._render_markers()

    def action_save(self) -> None:
        self._show_markers([])
        result = self._reconciler.submit(self.current_lines())
        if result.state is MenuState.COMMITTED:
            self.dirty = False
            self.dismiss(True)
        else:
            self._show_markers(result.failed_lines)

    def action_quit_menu(self) -> None:
        self.dismiss(False)
