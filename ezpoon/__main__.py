"""Entry point for the EZpoon CLI."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from rich.console import Console

from . import __version__
from .actions import SlotActions
from .features.git_integration import resolve_context
from .log import enable_verbose_logging, logger
from .menu import Notify
from .persistence import DecodeError, SlotStore
from .platform import PLATFORM, find_editor, no_editor_message, open_in_editor
from .preferences import PREFS_PATH, Preferences, load_preferences
from .slots import expand_path, is_valid_key

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def _notify(message: str, severity: str) -> None:
    if severity == "error":
        err_console.print(message, style="bold red", markup=False)
    else:
        console.print(message, markup=False)


def _make_opener(prefs: Preferences, notify: Notify):
    def opener(path: str) -> bool:
        editor = find_editor(prefs.editor.command)
        if editor is None:
            notify(f"EZpoon: {no_editor_message()}", "error")
            return False
        return open_in_editor(path, editor)

    return opener


def build_actions(prefs: Preferences, data_dir: Path | None = None) -> SlotActions:
    """Wire a :class:`SlotActions` for the CLI from *prefs*."""
    store = SlotStore(data_dir or prefs.storage.resolved_data_dir())
    timeout = prefs.context.git_timeout
    return SlotActions(
        store,
        resolve_context=lambda: resolve_context(timeout=timeout),
        notify=_notify,
        opener=_make_opener(prefs, _notify),
    )


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------


def _cmd_add(actions: SlotActions, args: argparse.Namespace, prefs: Preferences) -> int:
    if not is_valid_key(args.key):
        _notify(f"EZpoon: invalid key {args.key!r} (expected one of 0-9 a-z)", "error")
        return 2
    actions.add(args.key, args.file)
    return 0


def _cmd_jump(actions: SlotActions, args: argparse.Namespace, prefs: Preferences) -> int:
    actions.jump(args.key)
    return 0


def _cmd_menu(actions: SlotActions, args: argparse.Namespace, prefs: Preferences) -> int:
    from .app import run_menu

    run_menu(actions, error_marker=prefs.menu.error_marker)
    return 0


def _cmd_list(actions: SlotActions, args: argparse.Namespace, prefs: Preferences) -> int:
    for line in actions.listing():
        console.print(line, markup=False)
    return 0


def _cmd_path(actions: SlotActions, args: argparse.Namespace, prefs: Preferences) -> int:
    path = actions.load().get(args.key)
    if path is None:
        return 1
    console.print(expand_path(path), markup=False)
    return 0


def _cmd_doctor(actions: SlotActions, args: argparse.Namespace, prefs: Preferences) -> int:
    context = actions.context
    console.print("EZpoon -- Environment Doctor\n")
    console.print(f"  Platform:     {PLATFORM}", markup=False)
    console.print(f"  Preferences:  {PREFS_PATH}", markup=False)
    console.print(f"  Data dir:     {actions.store.data_dir}", markup=False)
    console.print(f"  Context:      {context}", markup=False)
    console.print(f"  Slot file:    {actions.store.path_for(context)}", markup=False)
    console.print(
        f"  Editor:       {find_editor(prefs.editor.command) or 'NOT FOUND'}",
        markup=False,
    )
    return 0


_COMMANDS = {
    "add": _cmd_add,
    "jump": _cmd_jump,
    "menu": _cmd_menu,
    "list": _cmd_list,
    "path": _cmd_path,
    "doctor": _cmd_doctor,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ezpoon",
        description="Bookmark files under one-character keys, per git project",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"ezpoon {__version__}",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding slot files (overrides preferences)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_add = sub.add_parser("add", help="Bookmark FILE under KEY")
    p_add.add_argument("key", help="Slot key (0-9, a-z)")
    p_add.add_argument("file", nargs="?", default=None, help="File to bookmark")

    p_jump = sub.add_parser("jump", help="Open the file bookmarked under KEY")
    p_jump.add_argument("key")

    sub.add_parser("menu", help="Edit all bookmarks of the current context")
    sub.add_parser("list", help="Print the bookmarks of the current context")

    p_path = sub.add_parser("path", help="Print the file bookmarked under KEY")
    p_path.add_argument("key")

    sub.add_parser("doctor", help="Show where bookmarks are read from and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the EZpoon CLI."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        enable_verbose_logging()

    prefs = load_preferences()
    actions = build_actions(prefs, args.data_dir)
    logger.debug("cwd=%s command=%s", os.getcwd(), args.command)

    try:
        return _COMMANDS[args.command](actions, args, prefs)
    except DecodeError as exc:
        err_console.print(
            f"EZpoon: cannot read {exc.path}: {exc.reason}",
            style="bold red",
            markup=False,
        )
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
