"""Textual widgets for EZpoon."""

from .menu_screen import MenuScreen

__all__ = ["MenuScreen"]
