"""EZpoon -- per-project file bookmarks under one-character keys."""

__version__ = "0.1.0"
