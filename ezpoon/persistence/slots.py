"""Slot persistence store: one JSON file per context."""

from __future__ import annotations

from pathlib import Path

from ._base import DecodeError, JsonStore


class SlotStore:
    """Key → path registries, stored as ``<data_dir>/<context>``.

    The data directory is created when the store is built, so every later
    read or write can assume it exists.
    """

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, context: str) -> Path:
        """Return the file backing *context*."""
        return self.data_dir / context

    def load(self, context: str) -> dict[str, str]:
        """Load the registry for *context*, creating an empty one if absent."""
        store = JsonStore(self.path_for(context))
        data = store.load_raw()
        if not isinstance(data, dict):
            raise DecodeError(store.path, "expected a JSON object")
        for key, value in data.items():
            if not isinstance(value, str):
                raise DecodeError(store.path, f"value for {key!r} is not a string")
        return data

    def save(self, registry: dict[str, str], context: str) -> None:
        """Overwrite the file for *context* with *registry*."""
        JsonStore(self.path_for(context)).save_raw(dict(registry))
