"""Base JSON persistence store."""

from __future__ import annotations

import json
from pathlib import Path

from ..log import logger


class DecodeError(ValueError):
    """A store file exists but does not hold the expected JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class JsonStore:
    """Simple JSON file store holding one compact JSON document per file.

    Unlike a cache, a store file that fails to parse is *not* replaced by
    the empty state: :meth:`load_raw` raises :class:`DecodeError` and the
    file is left untouched for the user to inspect.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict | list:
        """Read and parse the JSON file, seeding ``_default()`` if it is absent."""
        if not self.path.is_file():
            self.save_raw(self._default())
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.debug("failed to decode JSON store %s", self.path, exc_info=True)
            raise DecodeError(self.path, str(exc)) from exc

    def save_raw(self, data: dict | list) -> None:
        """Overwrite the file with *data* as a single JSON line."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(data, ensure_ascii=False, separators=(",", ":")) + "\n",
            encoding="utf-8",
        )

    # -- override point -------------------------------------------------------

    def _default(self) -> dict | list:  # noqa: PLR6301
        """Return the empty-state value for this store (dict by default)."""
        return {}
