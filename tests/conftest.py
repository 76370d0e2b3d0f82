"""Shared test fixtures for the ezpoon test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from ezpoon.persistence import SlotStore


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory the slot store writes into (not created yet)."""
    return tmp_path / "data" / "ezpoon"


@pytest.fixture
def store(data_dir: Path) -> SlotStore:
    return SlotStore(data_dir)


@pytest.fixture
def files(tmp_path: Path) -> dict[str, str]:
    """A few real, readable files to bookmark."""
    root = tmp_path / "project"
    root.mkdir()
    paths = {}
    for name in ("x.txt", "y.txt", "old.txt", "file.txt"):
        path = root / name
        path.write_text(name)
        paths[name] = str(path)
    return paths


class NotifyRecorder:
    """Collects ``notify(message, severity)`` calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def __call__(self, message: str, severity: str) -> None:
        self.calls.append((message, severity))

    @property
    def severities(self) -> list[str]:
        return [severity for _, severity in self.calls]


@pytest.fixture
def notify() -> NotifyRecorder:
    return NotifyRecorder()
