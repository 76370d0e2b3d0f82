"""Tests for the ``ezpoon`` command line."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from ezpoon import __main__ as cli
from ezpoon.preferences import Preferences


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    """No real preferences file, and always the global context."""
    monkeypatch.setattr(cli, "load_preferences", lambda: Preferences())
    monkeypatch.setattr(cli, "resolve_context", lambda timeout=10: "global")


def run(data_dir, *args: str) -> int:
    return cli.main(["--data-dir", str(data_dir), *args])


class TestAddCommand:
    def test_add_writes_slot(self, data_dir, files, capsys):
        assert run(data_dir, "add", "a", files["x.txt"]) == 0
        stored = json.loads((data_dir / "global").read_text())
        assert stored == {"a": files["x.txt"]}
        assert "added to [a]" in capsys.readouterr().out

    def test_invalid_key_rejected(self, data_dir, files, capsys):
        assert run(data_dir, "add", "AB", files["x.txt"]) == 2
        assert "invalid key" in capsys.readouterr().err
        assert not (data_dir / "global").exists()

    def test_missing_file_is_silent_noop(self, data_dir, capsys):
        assert run(data_dir, "add", "a") == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
        assert json.loads((data_dir / "global").read_text()) == {}


class TestJumpCommand:
    def test_jump_opens_editor(self, data_dir, files):
        run(data_dir, "add", "a", files["x.txt"])
        with patch.object(cli, "find_editor", return_value="vim"), patch.object(
            cli, "open_in_editor", return_value=True
        ) as open_mock:
            assert run(data_dir, "jump", "a") == 0
        open_mock.assert_called_once_with(files["x.txt"], "vim")

    def test_jump_unset_key_does_nothing(self, data_dir):
        with patch.object(cli, "open_in_editor") as open_mock:
            assert run(data_dir, "jump", "z") == 0
        open_mock.assert_not_called()

    def test_jump_without_editor_reports(self, data_dir, files, capsys):
        run(data_dir, "add", "a", files["x.txt"])
        capsys.readouterr()
        with patch.object(cli, "find_editor", return_value=None):
            assert run(data_dir, "jump", "a") == 0
        assert "No editor found" in capsys.readouterr().err


class TestListAndPath:
    def test_list_prints_sorted(self, data_dir, files, capsys):
        run(data_dir, "add", "b", files["y.txt"])
        run(data_dir, "add", "0", files["x.txt"])
        capsys.readouterr()
        assert run(data_dir, "list") == 0
        assert capsys.readouterr().out.splitlines() == [
            f"[0] = {files['x.txt']}",
            f"[b] = {files['y.txt']}",
        ]

    def test_path_prints_target(self, data_dir, files, capsys):
        run(data_dir, "add", "a", files["x.txt"])
        capsys.readouterr()
        assert run(data_dir, "path", "a") == 0
        assert capsys.readouterr().out.strip() == files["x.txt"]

    def test_path_unset_key_exits_1(self, data_dir, capsys):
        assert run(data_dir, "path", "q") == 1
        assert capsys.readouterr().out == ""


class TestMenuCommand:
    def test_saved_menu_not_reprinted(self, data_dir, capsys):
        with patch("ezpoon.app.run_menu", return_value=True) as run_menu:
            assert run(data_dir, "menu") == 0
        assert run_menu.call_args.kwargs["error_marker"] == "X"
        # the app prints the saved message itself on exit
        assert capsys.readouterr().out == ""

    def test_cancelled_menu_is_quiet(self, data_dir, capsys):
        with patch("ezpoon.app.run_menu", return_value=False):
            assert run(data_dir, "menu") == 0
        assert capsys.readouterr().out == ""


class TestErrors:
    def test_corrupt_store_exits_1_and_keeps_file(self, data_dir, capsys):
        data_dir.mkdir(parents=True)
        (data_dir / "global").write_text("{broken")
        assert run(data_dir, "list") == 1
        assert "cannot read" in capsys.readouterr().err
        assert (data_dir / "global").read_text() == "{broken"

    def test_doctor(self, data_dir, capsys):
        assert run(data_dir, "doctor") == 0
        out = capsys.readouterr().out
        assert "Context:      global" in out
        assert str(data_dir / "global") in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert "ezpoon 0.1.0" in capsys.readouterr().out

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])
        assert exc_info.value.code == 2


class TestStoredPathExpansion:
    def test_path_expands_home(self, data_dir, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("HOME", str(tmp_path))
        data_dir.mkdir(parents=True)
        (data_dir / "global").write_text('{"n": "~/notes.txt"}')
        assert run(data_dir, "path", "n") == 0
        assert capsys.readouterr().out.strip() == str(tmp_path / "notes.txt")

    def test_jump_opens_expanded_path(self, data_dir, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        data_dir.mkdir(parents=True)
        (data_dir / "global").write_text('{"n": "~/notes.txt"}')
        with patch.object(cli, "find_editor", return_value="vim"), patch.object(
            cli, "open_in_editor", return_value=True
        ) as open_mock:
            run(data_dir, "jump", "n")
        open_mock.assert_called_once_with(str(tmp_path / "notes.txt"), "vim")


class TestNonUtf8Store:
    @pytest.mark.parametrize("command", [["list"], ["jump", "a"], ["path", "a"]])
    def test_exits_1_and_keeps_file(self, data_dir, capsys, command):
        data_dir.mkdir(parents=True)
        (data_dir / "global").write_bytes(b'{"a": "\xff\xfe"}')
        assert run(data_dir, *command) == 1
        assert "cannot read" in capsys.readouterr().err
        assert (data_dir / "global").read_bytes() == b'{"a": "\xff\xfe"}'
