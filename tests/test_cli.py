import curses
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from commitui.cli import main


class FakeScreen:
    def __init__(self, keys):
        self.keys = list(keys)

    def getmaxyx(self):
        return (24, 80)

    def keypad(self, flag):
        pass

    def timeout(self, milliseconds):
        pass

    def erase(self):
        pass

    def refresh(self):
        pass

    def addnstr(self, y, x, text, limit, attr=0):
        pass

    def get_wch(self):
        if not self.keys:
            return "\x1b"
        return self.keys.pop(0)


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("platformdirs.user_config_dir", return_value=str(tmp_path / "cfg")):
        yield tmp_path


def run_main(keys, git_result=0, git_error=None):
    seen = {}

    def wrapper(func, *args, **kwargs):
        return func(FakeScreen(keys), *args, **kwargs)

    def run(args, **kwargs):
        if git_error is not None:
            raise git_error
        seen["content"] = Path(args[3]).read_text(encoding="utf-8")
        return subprocess.CompletedProcess(args, git_result)

    with mock.patch("curses.wrapper", side_effect=wrapper), mock.patch(
        "subprocess.run", side_effect=run
    ):
        code = main([])
    return code, seen.get("content")


def test_commits_wizard_result(isolated):
    code, content = run_main(["\n", "\n", *"add x", "\n", "\n", "\n", "\n"])
    assert code == 0
    assert content == "feat: add x\n"


def test_local_config_changes_types(isolated):
    (isolated / "commitui.toml").write_text('types = ["custom"]\n', encoding="utf-8")
    code, content = run_main(["\n", "\n", *"abc", "\n", "\n", "\n", "\n"])
    assert code == 0
    assert content == "custom: abc\n"


def test_quit_still_commits_collected_message(isolated):
    code, content = run_main(["\x1b"])
    assert code == 0
    assert content == "\n"


def test_git_failure_is_not_an_error_exit(isolated, capsys):
    code, _ = run_main(["\x1b"], git_result=1)
    assert code == 0
    assert "Commit failed" in capsys.readouterr().out


def test_missing_git_reports_error(isolated, capsys):
    code, content = run_main(["\x1b"], git_error=FileNotFoundError("git"))
    assert code == 1
    assert content is None
    assert "Error:" in capsys.readouterr().err


def test_terminal_error_reports_error(isolated, capsys):
    with mock.patch("curses.wrapper", side_effect=curses.error("no terminal")):
        assert main([]) == 1
    assert "no terminal" in capsys.readouterr().err


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "commit messages" in capsys.readouterr().out