import subprocess
from pathlib import Path
from unittest import mock

import pytest

from commitui.git import commit_with_message


def recording_run(returncode, seen):
    def run(args, **kwargs):
        path = Path(args[3])
        seen["args"] = list(args)
        seen["path"] = path
        seen["content"] = path.read_text(encoding="utf-8")
        return subprocess.CompletedProcess(args, returncode)

    return run


def test_successful_commit(capsys):
    seen = {}
    message = "feat: add x\n\nbody line\n"
    with mock.patch("subprocess.run", side_effect=recording_run(0, seen)):
        assert commit_with_message(message) is True
    assert seen["args"][:3] == ["git", "commit", "-F"]
    assert seen["content"] == message
    assert not seen["path"].exists()
    assert "Commit successful!" in capsys.readouterr().out


def test_failed_commit(capsys):
    seen = {}
    with mock.patch("subprocess.run", side_effect=recording_run(1, seen)):
        assert commit_with_message("fix: y\n") is False
    assert "Commit failed. See above for details." in capsys.readouterr().out
    assert not seen["path"].exists()


def test_unicode_message_written_verbatim():
    seen = {}
    message = "docs: naïve café ─ ✓\n"
    with mock.patch("subprocess.run", side_effect=recording_run(0, seen)):
        result = commit_with_message(message)
    assert result is True
    assert seen["content"] == message


def test_missing_git_raises_and_cleans_up():
    created = []

    def run(args, **kwargs):
        created.append(Path(args[3]))
        raise FileNotFoundError("git")

    with mock.patch("subprocess.run", side_effect=run):
        with pytest.raises(FileNotFoundError):
            commit_with_message("chore: z\n")
    assert len(created) == 1
    assert not created[0].exists()