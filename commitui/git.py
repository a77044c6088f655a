"""Handing the finished message to git."""

from __future__ import annotations

import os
import subprocess
import tempfile
from pathlib import Path


def commit_with_message(message: str) -> bool:
    """Run ``git commit -F`` with ``message``; return whether git succeeded."""
    fd, name = tempfile.mkstemp(prefix="commitui-", suffix=".txt")
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(message)
        completed = subprocess.run(["git", "commit", "-F", str(path)], check=False)
    finally:
        path.unlink(missing_ok=True)

    if completed.returncode == 0:
        print("Commit successful!")
        return True
    print("Commit failed. See above for details.")
    return False