"""Command-line entry point."""

from __future__ import annotations

import argparse
import curses
import sys

from commitui.config import Config
from commitui.git import commit_with_message
from commitui.tui import run_tui


def main(argv: list[str] | None = None) -> int:
    """Load the configuration, run the wizard and commit the result."""
    parser = argparse.ArgumentParser(
        prog="commitui", description="A TUI for greater commit messages"
    )
    parser.parse_args(argv)

    try:
        config = Config.load()
    except (OSError, ValueError) as exc:
        print(f"Warning: {exc}", file=sys.stderr)
        config = Config.default()

    try:
        message = run_tui(config)
        commit_with_message(message)
    except (OSError, curses.error) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())