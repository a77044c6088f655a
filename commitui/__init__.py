"""Curses interface for composing conventional commit messages and committing them with git."""

__version__ = "0.1.0"