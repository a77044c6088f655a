"""Building the commit message text from the wizard state."""

from __future__ import annotations

from commitui.state import AppState

EMPTY_BODY = "<empty>"


def header_line(state: AppState) -> str:
    """The ``type(scope): subject`` line; the scope part is left out when empty."""
    commit_type = state.chosen_type or ""
    if state.chosen_scope:
        return f"{commit_type}({state.chosen_scope}): {state.subject}"
    return f"{commit_type}: {state.subject}"


def body_text(state: AppState) -> str:
    """The body as shown while it is being typed."""
    if not state.body_lines and not state.body:
        return EMPTY_BODY
    text = "\n".join(state.body_lines)
    if state.body:
        if text:
            text += "\n"
        text += state.body
    return text


def _append_footer(text: str, footer: str) -> str:
    if text.endswith("\n") and not text.endswith("\n\n"):
        text += "\n"
    elif text:
        text += "\n\n"
    return text + footer


def preview_text(state: AppState) -> str:
    """The message as shown on the preview screen."""
    text = header_line(state)
    if state.body_lines or state.body:
        text += "\n\n" + "\n".join(state.body_lines)
        if state.body:
            if state.body_lines:
                text += "\n"
            text += state.body
    breaking = state.breaking.strip()
    if breaking:
        text = _append_footer(text, f"BREAKING CHANGE: {breaking}")
    issues = state.issues.strip()
    if issues:
        text = _append_footer(text, issues)
    return text


def build_message(state: AppState) -> str:
    """The final message handed to git, always ending in a newline."""
    result = header_line(state) if state.chosen_type is not None else ""

    if state.body_lines or state.body:
        if result and not result.endswith("\n"):
            result += "\n"
        if not result.endswith("\n\n"):
            result += "\n\n"
        result += "\n".join(state.body_lines)
        if state.body:
            if state.body_lines:
                result += "\n"
            result += state.body

    breaking = state.breaking.strip()
    if breaking:
        if not result.endswith("\n\n"):
            result += "\n\n"
        result += f"BREAKING CHANGE: {breaking}"

    issues = state.issues.strip()
    if issues:
        if result and not result.endswith("\n\n"):
            result += "\n\n"
        result += issues

    if not result.endswith("\n"):
        result += "\n"
    return result