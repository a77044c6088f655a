"""Key handling for the commit-message wizard, independent of any terminal."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from commitui.config import Config
from commitui.state import AppState, Step
from commitui.validation import validate_subject

SEPARATOR_MARK = "─"


class KeyCode(Enum):
    """Keys the wizard distinguishes."""

    CHAR = auto()
    ENTER = auto()
    TAB = auto()
    BACKSPACE = auto()
    ESC = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` holds the character when ``code`` is CHAR."""

    code: KeyCode
    char: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and len(self.char) != 1:
            raise ValueError("a CHAR key event needs exactly one character")
        if self.code is not KeyCode.CHAR and self.char:
            raise ValueError("only CHAR key events carry a character")


class Outcome(Enum):
    """What the wizard should do after a key press."""

    CONTINUE = auto()
    QUIT = auto()
    CONFIRM = auto()


def _is_char(key: KeyEvent, char: str) -> bool:
    return key.code is KeyCode.CHAR and key.char == char


def _unmodified(key: KeyEvent) -> bool:
    return not (key.ctrl or key.alt or key.shift)


def _is_back(key: KeyEvent) -> bool:
    return _is_char(key, "b") or key.code is KeyCode.LEFT


def is_scope_selectable(scopes: Sequence[str], idx: int) -> bool:
    """Separator entries cannot be chosen."""
    return not scopes[idx].startswith(SEPARATOR_MARK)


def next_selectable_scope(scopes: Sequence[str], idx: int, direction: int) -> int:
    """Move from ``idx`` in ``direction``, skipping separators; stop at the ends."""
    while True:
        if direction > 0:
            if idx + 1 >= len(scopes):
                return idx
            new_idx = idx + 1
        else:
            if idx == 0:
                return idx
            new_idx = idx - 1
        if is_scope_selectable(scopes, new_idx):
            return new_idx
        idx = new_idx


def _edit(text: str, key: KeyEvent) -> str:
    if key.code is KeyCode.CHAR:
        return text + key.char
    if key.code is KeyCode.BACKSPACE:
        return text[:-1]
    return text


def _handle_type(state: AppState, key: KeyEvent, config: Config) -> Outcome:
    if _is_char(key, "q") and _unmodified(key):
        return Outcome.QUIT
    types = config.types or []
    if key.code is KeyCode.DOWN:
        state.selected_type = min(state.selected_type + 1, max(len(types) - 1, 0))
    elif key.code is KeyCode.UP:
        state.selected_type = max(state.selected_type - 1, 0)
    elif key.code is KeyCode.ENTER:
        if config.types is not None:
            state.chosen_type = config.types[state.selected_type]
        state.step = Step.SCOPE
        state.focus_input = False
    return Outcome.CONTINUE


def _handle_scope(state: AppState, key: KeyEvent, config: Config) -> Outcome:
    scopes = config.scopes or []
    if state.focus_input:
        if key.code is KeyCode.TAB:
            state.focus_input = False
        elif key.code is KeyCode.ENTER:
            custom = state.custom_scope.strip()
            state.chosen_scope = custom or None
            state.step = Step.SUBJECT
            state.focus_input = True
        else:
            state.custom_scope = _edit(state.custom_scope, key)
        return Outcome.CONTINUE

    if _is_char(key, "q") and _unmodified(key):
        return Outcome.QUIT
    if key.code is KeyCode.TAB:
        state.focus_input = True
    elif key.code is KeyCode.DOWN:
        state.selected_scope = next_selectable_scope(scopes, state.selected_scope, 1)
    elif key.code is KeyCode.UP:
        state.selected_scope = next_selectable_scope(scopes, state.selected_scope, -1)
    elif key.code is KeyCode.ENTER:
        if is_scope_selectable(scopes, state.selected_scope):
            state.chosen_scope = (
                None if state.selected_scope == 0 else scopes[state.selected_scope]
            )
            state.step = Step.SUBJECT
            state.focus_input = True
    elif _is_back(key):
        state.step = Step.TYPE
        types = config.types or []
        state.selected_type = (
            types.index(state.chosen_type) if state.chosen_type in types else 0
        )
    return Outcome.CONTINUE


def _enter_body(state: AppState) -> None:
    state.step = Step.BODY
    state.focus_input = True
    state.in_body = False


def _handle_subject(state: AppState, key: KeyEvent, config: Config) -> Outcome:
    if state.focus_input:
        valid = validate_subject(state.subject, config) is None
        if key.code is KeyCode.TAB:
            state.focus_input = False
        elif key.code is KeyCode.ENTER:
            if valid:
                _enter_body(state)
        else:
            state.subject = _edit(state.subject, key)
        return Outcome.CONTINUE

    if key.code is KeyCode.TAB:
        state.focus_input = True
    elif _is_back(key):
        scopes = config.scopes or []
        state.step = Step.SCOPE
        chosen = state.chosen_scope
        state.focus_input = chosen is not None and chosen not in scopes
        state.selected_scope = scopes.index(chosen) if chosen in scopes else 0
        state.custom_scope = chosen or ""
    elif key.code is KeyCode.ENTER:
        if validate_subject(state.subject, config) is None:
            _enter_body(state)
    return Outcome.CONTINUE


def _handle_body(state: AppState, key: KeyEvent) -> Outcome:
    if state.focus_input:
        if key.code is KeyCode.TAB:
            state.focus_input = False
        elif key.code is KeyCode.ENTER:
            if not state.body:
                state.step = Step.BREAKING
                state.focus_input = True
            else:
                state.body_lines.append(state.body)
                state.body = ""
        else:
            state.body = _edit(state.body, key)
        return Outcome.CONTINUE

    if key.code is KeyCode.TAB:
        state.focus_input = True
    elif _is_back(key):
        state.step = Step.SUBJECT
        state.focus_input = True
    elif key.code is KeyCode.ENTER:
        state.step = Step.BREAKING
        state.focus_input = True
    return Outcome.CONTINUE


def _handle_breaking(state: AppState, key: KeyEvent) -> Outcome:
    if state.focus_input:
        if key.code is KeyCode.TAB:
            state.focus_input = False
        elif key.code is KeyCode.ENTER:
            state.step = Step.PREVIEW
            state.focus_issues = False
        else:
            state.breaking = _edit(state.breaking, key)
        return Outcome.CONTINUE

    if key.code is KeyCode.TAB:
        state.focus_input = True
    elif _is_back(key):
        state.step = Step.BODY
        state.focus_input = True
    elif key.code is KeyCode.ENTER:
        state.step = Step.PREVIEW
        state.focus_issues = False
    return Outcome.CONTINUE


def _handle_preview(state: AppState, key: KeyEvent) -> Outcome:
    if state.focus_issues:
        if key.code is KeyCode.TAB:
            state.focus_issues = False
        elif key.code is KeyCode.ENTER:
            return Outcome.CONFIRM
        elif key.code in (KeyCode.CHAR, KeyCode.BACKSPACE):
            state.issues = _edit(state.issues, key)
        elif key.code is KeyCode.LEFT:
            state.focus_issues = False
            state.step = Step.BREAKING
            state.focus_input = True
        return Outcome.CONTINUE

    if key.code is KeyCode.TAB:
        state.focus_issues = True
    elif _is_char(key, "y") or key.code is KeyCode.ENTER:
        return Outcome.CONFIRM
    elif _is_back(key):
        state.step = Step.BREAKING
        state.focus_input = True
    return Outcome.CONTINUE


def handle_key(state: AppState, key: KeyEvent, config: Config) -> Outcome:
    """Apply one key press to ``state`` and say whether the wizard goes on."""
    if (_is_char(key, "c") and key.ctrl) or key.code is KeyCode.ESC:
        return Outcome.QUIT
    match state.step:
        case Step.TYPE:
            return _handle_type(state, key, config)
        case Step.SCOPE:
            return _handle_scope(state, key, config)
        case Step.SUBJECT:
            return _handle_subject(state, key, config)
        case Step.BODY:
            return _handle_body(state, key)
        case Step.BREAKING:
            return _handle_breaking(state, key)
        case Step.PREVIEW:
            return _handle_preview(state, key)
    return Outcome.CONTINUE


def after_event(state: AppState) -> None:
    """Bookkeeping run after every turn of the event loop."""
    if state.step is Step.BODY and not state.in_body:
        state.body = ""
        state.in_body = True
        state.focus_input = True
    if state.step is not Step.BODY:
        state.in_body = False