"""Terminal front end for the commit-message wizard."""

from __future__ import annotations

import curses
import textwrap
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from commitui.config import Config
from commitui.controller import (
    SEPARATOR_MARK,
    KeyCode,
    KeyEvent,
    Outcome,
    after_event,
    handle_key,
)
from commitui.message import body_text, build_message, preview_text
from commitui.state import TOTAL_STEPS, AppState, Step
from commitui.validation import validate_subject

HIGHLIGHT_SYMBOL = ">> "
POLL_MILLISECONDS = 100

TYPE_TITLE = "Select Commit Type (Enter to confirm, q/Esc/Ctrl+C to quit)"
SCOPE_TITLE = "Select Scope"
CUSTOM_SCOPE_FOCUSED_TITLE = (
    "Or type a custom scope (Tab to switch, Enter to confirm, Esc/Ctrl+C to quit)"
)
CUSTOM_SCOPE_TITLE = (
    "Or type a custom scope (Tab to switch, Enter to confirm, "
    "b/Left to go back, q/Esc/Ctrl+C to quit)"
)
SUBJECT_FOCUSED_TITLE = (
    "Enter Subject (Tab to navigate, Enter to confirm, Esc/Ctrl+C to quit)"
)
SUBJECT_TITLE = (
    "Subject (Tab to edit, b/Left to go back, Enter to confirm, Esc/Ctrl+C to quit)"
)
VALIDATION_TITLE = "Validation Error"
BODY_FOCUSED_TITLE = (
    "Enter Body (Tab to navigate, Enter for new line, Empty line to finish, "
    "Esc/Ctrl+C to quit)"
)
BODY_TITLE = (
    "Body (Tab to edit, b/Left to go back, Enter for new line, "
    "Empty line to finish, Esc/Ctrl+C to quit)"
)
BREAKING_FOCUSED_TITLE = (
    "Enter Breaking Changes (Tab to navigate, Enter to confirm, Esc/Ctrl+C to quit)"
)
BREAKING_TITLE = (
    "Breaking Changes (Tab to edit, b/Left to go back, Enter to confirm, "
    "Esc/Ctrl+C to quit)"
)
PREVIEW_TITLE = (
    "Preview Commit Message (Tab to edit issues, y/Enter to confirm, "
    "b/Left to go back, Esc/Ctrl+C to quit)"
)
ISSUES_FOCUSED_TITLE = "Issue References (Tab to switch, Enter to confirm)"
ISSUES_TITLE = (
    "Issue References (Tab to edit, y/Enter to confirm, b/Left to go back, "
    "Esc/Ctrl+C to quit)"
)


class Color(Enum):
    """Colours used by the screens."""

    DEFAULT = auto()
    CYAN = auto()
    YELLOW = auto()
    RED = auto()
    GREEN = auto()
    BLUE = auto()
    DARK_GRAY = auto()


@dataclass(frozen=True)
class Panel:
    """A bordered box on screen.

    ``height`` of None means the panel takes the space left over; an
    ``overlay_bottom`` panel is drawn over the bottom of the area.
    """

    title: str
    lines: tuple[str, ...]
    text_color: Color = Color.DEFAULT
    border_color: Color = Color.DEFAULT
    selected: int | None = None
    dimmed: frozenset[int] = frozenset()
    wrap: bool = False
    height: int | None = None
    overlay_bottom: bool = False


_SPECIAL_KEYS = {
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
    curses.KEY_ENTER: KeyCode.ENTER,
    curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
}

_SPECIAL_CHARS = {
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\t": KeyCode.TAB,
    "\x1b": KeyCode.ESC,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}


def translate_key(code: int | str) -> KeyEvent:
    """Turn what curses reports for a key press into a KeyEvent."""
    if isinstance(code, int):
        if code in _SPECIAL_KEYS:
            return KeyEvent(_SPECIAL_KEYS[code])
        if 0 <= code < 256:
            return translate_key(chr(code))
        return KeyEvent(KeyCode.OTHER)
    if len(code) != 1:
        raise ValueError(f"expected a single character, got {code!r}")
    if code in _SPECIAL_CHARS:
        return KeyEvent(_SPECIAL_CHARS[code])
    if "\x01" <= code <= "\x1a":
        return KeyEvent(KeyCode.CHAR, chr(ord(code) + ord("a") - 1), ctrl=True)
    if not code.isprintable():
        return KeyEvent(KeyCode.OTHER)
    return KeyEvent(KeyCode.CHAR, code)


def _text_lines(text: str) -> tuple[str, ...]:
    return tuple(text.split("\n"))


def _scope_panels(state: AppState, config: Config) -> list[Panel]:
    scopes = config.scopes or []
    dimmed = frozenset(
        index for index, scope in enumerate(scopes) if scope.startswith(SEPARATOR_MARK)
    )
    scope_list = Panel(
        SCOPE_TITLE,
        tuple(scopes),
        selected=state.selected_scope,
        dimmed=dimmed,
        height=len(scopes) + 2,
    )
    custom = Panel(
        CUSTOM_SCOPE_FOCUSED_TITLE if state.focus_input else CUSTOM_SCOPE_TITLE,
        (state.custom_scope,),
        text_color=Color.YELLOW,
        border_color=Color.GREEN if state.focus_input else Color.DEFAULT,
        height=3,
    )
    return [scope_list, custom]


def _subject_panels(state: AppState, config: Config) -> list[Panel]:
    panels = [
        Panel(
            SUBJECT_FOCUSED_TITLE if state.focus_input else SUBJECT_TITLE,
            (state.subject,),
            text_color=Color.YELLOW,
            border_color=Color.GREEN,
        )
    ]
    problem = validate_subject(state.subject, config)
    if problem is not None:
        panels.append(
            Panel(
                VALIDATION_TITLE,
                (problem,),
                text_color=Color.RED,
                height=3,
                overlay_bottom=True,
            )
        )
    return panels


def _preview_panels(state: AppState) -> list[Panel]:
    preview = Panel(
        PREVIEW_TITLE,
        _text_lines(preview_text(state)),
        text_color=Color.YELLOW,
        border_color=Color.GREEN,
        wrap=True,
    )
    issues = Panel(
        ISSUES_FOCUSED_TITLE if state.focus_issues else ISSUES_TITLE,
        (state.issues,),
        text_color=Color.YELLOW,
        border_color=Color.GREEN if state.focus_issues else Color.DEFAULT,
        height=3,
    )
    return [preview, issues]


def screen_panels(state: AppState, config: Config) -> list[Panel]:
    """The panels making up the screen for the current step."""
    match state.step:
        case Step.TYPE:
            return [
                Panel(TYPE_TITLE, tuple(config.types or ()), selected=state.selected_type)
            ]
        case Step.SCOPE:
            return _scope_panels(state, config)
        case Step.SUBJECT:
            return _subject_panels(state, config)
        case Step.BODY:
            return [
                Panel(
                    BODY_FOCUSED_TITLE if state.focus_input else BODY_TITLE,
                    _text_lines(body_text(state)),
                    text_color=Color.YELLOW,
                    border_color=Color.GREEN,
                    wrap=True,
                )
            ]
        case Step.BREAKING:
            return [
                Panel(
                    BREAKING_FOCUSED_TITLE if state.focus_input else BREAKING_TITLE,
                    (state.breaking,),
                    text_color=Color.RED,
                    border_color=Color.RED,
                )
            ]
        case Step.PREVIEW:
            return _preview_panels(state)
    return []


class _Palette:
    """Lazily allocated curses colour pairs; plain attributes without colour."""

    _CURSES_COLORS = {
        Color.CYAN: curses.COLOR_CYAN,
        Color.YELLOW: curses.COLOR_YELLOW,
        Color.RED: curses.COLOR_RED,
        Color.GREEN: curses.COLOR_GREEN,
        Color.BLUE: curses.COLOR_BLUE,
        Color.DARK_GRAY: curses.COLOR_WHITE,
    }

    def __init__(self) -> None:
        self._pairs: dict[tuple[Color, Color], int] = {}
        self._default_fg = -1
        self._default_bg = -1
        self.enabled = False
        try:
            if curses.has_colors():
                curses.start_color()
                try:
                    curses.use_default_colors()
                except curses.error:
                    self._default_fg = curses.COLOR_WHITE
                    self._default_bg = curses.COLOR_BLACK
                self.enabled = True
        except curses.error:
            self.enabled = False

    def _number(self, color: Color, default: int) -> int:
        return self._CURSES_COLORS.get(color, default)

    def attr(self, fg: Color, bg: Color = Color.DEFAULT) -> int:
        extra = curses.A_DIM if fg is Color.DARK_GRAY else 0
        if not self.enabled:
            return (curses.A_REVERSE if bg is not Color.DEFAULT else 0) | extra
        key = (fg, bg)
        if key not in self._pairs:
            number = len(self._pairs) + 1
            try:
                curses.init_pair(
                    number,
                    self._number(fg, self._default_fg),
                    self._number(bg, self._default_bg),
                )
                self._pairs[key] = curses.color_pair(number)
            except curses.error:
                self._pairs[key] = 0
        return self._pairs[key] | extra


def _put(win: Any, y: int, x: int, text: str, limit: int, attr: int) -> None:
    if limit <= 0 or y < 0 or x < 0:
        return
    try:
        win.addnstr(y, x, text, limit, attr)
    except curses.error:
        pass


def _layout(panels: list[Panel], top: int, height: int) -> list[tuple[Panel, int, int]]:
    stacked = [panel for panel in panels if not panel.overlay_bottom]
    fixed = sum(panel.height for panel in stacked if panel.height is not None)
    fill = max(height - fixed, 0)
    excess = max(fixed - height, 0)
    placed: list[tuple[Panel, int, int]] = []
    y = top
    for panel in stacked:
        if panel.height is None:
            size = fill
        else:
            cut = min(excess, panel.height)
            excess -= cut
            size = panel.height - cut
        placed.append((panel, y, size))
        y += size
    for panel in panels:
        if panel.overlay_bottom:
            size = min(panel.height or height, height)
            placed.append((panel, top + height - size, size))
    return placed


def _wrapped(lines: Iterable[str], width: int) -> list[str]:
    result: list[str] = []
    for line in lines:
        if not line:
            result.append("")
            continue
        result.extend(
            textwrap.wrap(line, width, drop_whitespace=False, replace_whitespace=False)
            or [""]
        )
    return result


def _content(
    panel: Panel, width: int, height: int, palette: _Palette
) -> list[tuple[str, int]]:
    if width <= 0 or height <= 0:
        return []
    if panel.selected is None:
        lines = _wrapped(panel.lines, width) if panel.wrap else list(panel.lines)
        attr = palette.attr(panel.text_color)
        return [(line, attr) for line in lines[:height]]

    padding = " " * len(HIGHLIGHT_SYMBOL)
    start = max(0, panel.selected - height + 1)
    rows: list[tuple[str, int]] = []
    for index, line in enumerate(panel.lines[start:start + height], start):
        if index == panel.selected:
            text = (HIGHLIGHT_SYMBOL + line).ljust(width)
            rows.append((text, palette.attr(Color.DEFAULT, Color.BLUE)))
        elif index in panel.dimmed:
            rows.append((padding + line, palette.attr(Color.DARK_GRAY)))
        else:
            rows.append((padding + line, palette.attr(panel.text_color)))
    return rows


def _draw_panel(
    win: Any, palette: _Palette, panel: Panel, y: int, x: int, height: int, width: int
) -> None:
    if height < 2 or width < 2:
        return
    inner_width = width - 2
    border = palette.attr(panel.border_color)
    top = "┌" + (panel.title + "─" * inner_width)[:inner_width] + "┐"
    _put(win, y, x, top, width, border)
    for row in range(y + 1, y + height - 1):
        _put(win, row, x, " " * width, width, 0)
        _put(win, row, x, "│", 1, border)
        _put(win, row, x + width - 1, "│", 1, border)
    _put(win, y + height - 1, x, "└" + "─" * inner_width + "┘", width, border)
    for offset, (text, attr) in enumerate(
        _content(panel, inner_width, height - 2, palette)
    ):
        _put(win, y + 1 + offset, x + 1, text, inner_width, attr)


def _draw(win: Any, palette: _Palette, state: AppState, config: Config) -> None:
    win.erase()
    rows, cols = win.getmaxyx()
    progress = f"Step {state.step.number()}/{TOTAL_STEPS}"
    _put(win, 0, 0, progress, cols, palette.attr(Color.CYAN))
    for panel, y, height in _layout(screen_panels(state, config), 1, max(rows - 1, 0)):
        _draw_panel(win, palette, panel, y, 0, height, cols)
    win.refresh()


def _setup_terminal(win: Any) -> None:
    for action in (lambda: curses.curs_set(0), curses.raw, lambda: curses.set_escdelay(25)):
        try:
            action()
        except curses.error:
            pass
    win.keypad(True)
    win.timeout(POLL_MILLISECONDS)


def _read_key(win: Any) -> int | str | None:
    try:
        return win.get_wch()
    except curses.error:
        return None


def _event_loop(win: Any, config: Config) -> AppState:
    _setup_terminal(win)
    palette = _Palette()
    state = AppState()
    try:
        while True:
            _draw(win, palette, state, config)
            code = _read_key(win)
            if code is not None:
                if handle_key(state, translate_key(code), config) is not Outcome.CONTINUE:
                    break
            after_event(state)
    finally:
        try:
            curses.noraw()
        except curses.error:
            pass
    return state


def run_tui(config: Config) -> str:
    """Run the wizard in the terminal and return the commit message built."""
    state = curses.wrapper(_event_loop, config)
    return build_message(state)