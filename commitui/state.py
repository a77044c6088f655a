"""State of the commit-message wizard."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

TOTAL_STEPS = 6


class Step(Enum):
    """Screens of the wizard, in order."""

    TYPE = 1
    SCOPE = 2
    SUBJECT = 3
    BODY = 4
    BREAKING = 5
    PREVIEW = 6

    def number(self) -> int:
        """One-based position of the step, as shown in the progress line."""
        return self.value


@dataclass
class AppState:
    """Everything the user has chosen or typed so far."""

    step: Step = Step.TYPE
    selected_type: int = 0
    chosen_type: str | None = None

    selected_scope: int = 0
    custom_scope: str = ""
    focus_input: bool = False
    chosen_scope: str | None = None

    subject: str = ""

    body: str = ""
    body_lines: list[str] = field(default_factory=list)
    in_body: bool = False

    breaking: str = ""

    issues: str = ""
    focus_issues: bool = False