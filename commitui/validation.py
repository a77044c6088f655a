"""Checks applied to a commit subject line."""

from __future__ import annotations

from commitui.config import (
    Config,
    default_subject_max_length,
    default_subject_no_ending_period,
    default_subject_start_lowercase,
)

EMPTY_MESSAGE = "Subject must not be empty."
PERIOD_MESSAGE = "Subject should not end with a period."
LOWERCASE_MESSAGE = "Subject should start with a lowercase letter."


def validate_subject(subject: str, config: Config) -> str | None:
    """Return the first rule the subject breaks, or None if it is acceptable."""
    max_length = (
        config.subject_max_length
        if config.subject_max_length is not None
        else default_subject_max_length()
    )
    start_lowercase = (
        config.subject_start_lowercase
        if config.subject_start_lowercase is not None
        else default_subject_start_lowercase()
    )
    no_ending_period = (
        config.subject_no_ending_period
        if config.subject_no_ending_period is not None
        else default_subject_no_ending_period()
    )

    if not subject.strip():
        return EMPTY_MESSAGE
    length = len(subject.encode("utf-8"))
    if length > max_length:
        return f"Subject should be {max_length} characters or less (currently {length})."
    if no_ending_period and subject.endswith("."):
        return PERIOD_MESSAGE
    if start_lowercase and subject[0].isupper():
        return LOWERCASE_MESSAGE
    return None