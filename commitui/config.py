"""Configuration: commit types, scopes and subject validation rules."""

from __future__ import annotations

import sys
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Callable

import platformdirs

APP_NAME = "commiTUI"
CONFIG_FILE_NAME = "config.toml"
LOCAL_CONFIG_PATHS = ("./commitui.toml",)


class ConfigError(ValueError):
    """Raised when configuration text cannot be parsed or has wrong values."""


def default_types() -> list[str]:
    """Commit types offered when no configuration overrides them."""
    return [
        "feat", "fix", "docs", "style", "refactor",
        "perf", "test", "build", "ci", "chore", "revert",
    ]


def default_scopes() -> list[str]:
    """Scopes offered when no configuration overrides them."""
    return [
        "no scope",
        "core", "api", "ui", "auth", "db",
        "test", "build", "deps", "ci",
        "────────────",
        "config", "infra", "release", "chore", "perf",
        "style", "lint", "i18n", "analytics", "security",
        "logging", "devops", "deploy", "assets", "mock", "example",
    ]


def default_subject_max_length() -> int:
    return 72


def default_subject_start_lowercase() -> bool:
    return True


def default_subject_no_ending_period() -> bool:
    return True


def global_config_path() -> Path:
    """Location of the per-user configuration file."""
    return Path(platformdirs.user_config_dir()) / APP_NAME / CONFIG_FILE_NAME


def _string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key!r} must be an array of strings")
    return list(value)


def _non_negative_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{key!r} must be a non-negative integer")
    return value


def _boolean(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key!r} must be a boolean")
    return value


_FIELD_CHECKS: dict[str, Callable[[str, Any], Any]] = {
    "types": _string_list,
    "scopes": _string_list,
    "subject_max_length": _non_negative_int,
    "subject_start_lowercase": _boolean,
    "subject_no_ending_period": _boolean,
}


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


@dataclass
class Config:
    """Settings; a field left as None was not set by that source."""

    types: list[str] | None = None
    scopes: list[str] | None = None
    subject_max_length: int | None = None
    subject_start_lowercase: bool | None = None
    subject_no_ending_period: bool | None = None

    def merge(self, other: Config) -> None:
        """Overwrite every field that ``other`` sets."""
        for field in fields(self):
            value = getattr(other, field.name)
            if value is not None:
                setattr(self, field.name, value)

    @classmethod
    def default(cls) -> Config:
        """A configuration with every field set to its default."""
        return cls(
            types=default_types(),
            scopes=default_scopes(),
            subject_max_length=default_subject_max_length(),
            subject_start_lowercase=default_subject_start_lowercase(),
            subject_no_ending_period=default_subject_no_ending_period(),
        )

    @classmethod
    def from_toml(cls, text: str) -> Config:
        """Parse TOML text; unknown keys are ignored."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(str(exc)) from exc
        values = {
            key: check(key, data[key])
            for key, check in _FIELD_CHECKS.items()
            if key in data
        }
        return cls(**values)

    @classmethod
    def load(
        cls,
        global_path: str | Path | None = None,
        local_paths: Iterable[str | Path] | None = None,
    ) -> Config:
        """Defaults, then the global file, then the first usable local file."""
        config = cls.default()

        path = Path(global_path) if global_path is not None else global_config_path()
        if path.exists():
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                _warn(f"Could not read global config at {path}")
            else:
                try:
                    config.merge(cls.from_toml(content))
                except ConfigError as exc:
                    _warn(f"Could not parse global config at {path}: {exc}")

        for local in LOCAL_CONFIG_PATHS if local_paths is None else local_paths:
            try:
                content = Path(local).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                continue
            try:
                local_config = cls.from_toml(content)
            except ConfigError as exc:
                _warn(f"Could not parse local config at {local}: {exc}")
                continue
            config.merge(local_config)
            return config

        return config