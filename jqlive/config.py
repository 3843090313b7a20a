"""Persistent JSON config and resolved runtime settings.

The config file is optional. All access is defensive: malformed or missing
config and wrongly typed values fall back to defaults. Command-line flags
override anything read from the file.
"""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass
from pathlib import Path

from .engine import COLOR_MODE_ENGINE, COLOR_MODE_NONE, COLOR_MODES, DEFAULT_ENGINE
from .highlight import DEFAULT_STYLE
from .theme import normalize_theme_name

CONFIG_ENV_VAR = "JQLIVE_CONFIG"
LOG_FILE_ENV_VAR = "JQLIVE_LOG_FILE"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "jqlive.json"


@dataclass(frozen=True)
class Settings:
    engine: str = DEFAULT_ENGINE
    color: str = COLOR_MODE_ENGINE
    style: str = DEFAULT_STYLE
    theme: str = "default"
    log_file: Path | None = None

    @property
    def no_color(self) -> bool:
        return self.color == COLOR_MODE_NONE


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    target = path if path is not None else config_path()
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _string_value(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _color_value(data: dict[str, object]) -> str | None:
    value = _string_value(data, "color")
    if value is None:
        return None
    value = value.lower()
    return value if value in COLOR_MODES else None


def resolve_settings(args: argparse.Namespace, data: dict[str, object] | None = None) -> Settings:
    """Merge CLI ``args`` over config ``data`` over defaults."""
    if data is None:
        data = {}
    defaults = Settings()

    color = getattr(args, "color", None) or _color_value(data) or defaults.color
    if getattr(args, "no_color", False):
        color = COLOR_MODE_NONE

    log_file_text = (
        getattr(args, "log_file", None)
        or os.environ.get(LOG_FILE_ENV_VAR)
        or _string_value(data, "log_file")
    )

    return Settings(
        engine=getattr(args, "engine", None) or _string_value(data, "engine") or defaults.engine,
        color=color,
        style=getattr(args, "style", None) or _string_value(data, "style") or defaults.style,
        theme=normalize_theme_name(getattr(args, "theme", None) or _string_value(data, "theme")),
        log_file=Path(log_file_text).expanduser() if log_file_text else None,
    )
