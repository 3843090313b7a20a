"""Help line rendering for the key map.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from .ansi import clip_ansi_line
from .keys import KeyBinding, KeyMap
from .theme import PLAIN_THEME, UITheme

SHORT_SEPARATOR = " • "
FULL_COLUMN_GAP = "    "


def _binding_label(binding: KeyBinding, theme: UITheme) -> str:
    return (
        f"{theme.help_key}{binding.help_key}{theme.reset} "
        f"{theme.help_desc}{binding.help_desc}{theme.reset}"
    )


def render_short_help(keymap: KeyMap, theme: UITheme, width: int) -> str:
    """Return the one-line summary of enabled bindings clipped to ``width``."""
    separator = f"{theme.help_separator}{SHORT_SEPARATOR}{theme.reset}"
    line = separator.join(_binding_label(binding, theme) for binding in keymap.short_help())
    return clip_ansi_line(line, width)


def render_full_help(keymap: KeyMap, theme: UITheme = PLAIN_THEME) -> list[str]:
    """Return multi-line help with one row per binding, columns side by side."""
    columns = keymap.full_help()
    key_width = max(
        (len(binding.help_key) for column in columns for binding in column),
        default=0,
    )
    rendered_columns: list[list[str]] = []
    for column in columns:
        rendered_columns.append(
            [
                f"{theme.help_key}{binding.help_key.ljust(key_width)}{theme.reset}  "
                f"{theme.help_desc}{binding.help_desc}{theme.reset}"
                for binding in column
            ]
        )
    row_count = max((len(column) for column in rendered_columns), default=0)
    rows: list[str] = []
    for row in range(row_count):
        cells = [column[row] if row < len(column) else "" for column in rendered_columns]
        rows.append(FULL_COLUMN_GAP.join(cells).rstrip())
    return rows


def help_block_height(theme: UITheme) -> int:
    """Return rows taken by the help block: the top margin plus one line."""
    return theme.help_margin_top + 1
