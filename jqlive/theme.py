"""UI theme definitions and selection helpers.

Themes only style the chrome (prompt, placeholder, cursor, help line). Result
colors come from the engine or from the Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette and spacing used by the renderer and layout."""

    name: str
    reset: str
    prompt: str
    query: str
    placeholder: str
    cursor: str
    help_key: str
    help_desc: str
    help_separator: str
    help_margin_top: int = 1
    prompt_text: str = "> "


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    prompt="\033[1;38;5;81m",
    query="\033[38;5;252m",
    placeholder="\033[2;38;5;250m",
    cursor="\033[7m",
    help_key="\033[38;5;229m",
    help_desc="\033[2;38;5;250m",
    help_separator="\033[2;38;5;240m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    prompt="\033[1;38;5;45m",
    query="\033[38;5;153m",
    placeholder="\033[2;38;5;110m",
    cursor="\033[7m",
    help_key="\033[38;5;153m",
    help_desc="\033[2;38;5;110m",
    help_separator="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    prompt="",
    query="",
    placeholder="",
    cursor="\033[7m",
    help_key="",
    help_desc="",
    help_separator="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
