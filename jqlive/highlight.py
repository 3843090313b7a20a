"""Pygments colorization for monochrome engine output.

Used when the color mode is ``pygments``: the engine is asked for plain
output and results that form a valid JSON stream are highlighted here.
Anything else (diagnostics, raw strings) is shown as-is.
"""

from __future__ import annotations

import json

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, Terminal256Formatter] = {}
_LEXER = JsonLexer(ensurenl=False)
_DECODER = json.JSONDecoder()


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def is_json_stream(text: str) -> bool:
    """Return whether ``text`` is one or more whitespace-separated JSON values."""
    idx = 0
    size = len(text)
    seen = False
    while True:
        while idx < size and text[idx].isspace():
            idx += 1
        if idx >= size:
            return seen
        try:
            _, idx = _DECODER.raw_decode(text, idx)
        except ValueError:
            return False
        seen = True


def colorize_result(text: str, style: str = DEFAULT_STYLE) -> str:
    """Highlight a JSON result; text with existing escapes or non-JSON is untouched."""
    if not text or "\x1b[" in text or not is_json_stream(text):
        return text
    return pygments_highlight(text, _LEXER, _formatter_for_style(normalize_style(style)))
