"""ANSI-aware text measurement and line shaping for the result viewport.

Engine output arrives colorized, so every width decision has to skip escape
sequences. Wide characters and tabs are measured in terminal cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
SGR_RESET = "\033[0m"
TAB_STOP = 8

_UNSAFE_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for ``ch`` drawn at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies, ignoring escapes."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def sanitize_terminal_text(text: str) -> str:
    """Escape control bytes that would move the cursor or ring the bell.

    Newlines, tabs and well-formed CSI sequences (the engine's colors) are
    kept; everything else in C0/C1 is rendered as a visible ``\\xNN`` escape.
    """
    if _UNSAFE_CONTROL_RE.search(text) is None:
        return text

    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        code = ord(ch)
        if ch not in {"\n", "\t"} and (code < 32 or code == 127 or 0x80 <= code <= 0x9F):
            out.append(f"\\x{code:02x}")
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim and cost no width. Tabs are expanded so
    the clip point matches what the terminal would draw.
    """
    return slice_ansi_line(text, 0, max_cols)


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return ``max_cols`` display columns of ``text`` starting at ``start_cols``.

    When the window starts after a color sequence, the most recent SGR sequence
    is replayed so the visible part keeps its styling.
    """
    if max_cols <= 0 or not text:
        return ""
    start_cols = max(0, start_cols)

    out: list[str] = []
    col = 0
    shown = 0
    i = 0
    n = len(text)
    pending_sgr = ""
    styled = False
    while i < n and shown < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                if seq.endswith("m"):
                    pending_sgr = seq
                    if col >= start_cols:
                        out.append(seq)
                        styled = True
                elif col >= start_cols:
                    out.append(seq)
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w <= start_cols:
            col += w
            i += 1
            continue
        if not styled and pending_sgr:
            out.append(pending_sgr)
            styled = True
        if ch == "\t":
            # A tab straddling the window edge only contributes its visible cells.
            visible = min(w, col + w - start_cols, max_cols - shown)
            out.append(" " * visible)
            shown += visible
            col += w
            i += 1
            continue
        if col < start_cols:
            # Wide character cut by the left edge.
            out.append(" ")
            shown += 1
            col += w
            i += 1
            continue
        if shown + w > max_cols:
            break
        out.append(ch)
        shown += w
        col += w
        i += 1

    return "".join(out)


def split_lines(text: str) -> list[str]:
    """Split content into display lines without terminators.

    Only ``\\n`` ends a line. A trailing newline does not produce an extra
    empty row; empty content is a single empty row.
    """
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines
