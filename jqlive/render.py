"""Frame composition for the interactive session.

``build_frame`` is pure; ``write_frame`` pushes the result to the terminal
in a single write so a frame is never shown half-drawn.
"""

from __future__ import annotations

import os

from .ansi import SGR_RESET, clip_ansi_line
from .controller import Controller
from .help import render_short_help

CURSOR_HOME = "\033[H"
CLEAR_TO_EOL = "\033[K"
CLEAR_TO_END = "\033[J"


def build_screen_rows(controller: Controller) -> list[str]:
    """Return the rows of one frame, top to bottom."""
    theme = controller.theme
    width = controller.width
    rows: list[str] = []

    input_row = controller.text_input.view(theme)
    rows.append(clip_ansi_line(input_row, width) if width > 0 else input_row)
    if controller.ready:
        rows.extend(controller.viewport.view())
    rows.extend("" for _ in range(theme.help_margin_top))
    rows.append(render_short_help(controller.keymap, theme, width if width > 0 else 1 << 30))
    if controller.height > 0:
        # Never write past the last row; the terminal would scroll.
        rows = rows[: controller.height]
    return rows


def build_frame(controller: Controller) -> str:
    out: list[str] = [CURSOR_HOME]
    rows = build_screen_rows(controller)
    for idx, row in enumerate(rows):
        out.append(row)
        if "\033" in row:
            out.append(SGR_RESET)
        out.append(CLEAR_TO_EOL)
        if idx < len(rows) - 1:
            out.append("\r\n")
    out.append(CLEAR_TO_END)
    return "".join(out)


def write_frame(fd: int, frame: str) -> None:
    data = frame.encode("utf-8", errors="replace")
    while data:
        written = os.write(fd, data)
        data = data[written:]
