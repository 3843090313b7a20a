"""Scrollable window over the current evaluation result.

The viewport owns its scroll offsets. Setting new content clamps the offsets
into range but never jumps back to the top; callers decide when to do that.
Resizing keeps both offsets untouched.
"""

from __future__ import annotations

from .ansi import SGR_RESET, display_width, sanitize_terminal_text, slice_ansi_line, split_lines

HORIZONTAL_STEP = 8


class Viewport:
    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.y_offset = 0
        self.x_offset = 0
        self.focused = False
        self._content = ""
        self._lines: list[str] = [""]
        self._max_line_width = 0

    @property
    def content(self) -> str:
        return self._content

    @property
    def lines(self) -> list[str]:
        return self._lines

    def set_content(self, content: str) -> None:
        """Replace the buffer; scroll offsets are only clamped."""
        self._content = content
        self._lines = split_lines(sanitize_terminal_text(content))
        self._max_line_width = max(display_width(line) for line in self._lines)
        self._clamp()

    def set_size(self, width: int, height: int) -> None:
        """Change dimensions only; offsets are kept as they are."""
        self.width = max(0, width)
        self.height = max(0, height)

    def max_y_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    def max_x_offset(self) -> int:
        return max(0, self._max_line_width - self.width)

    def _clamp(self) -> None:
        self.y_offset = max(0, min(self.y_offset, self.max_y_offset()))
        self.x_offset = max(0, min(self.x_offset, self.max_x_offset()))

    def at_top(self) -> bool:
        return self.y_offset <= 0

    def at_bottom(self) -> bool:
        return self.y_offset >= self.max_y_offset()

    def goto_top(self) -> None:
        self.y_offset = 0
        self.x_offset = 0

    def goto_bottom(self) -> None:
        self.y_offset = self.max_y_offset()

    def scroll_down(self, rows: int) -> None:
        self.y_offset = min(self.max_y_offset(), self.y_offset + max(0, rows))

    def scroll_up(self, rows: int) -> None:
        self.y_offset = max(0, self.y_offset - max(0, rows))

    def scroll_right(self, cols: int) -> None:
        self.x_offset = min(self.max_x_offset(), self.x_offset + max(0, cols))

    def scroll_left(self, cols: int) -> None:
        self.x_offset = max(0, self.x_offset - max(0, cols))

    def scroll_percent(self) -> float:
        max_offset = self.max_y_offset()
        if max_offset <= 0:
            return 100.0
        return min(100.0, (self.y_offset / max_offset) * 100.0)

    def handle_key(self, key: str) -> bool:
        """Apply a navigation key; return whether the view moved."""
        if not self.focused:
            return False

        before = (self.y_offset, self.x_offset)
        page = max(1, self.height)
        half = max(1, self.height // 2)
        if key in {"DOWN", "j"}:
            self.scroll_down(1)
        elif key in {"UP", "k"}:
            self.scroll_up(1)
        elif key in {"PAGE_DOWN", "f", " "}:
            self.scroll_down(page)
        elif key in {"PAGE_UP", "b"}:
            self.scroll_up(page)
        elif key in {"CTRL_D", "d"}:
            self.scroll_down(half)
        elif key in {"CTRL_U", "u"}:
            self.scroll_up(half)
        elif key in {"HOME", "g"}:
            self.y_offset = 0
        elif key in {"END", "G"}:
            self.goto_bottom()
        elif key in {"RIGHT", "l"}:
            self.scroll_right(HORIZONTAL_STEP)
        elif key in {"LEFT", "h"}:
            self.scroll_left(HORIZONTAL_STEP)
        else:
            return False
        return (self.y_offset, self.x_offset) != before

    def view(self) -> list[str]:
        """Return exactly ``height`` rows clipped to ``width`` columns."""
        rows: list[str] = []
        for row in range(self.height):
            idx = self.y_offset + row
            if idx >= len(self._lines):
                rows.append("")
                continue
            text = slice_ansi_line(self._lines[idx], self.x_offset, self.width)
            if "\033" in text:
                text += SGR_RESET
            rows.append(text)
        return rows
