"""Single-line text field used to edit the query expression."""

from __future__ import annotations

from .ansi import SGR_RESET, char_display_width, display_width
from .theme import UITheme

DEFAULT_PLACEHOLDER = "jq filter"


def _is_word_char(ch: str) -> bool:
    return not ch.isspace()


def _is_text_token(key: str) -> bool:
    # Named tokens are ASCII words; a decoded keystroke may be several chars.
    if len(key) != 1 and key.isascii():
        return False
    return key.isprintable()


class TextInput:
    """Editable text with a cursor, a placeholder and a focus flag.

    Keys are only applied while focused. ``width`` is the full row width the
    field may draw into, prompt included.
    """

    def __init__(self, placeholder: str = DEFAULT_PLACEHOLDER, value: str = "") -> None:
        self.placeholder = placeholder
        self._value = value
        self.cursor = len(value)
        self.focused = False
        self.width = 0
        self._offset = 0

    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value
        self.cursor = len(value)

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def handle_key(self, key: str) -> bool:
        """Apply one key token; return whether the field changed."""
        if not self.focused:
            return False

        before = (self._value, self.cursor)
        value = self._value
        cursor = self.cursor
        if key == "LEFT":
            cursor = max(0, cursor - 1)
        elif key == "RIGHT":
            cursor = min(len(value), cursor + 1)
        elif key in {"HOME", "CTRL_A"}:
            cursor = 0
        elif key in {"END", "CTRL_E"}:
            cursor = len(value)
        elif key == "ALT_LEFT":
            cursor = self._previous_word_start()
        elif key == "ALT_RIGHT":
            cursor = self._next_word_end()
        elif key == "BACKSPACE":
            if cursor > 0:
                value = value[: cursor - 1] + value[cursor:]
                cursor -= 1
        elif key in {"DELETE", "CTRL_D"}:
            value = value[:cursor] + value[cursor + 1 :]
        elif key == "CTRL_U":
            value = value[cursor:]
            cursor = 0
        elif key == "CTRL_K":
            value = value[:cursor]
        elif key in {"CTRL_W", "ALT_BACKSPACE"}:
            start = self._previous_word_start()
            value = value[:start] + value[cursor:]
            cursor = start
        elif _is_text_token(key):
            value = value[:cursor] + key + value[cursor:]
            cursor += len(key)
        else:
            return False

        self._value = value
        self.cursor = cursor
        return (self._value, self.cursor) != before

    def _previous_word_start(self) -> int:
        pos = self.cursor
        while pos > 0 and not _is_word_char(self._value[pos - 1]):
            pos -= 1
        while pos > 0 and _is_word_char(self._value[pos - 1]):
            pos -= 1
        return pos

    def _next_word_end(self) -> int:
        pos = self.cursor
        size = len(self._value)
        while pos < size and not _is_word_char(self._value[pos]):
            pos += 1
        while pos < size and _is_word_char(self._value[pos]):
            pos += 1
        return pos

    def height(self) -> int:
        return 1

    def _visible_window(self, text_cols: int) -> tuple[int, int]:
        """Return the ``[start, end)`` slice of the value that keeps the cursor visible."""
        if self.cursor < self._offset:
            self._offset = self.cursor
        # Reserve one cell for the cursor block at the end of the text.
        while self._offset < self.cursor and (
            display_width(self._value[self._offset : self.cursor]) + 1 > text_cols
        ):
            self._offset += 1
        end = self._offset
        used = 0
        while end < len(self._value):
            w = char_display_width(self._value[end], used)
            if used + w > text_cols:
                break
            used += w
            end += 1
        return self._offset, end

    def view(self, theme: UITheme) -> str:
        """Render the prompt and the field for one terminal row."""
        prompt = theme.prompt_text
        text_cols = max(1, self.width - display_width(prompt)) if self.width > 0 else 1 << 30
        out = [f"{theme.prompt}{prompt}{theme.reset}"]

        if not self._value:
            if self.focused:
                first = self.placeholder[:1] or " "
                rest = self.placeholder[1:]
                out.append(f"{theme.cursor}{theme.placeholder}{first}{SGR_RESET}")
                if rest:
                    out.append(f"{theme.placeholder}{rest[: max(0, text_cols - 1)]}{theme.reset}")
            else:
                out.append(f"{theme.placeholder}{self.placeholder[:text_cols]}{theme.reset}")
            return "".join(out)

        start, end = self._visible_window(text_cols)
        before = self._value[start : self.cursor]
        if not self.focused:
            out.append(f"{theme.query}{self._value[start:end]}{theme.reset}")
            return "".join(out)

        if self.cursor < len(self._value):
            under = self._value[self.cursor]
            after = self._value[self.cursor + 1 : end]
        else:
            under = " "
            after = ""
        out.append(f"{theme.query}{before}{theme.reset}")
        out.append(f"{theme.cursor}{under}{SGR_RESET}")
        out.append(f"{theme.query}{after}{theme.reset}")
        return "".join(out)
