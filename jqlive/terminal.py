"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching. The UI is drawn on
the error stream so standard output stays free for the final expression.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from .layout import TerminalFrame

CONTROLLING_TTY = "/dev/tty"
FALLBACK_SIZE = TerminalFrame(80, 24)


class SessionError(RuntimeError):
    """The interactive terminal session could not start or keep running."""


def open_input_fd(stdin_fd: int = 0) -> tuple[int, bool]:
    """Return a readable terminal fd and whether the caller must close it.

    When standard input carried the document it is no longer a terminal, so
    keys are read from the controlling terminal instead.
    """
    if os.isatty(stdin_fd):
        return stdin_fd, False
    try:
        return os.open(CONTROLLING_TTY, os.O_RDONLY), True
    except OSError as exc:
        raise SessionError(f"cannot open {CONTROLLING_TTY}: {exc.strerror or exc}") from exc


class TerminalController:
    """Manage terminal mode transitions for one input/output fd pair."""

    def __init__(self, input_fd: int, output_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.input_fd = input_fd
        self.output_fd = output_fd
        try:
            self._saved_tty_state = termios.tcgetattr(input_fd)
        except termios.error as exc:
            raise SessionError(f"terminal input is not a tty: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the hardware cursor hidden."""
        tty.setraw(self.input_fd, termios.TCSAFLUSH)
        os.write(self.output_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen and restore tty state."""
        os.write(self.output_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.input_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def size(self) -> TerminalFrame:
        """Return the current terminal size, preferring the output terminal."""
        for fd in (self.output_fd, self.input_fd):
            try:
                size = os.get_terminal_size(fd)
            except OSError:
                continue
            return TerminalFrame(size.columns, size.lines)
        return FALLBACK_SIZE

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
