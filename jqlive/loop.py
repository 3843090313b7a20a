"""Main interactive event loop for the terminal UI.

Polls the terminal size, turns raw keys into controller events and renders
one frame after each event has been fully handled.
"""

from __future__ import annotations

import logging
import termios
from collections.abc import Callable
from dataclasses import dataclass

from .controller import Controller
from .events import Resize, event_for_key
from .input import read_key
from .layout import TerminalFrame
from .render import build_frame, write_frame
from .terminal import SessionError, TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 120


def run_main_loop(
    controller: Controller,
    terminal: TerminalController,
    timing: RuntimeLoopTiming,
    *,
    key_reader: Callable[..., str] = read_key,
) -> None:
    """Run the session until the controller handles a quit event.

    A size change is delivered as a ``Resize`` event before the next key; the
    very first iteration always produces one so the layout gets initialized.
    Terminal I/O failures are raised as :class:`SessionError`.
    """
    last_frame: TerminalFrame | None = None
    dirty = True
    try:
        with terminal.raw_mode():
            while True:
                frame = terminal.size()
                if frame != last_frame:
                    last_frame = frame
                    controller.update(Resize(frame.width, frame.height))
                    dirty = True

                if dirty:
                    write_frame(terminal.output_fd, build_frame(controller))
                    dirty = False

                key = key_reader(terminal.input_fd, timeout_ms=timing.key_poll_ms)
                if key == "":
                    continue
                if not controller.update(event_for_key(key, controller.keymap)):
                    return
                dirty = True
    except (OSError, termios.error) as exc:
        logger.exception("terminal session failed")
        raise SessionError(f"terminal session failed: {exc}") from exc
