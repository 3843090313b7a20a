"""External query engine access.

The controller only knows the :class:`Evaluator` interface. :class:`JqEngine`
is the production implementation that shells out to ``jq`` once per
submission, blocking until it exits.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from typing import Protocol

from .highlight import colorize_result

logger = logging.getLogger(__name__)

DEFAULT_ENGINE = "jq"
IDENTITY_EXPRESSION = "."

COLOR_MODE_ENGINE = "engine"
COLOR_MODE_PYGMENTS = "pygments"
COLOR_MODE_NONE = "none"
COLOR_MODES: tuple[str, ...] = (COLOR_MODE_ENGINE, COLOR_MODE_PYGMENTS, COLOR_MODE_NONE)


class EngineNotFoundError(RuntimeError):
    """Raised when the engine binary cannot be resolved on ``PATH``."""

    def __init__(self, binary: str) -> None:
        super().__init__(f"'{binary}': command not found")
        self.binary = binary


class Evaluator(Protocol):
    def evaluate(self, document: str, expression: str) -> str:
        """Return the engine's combined output for ``expression`` over ``document``."""
        ...


def find_engine(binary: str = DEFAULT_ENGINE) -> str:
    """Resolve ``binary`` on ``PATH`` and return its full path."""
    resolved = shutil.which(binary)
    if resolved is None:
        raise EngineNotFoundError(binary)
    return resolved


def color_args_for_mode(color_mode: str) -> tuple[str, ...]:
    if color_mode == COLOR_MODE_ENGINE:
        return ("--color-output",)
    return ("--monochrome-output",)


class JqEngine:
    """Run ``jq`` with the document on stdin and stderr merged into stdout.

    Diagnostics are part of the result on purpose: a malformed filter shows
    the engine's error text in the viewport. The exit status is only logged.
    """

    def __init__(
        self,
        binary: str = DEFAULT_ENGINE,
        color_mode: str = COLOR_MODE_ENGINE,
        style: str | None = None,
    ) -> None:
        self.binary = binary
        self.color_mode = color_mode
        self.style = style
        self.last_returncode: int | None = None

    def command(self, expression: str) -> list[str]:
        return [self.binary, *color_args_for_mode(self.color_mode), expression or IDENTITY_EXPRESSION]

    def evaluate(self, document: str, expression: str) -> str:
        command = self.command(expression)
        started = time.monotonic()
        try:
            proc = subprocess.run(
                command,
                input=document.encode("utf-8"),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as exc:
            self.last_returncode = None
            logger.warning("failed to run %s: %s", command[0], exc)
            return f"{command[0]}: {exc.strerror or exc}\n"

        self.last_returncode = proc.returncode
        output = proc.stdout.decode("utf-8", errors="replace")
        logger.debug(
            "evaluated %r: exit=%d bytes=%d in %.3fs",
            expression,
            proc.returncode,
            len(proc.stdout),
            time.monotonic() - started,
        )
        if self.color_mode == COLOR_MODE_PYGMENTS:
            output = colorize_result(output, self.style or "")
        return output
