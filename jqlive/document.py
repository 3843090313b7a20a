"""Document loading from files or standard input."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

logger = logging.getLogger(__name__)

STDIN_NAME = "<stdin>"


class DocumentReadError(RuntimeError):
    """A listed file (or standard input) could not be read."""

    def __init__(self, name: str, exc: OSError) -> None:
        reason = exc.strerror or str(exc)
        super().__init__(f"{name}: {reason}")
        self.name = name


def read_document_bytes(paths: Sequence[str | Path], stdin: BinaryIO) -> bytes:
    """Return the raw document: stdin when ``paths`` is empty, else the files in order.

    The first unreadable file aborts the whole load.
    """
    if not paths:
        try:
            return stdin.read()
        except OSError as exc:
            raise DocumentReadError(STDIN_NAME, exc) from exc

    chunks: list[bytes] = []
    for path in paths:
        try:
            chunks.append(Path(path).read_bytes())
        except OSError as exc:
            raise DocumentReadError(str(path), exc) from exc
    return b"".join(chunks)


def read_document(paths: Sequence[str | Path], stdin: BinaryIO) -> str:
    data = read_document_bytes(paths, stdin)
    logger.debug("loaded document: %d bytes from %d source(s)", len(data), len(paths) or 1)
    return data.decode("utf-8", errors="replace")
