"""Pane geometry derived from the terminal size.

The screen is stacked top to bottom: the query field, the result viewport,
then the help block (top margin plus one help line).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TerminalFrame:
    width: int
    height: int


@dataclass(frozen=True)
class PaneSizes:
    width: int
    input_height: int
    viewport_height: int
    help_height: int


def compute_panes(frame: TerminalFrame, input_height: int, help_height: int) -> PaneSizes:
    """Give the viewport every row not used by the input field and the help block."""
    margin = input_height + help_height
    return PaneSizes(
        width=max(0, frame.width),
        input_height=input_height,
        viewport_height=max(0, frame.height - margin),
        help_height=help_height,
    )
