"""Root controller: session state and event routing.

One controller instance is one interactive session. It owns the original
document, the latest result and the focus state, and it is the only place
that calls the evaluator. Every event is handled to completion before the
caller renders.
"""

from __future__ import annotations

import enum
import logging

from .engine import IDENTITY_EXPRESSION, Evaluator
from .events import Event, KeyPress, Quit, Resize, Submit, ToggleFocus
from .help import help_block_height
from .keys import KeyMap, default_keymap
from .layout import TerminalFrame, compute_panes
from .textinput import TextInput
from .theme import DEFAULT_THEME, UITheme
from .viewport import Viewport

logger = logging.getLogger(__name__)


class Focus(enum.Enum):
    INPUT = "input"
    VIEWPORT = "viewport"


class Controller:
    """Finite-state interaction model for the query/result screen.

    Starts with the input field focused and the document evaluated with the
    identity expression. ``update`` returns ``False`` once a quit event has
    been handled.
    """

    def __init__(
        self,
        document: str,
        evaluator: Evaluator,
        *,
        keymap: KeyMap | None = None,
        theme: UITheme = DEFAULT_THEME,
        text_input: TextInput | None = None,
    ) -> None:
        self._document = document
        self.evaluator = evaluator
        self.keymap = keymap if keymap is not None else default_keymap()
        self.theme = theme
        self.text_input = text_input if text_input is not None else TextInput()
        self.viewport = Viewport()
        self.focus = Focus.INPUT
        self.ready = False
        self.width = 0
        self.height = 0
        self.text_input.focus()
        self.keymap.submit.enabled = True
        self.last_result = self.evaluator.evaluate(self._document, IDENTITY_EXPRESSION)

    @property
    def document(self) -> str:
        return self._document

    def query_expression(self) -> str:
        """Return the trimmed field text, or the identity expression when blank."""
        return self.text_input.value().strip() or IDENTITY_EXPRESSION

    def update(self, event: Event) -> bool:
        match event:
            case Resize(width=width, height=height):
                self._resize(TerminalFrame(width, height))
            case ToggleFocus():
                self._toggle_focus()
            case Submit():
                self._submit()
            case KeyPress(key=key):
                self._forward_key(key)
            case Quit():
                logger.debug("quit requested with expression %r", self.query_expression())
                return False
            case _:
                raise TypeError(f"unsupported event: {event!r}")
        return True

    def _resize(self, frame: TerminalFrame) -> None:
        panes = compute_panes(
            frame,
            input_height=self.text_input.height(),
            help_height=help_block_height(self.theme),
        )
        if not self.ready:
            self.viewport = Viewport(panes.width, panes.viewport_height)
            self.viewport.focused = self.focus is Focus.VIEWPORT
            self.viewport.set_content(self.last_result)
            self.ready = True
            logger.debug("initial layout %dx%d, viewport height %d", frame.width, frame.height, panes.viewport_height)
        else:
            self.viewport.set_size(panes.width, panes.viewport_height)
        self.text_input.width = panes.width
        self.width = panes.width
        self.height = max(0, frame.height)

    def _toggle_focus(self) -> None:
        if self.focus is Focus.INPUT:
            self.text_input.blur()
            self.keymap.submit.enabled = False
            self.viewport.focused = True
            self.focus = Focus.VIEWPORT
        else:
            self.text_input.focus()
            self.keymap.submit.enabled = True
            self.viewport.focused = False
            self.focus = Focus.INPUT
        logger.debug("focus -> %s", self.focus.value)

    def _submit(self) -> None:
        if self.focus is not Focus.INPUT:
            return
        result = self.evaluator.evaluate(self._document, self.query_expression())
        self.last_result = result
        self.viewport.set_content(result)
        self.viewport.goto_top()

    def _forward_key(self, key: str) -> None:
        if self.focus is Focus.INPUT:
            self.text_input.handle_key(key)
        else:
            self.viewport.handle_key(key)
