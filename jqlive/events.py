"""Closed set of events consumed by the controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .keys import ACTION_QUIT, ACTION_SUBMIT, ACTION_TOGGLE_FOCUS, KeyMap


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class ToggleFocus:
    pass


@dataclass(frozen=True)
class Submit:
    pass


@dataclass(frozen=True)
class KeyPress:
    key: str


Event = Union[Resize, Quit, ToggleFocus, Submit, KeyPress]

_ACTION_EVENTS: dict[str, Event] = {
    ACTION_QUIT: Quit(),
    ACTION_SUBMIT: Submit(),
    ACTION_TOGGLE_FOCUS: ToggleFocus(),
}


def event_for_key(key: str, keymap: KeyMap) -> Event:
    """Map a key token to a controller action event or a plain key press."""
    binding = keymap.binding_for(key)
    if binding is None:
        return KeyPress(key)
    return _ACTION_EVENTS[binding.action]
