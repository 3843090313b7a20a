"""Controller-level key bindings and help summaries.

Only three actions live here: quit, eval (submit) and focus toggling. Every
other key is forwarded to the focused widget untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field

ACTION_QUIT = "quit"
ACTION_SUBMIT = "submit"
ACTION_TOGGLE_FOCUS = "toggle_focus"


@dataclass
class KeyBinding:
    """One named action with its trigger tokens and help label.

    ``enabled`` is the only mutable field; the controller flips it for the
    submit binding when focus moves between panes.
    """

    action: str
    keys: tuple[str, ...]
    help_key: str
    help_desc: str
    enabled: bool = True


@dataclass
class KeyMap:
    quit: KeyBinding = field(
        default_factory=lambda: KeyBinding(ACTION_QUIT, ("CTRL_C",), "ctrl+c", "quit")
    )
    submit: KeyBinding = field(
        default_factory=lambda: KeyBinding(ACTION_SUBMIT, ("ENTER",), "enter", "eval")
    )
    toggle_focus: KeyBinding = field(
        default_factory=lambda: KeyBinding(ACTION_TOGGLE_FOCUS, ("TAB",), "tab", "focus next pane")
    )

    def bindings(self) -> tuple[KeyBinding, ...]:
        return (self.quit, self.submit, self.toggle_focus)

    def binding_for(self, key: str) -> KeyBinding | None:
        """Return the binding that owns ``key``.

        Disabled bindings still own their keys: a disabled submit key is
        swallowed by the controller rather than leaking into a widget.
        """
        for binding in self.bindings():
            if key in binding.keys:
                return binding
        return None

    def short_help(self) -> list[KeyBinding]:
        return [binding for binding in self.bindings() if binding.enabled]

    def full_help(self) -> list[list[KeyBinding]]:
        return [self.short_help()]


def default_keymap() -> KeyMap:
    return KeyMap()


__all__ = [
    "ACTION_QUIT",
    "ACTION_SUBMIT",
    "ACTION_TOGGLE_FOCUS",
    "KeyBinding",
    "KeyMap",
    "default_keymap",
]
