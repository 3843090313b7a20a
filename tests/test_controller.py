"""State-machine tests for the root controller.

A fake evaluator stands in for the engine so no process is spawned.
"""

from __future__ import annotations

import unittest

from jqlive.controller import Controller, Focus
from jqlive.events import KeyPress, Quit, Resize, Submit, ToggleFocus, event_for_key
from jqlive.help import help_block_height
from jqlive.theme import DEFAULT_THEME

DOCUMENT = '{"a":1,"b":2}'


class FakeEvaluator:
    def __init__(self, outputs: dict[str, str] | None = None) -> None:
        self.outputs = outputs or {}
        self.calls: list[tuple[str, str]] = []

    def evaluate(self, document: str, expression: str) -> str:
        self.calls.append((document, expression))
        if expression in self.outputs:
            return self.outputs[expression]
        return "".join(f"{expression} row {idx}\n" for idx in range(50))


def _ready_controller(evaluator: FakeEvaluator | None = None) -> Controller:
    controller = Controller(DOCUMENT, evaluator or FakeEvaluator())
    controller.update(Resize(80, 24))
    return controller


def _type(controller: Controller, text: str) -> None:
    for ch in text:
        controller.update(KeyPress(ch))


class InitialStateTests(unittest.TestCase):
    def test_starts_input_focused_with_identity_result(self) -> None:
        evaluator = FakeEvaluator({".": '{\n  "a": 1,\n  "b": 2\n}\n'})
        controller = Controller(DOCUMENT, evaluator)

        self.assertIs(controller.focus, Focus.INPUT)
        self.assertFalse(controller.ready)
        self.assertTrue(controller.text_input.focused)
        self.assertTrue(controller.keymap.submit.enabled)
        self.assertEqual(evaluator.calls, [(DOCUMENT, ".")])
        self.assertEqual(controller.last_result, '{\n  "a": 1,\n  "b": 2\n}\n')


class ResizeTests(unittest.TestCase):
    def test_first_resize_initializes_viewport_once(self) -> None:
        controller = Controller(DOCUMENT, FakeEvaluator())
        controller.update(Resize(80, 24))

        margin = controller.text_input.height() + help_block_height(DEFAULT_THEME)
        self.assertTrue(controller.ready)
        self.assertEqual(controller.viewport.width, 80)
        self.assertEqual(controller.viewport.height, 24 - margin)
        self.assertEqual(controller.viewport.content, controller.last_result)
        self.assertEqual(controller.text_input.width, 80)

    def test_later_resizes_keep_content_and_scroll(self) -> None:
        controller = _ready_controller()
        controller.update(ToggleFocus())
        controller.update(KeyPress("PAGE_DOWN"))
        viewport = controller.viewport
        offset = viewport.y_offset
        self.assertGreater(offset, 0)

        controller.update(Resize(100, 30))

        self.assertIs(controller.viewport, viewport)
        self.assertEqual(viewport.y_offset, offset)
        self.assertEqual(viewport.content, controller.last_result)
        self.assertEqual(viewport.width, 100)
        self.assertEqual(controller.text_input.width, 100)

    def test_growing_terminal_after_end_keeps_bottom_offset(self) -> None:
        controller = _ready_controller()
        controller.update(ToggleFocus())
        controller.update(KeyPress("END"))
        self.assertEqual(controller.viewport.y_offset, 29)

        controller.update(Resize(80, 40))

        self.assertEqual(controller.viewport.y_offset, 29)
        self.assertEqual(controller.viewport.height, 37)

    def test_tiny_terminal_gives_empty_viewport(self) -> None:
        controller = Controller(DOCUMENT, FakeEvaluator())
        controller.update(Resize(10, 2))
        self.assertEqual(controller.viewport.height, 0)


class EmptyDocumentTests(unittest.TestCase):
    def test_session_over_empty_document_stays_interactive(self) -> None:
        evaluator = FakeEvaluator({".": "", ".a": ""})
        controller = Controller("", evaluator)
        self.assertEqual(evaluator.calls, [("", ".")])
        self.assertEqual(controller.last_result, "")

        self.assertTrue(controller.update(Resize(80, 24)))
        self.assertTrue(controller.ready)
        self.assertEqual(controller.viewport.view(), [""] * controller.viewport.height)

        _type(controller, ".a")
        self.assertTrue(controller.update(Submit()))
        self.assertEqual(evaluator.calls[-1], ("", ".a"))
        self.assertEqual(controller.viewport.y_offset, 0)
        self.assertEqual(controller.document, "")


class FocusTests(unittest.TestCase):
    def test_toggles_alternate_strictly(self) -> None:
        controller = _ready_controller()
        for count in range(1, 8):
            controller.update(ToggleFocus())
            expected = Focus.VIEWPORT if count % 2 else Focus.INPUT
            self.assertIs(controller.focus, expected)

    def test_leaving_input_disables_submit_and_capture(self) -> None:
        controller = _ready_controller()
        controller.update(ToggleFocus())

        self.assertFalse(controller.text_input.focused)
        self.assertTrue(controller.viewport.focused)
        self.assertFalse(controller.keymap.submit.enabled)

        controller.update(ToggleFocus())
        self.assertTrue(controller.text_input.focused)
        self.assertFalse(controller.viewport.focused)
        self.assertTrue(controller.keymap.submit.enabled)


class SubmitTests(unittest.TestCase):
    def test_submit_evaluates_trimmed_expression_against_original_document(self) -> None:
        evaluator = FakeEvaluator({".a": "1\n"})
        controller = _ready_controller(evaluator)
        _type(controller, "  .a  ")
        controller.update(Submit())

        self.assertEqual(evaluator.calls[-1], (DOCUMENT, ".a"))
        self.assertEqual(controller.last_result, "1\n")
        self.assertEqual(controller.viewport.content, "1\n")
        self.assertEqual(controller.document, DOCUMENT)

    def test_blank_expression_is_identity(self) -> None:
        evaluator = FakeEvaluator()
        controller = _ready_controller(evaluator)
        _type(controller, "   ")
        controller.update(Submit())
        self.assertEqual(evaluator.calls[-1], (DOCUMENT, "."))

    def test_submit_resets_scroll_to_top(self) -> None:
        controller = _ready_controller()
        controller.update(ToggleFocus())
        controller.update(KeyPress("END"))
        self.assertGreater(controller.viewport.y_offset, 0)
        controller.update(ToggleFocus())
        _type(controller, ".b")
        controller.update(Submit())

        self.assertEqual(controller.viewport.y_offset, 0)
        self.assertEqual(controller.viewport.content, controller.last_result)

    def test_submit_while_viewport_focused_is_a_no_op(self) -> None:
        evaluator = FakeEvaluator()
        controller = _ready_controller(evaluator)
        controller.update(ToggleFocus())
        before_calls = list(evaluator.calls)
        before_result = controller.last_result

        controller.update(event_for_key("ENTER", controller.keymap))

        self.assertEqual(evaluator.calls, before_calls)
        self.assertEqual(controller.last_result, before_result)
        self.assertEqual(controller.viewport.content, before_result)

    def test_engine_diagnostics_are_displayed_as_result(self) -> None:
        evaluator = FakeEvaluator({"..": "jq: error: syntax error, unexpected ..\n"})
        controller = _ready_controller(evaluator)
        _type(controller, "..")
        self.assertTrue(controller.update(Submit()))
        self.assertIn("syntax error", controller.viewport.content)


class KeyRoutingTests(unittest.TestCase):
    def test_keys_reach_only_the_focused_widget(self) -> None:
        controller = _ready_controller()
        controller.update(KeyPress("j"))
        self.assertEqual(controller.text_input.value(), "j")
        self.assertEqual(controller.viewport.y_offset, 0)

        controller.update(ToggleFocus())
        controller.update(KeyPress("j"))
        self.assertEqual(controller.text_input.value(), "j")
        self.assertEqual(controller.viewport.y_offset, 1)

    def test_quit_stops_and_expression_is_trimmed(self) -> None:
        controller = _ready_controller()
        _type(controller, "  .a  ")
        self.assertFalse(controller.update(Quit()))
        self.assertEqual(controller.query_expression(), ".a")

    def test_controller_keys_map_to_action_events(self) -> None:
        controller = _ready_controller()
        self.assertEqual(event_for_key("CTRL_C", controller.keymap), Quit())
        self.assertEqual(event_for_key("TAB", controller.keymap), ToggleFocus())
        self.assertEqual(event_for_key("ENTER", controller.keymap), Submit())
        self.assertEqual(event_for_key("x", controller.keymap), KeyPress("x"))

    def test_unknown_event_type_is_rejected(self) -> None:
        controller = _ready_controller()
        with self.assertRaises(TypeError):
            controller.update("resize")  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
