"""Regression tests for ANSI-aware width and slicing helpers.

Engine output is colorized, so viewport clipping must ignore escapes and
keep styling when the window starts mid-line.
"""

import unittest

from jqlive import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_escapes_do_not_count_toward_width(self) -> None:
        self.assertEqual(ansi_mod.display_width("\x1b[1;34m{\x1b[0m"), 1)

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("日本"), 4)


class ClipAndSliceTests(unittest.TestCase):
    def test_clip_keeps_leading_color_sequence(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("\x1b[31mabcdef\x1b[0m", 3), "\x1b[31mabc")

    def test_clip_expands_tabs_to_tab_stops(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("a\tb", 10), "a" + " " * 7 + "b")

    def test_clip_to_zero_columns_is_empty(self) -> None:
        self.assertEqual(ansi_mod.clip_ansi_line("abc", 0), "")

    def test_slice_replays_style_that_started_before_window(self) -> None:
        self.assertEqual(ansi_mod.slice_ansi_line("\x1b[32mabcdef", 2, 3), "\x1b[32mcde")

    def test_slice_past_end_of_line_is_empty(self) -> None:
        self.assertEqual(ansi_mod.slice_ansi_line("abc", 10, 5), "")


class SanitizeTests(unittest.TestCase):
    def test_control_bytes_are_escaped_but_colors_survive(self) -> None:
        source = "a\x07b\r\n\x1b[31mc\tz"
        self.assertEqual(ansi_mod.sanitize_terminal_text(source), "a\\x07b\\x0d\n\x1b[31mc\tz")

    def test_bare_escape_without_csi_is_escaped(self) -> None:
        self.assertEqual(ansi_mod.sanitize_terminal_text("\x1bX"), "\\x1bX")


class SplitLinesTests(unittest.TestCase):
    def test_trailing_newline_does_not_add_a_row(self) -> None:
        self.assertEqual(ansi_mod.split_lines("a\nb\n"), ["a", "b"])

    def test_empty_content_is_one_empty_row(self) -> None:
        self.assertEqual(ansi_mod.split_lines(""), [""])

    def test_only_newline_ends_a_line(self) -> None:
        self.assertEqual(ansi_mod.split_lines("a\u2028b\u2029c\x1cd\n\ne\n"), ["a\u2028b\u2029c\x1cd", "", "e"])


if __name__ == "__main__":
    unittest.main()
