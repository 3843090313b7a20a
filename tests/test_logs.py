from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from jqlive.logs import PACKAGE_LOGGER, configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(None)

    def test_without_file_only_a_null_handler_is_attached(self) -> None:
        logger = configure_logging(None)
        self.assertEqual(logger.name, PACKAGE_LOGGER)
        self.assertEqual([type(h) for h in logger.handlers], [logging.NullHandler])
        self.assertFalse(logger.propagate)

    def test_file_handler_receives_module_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "nested" / "jqlive.log"
            configure_logging(log_path)
            logging.getLogger("jqlive.engine").debug("evaluated %r", ".a")
            configure_logging(None)

            contents = log_path.read_text(encoding="utf-8")

        self.assertIn("DEBUG jqlive.engine: evaluated '.a'", contents)

    def test_reconfiguring_replaces_previous_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(Path(tmp) / "a.log")
            logger = configure_logging(Path(tmp) / "b.log")
            self.assertEqual(len(logger.handlers), 1)
            configure_logging(None)


if __name__ == "__main__":
    unittest.main()
