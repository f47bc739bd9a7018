"""
Tests for logging configuration.
"""

import importlib
import logging
import tempfile
import unittest
from pathlib import Path

# The package re-exports the ``log`` Logger, which shadows the submodule
# attribute, so resolve the module itself explicitly.
log_module = importlib.import_module("web_linkfinder.utils.log")
from web_linkfinder.utils.log import log, setup_logging


class TestSetupLogging(unittest.TestCase):
    def tearDown(self):
        for handler in list(log.handlers):
            handler.close()
        log.handlers.clear()
        log.setLevel(logging.NOTSET)
        log.propagate = True

    def test_info_level_by_default(self):
        setup_logging()
        self.assertEqual(log.level, logging.INFO)
        self.assertEqual(len(log.handlers), 1)

    def test_debug_level(self):
        setup_logging(debug=True)
        self.assertEqual(log.level, logging.DEBUG)

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging()
        setup_logging()
        self.assertEqual(len(log.handlers), 1)

    def test_log_file_captures_debug(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "logs" / "run.log"
            setup_logging(log_file=str(path))
            log.debug("[SKIP] detail line")
            for handler in log.handlers:
                handler.flush()
            self.assertIn("[SKIP] detail line", path.read_text(encoding="utf-8"))
            for handler in list(log.handlers):
                handler.close()
            log.handlers.clear()


class TestFormatting(unittest.TestCase):
    def test_category_tag_coloured(self):
        styled = log_module._apply_category_styles("[ERR] boom")
        self.assertIn("\033[1;31m[ERR]\033[0m", styled)

    def test_unknown_text_untouched(self):
        self.assertEqual(log_module._apply_category_styles("plain"), "plain")

    def test_ci_formatter_prefixes_errors(self):
        formatter = log_module._CIFormatter("%(message)s")
        record = logging.LogRecord(
            "web-linkfinder", logging.ERROR, __file__, 1, "failed", None, None
        )
        self.assertEqual(formatter.format(record), "::error::failed")


if __name__ == "__main__":
    unittest.main()
