from __future__ import annotations

import io
import json
import logging
import os
import unittest
from unittest.mock import patch

from filecount import __version__, cli
from filecount.logging.factory import DefaultLoggerFactory
from filecount.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    is_trace_io_enabled,
    setup_base_logger,
    trace_io,
)


def _record(msg: str = "hello %s", args=("world",), **extra) -> logging.LogRecord:
    record = logging.LogRecord("filecount.pool", logging.WARNING, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# --------------------------------------------------------------------------- #
#  1. Logger names                                                            #
# --------------------------------------------------------------------------- #
class LoggerNameTests(unittest.TestCase):
    def test_namespacing(self) -> None:
        self.assertEqual(get_logger().name, "filecount")
        self.assertEqual(get_logger("filecount").name, "filecount")
        self.assertEqual(get_logger("pool").name, "filecount.pool")
        self.assertEqual(get_logger("filecount.io.walker").name, "filecount.io.walker")

    def test_factory_returns_scoped_logger(self) -> None:
        lg = DefaultLoggerFactory(level=logging.ERROR, stream=io.StringIO()).get_logger("render")
        self.assertEqual(lg.name, "filecount.render")
        self.assertTrue(logging.getLogger("filecount").handlers)


# --------------------------------------------------------------------------- #
#  2. JSON formatter                                                          #
# --------------------------------------------------------------------------- #
class JsonFormatterTests(unittest.TestCase):
    def test_fixed_fields(self) -> None:
        payload = json.loads(JsonLogFormatter().format(_record()))
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["module"], "filecount.pool")
        self.assertEqual(payload["msg"], "hello world")
        self.assertEqual(payload["version"], __version__)
        self.assertTrue(payload["ts"].endswith("Z"))
        self.assertNotIn("ctx", payload)

    def test_context_is_attached(self) -> None:
        payload = json.loads(JsonLogFormatter().format(_record(context={"path": "a.go"})))
        self.assertEqual(payload["ctx"], {"path": "a.go"})

    def test_exception_text(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            import sys

            record = _record()
            record.exc_info = sys.exc_info()
        payload = json.loads(JsonLogFormatter().format(record))
        self.assertIn("RuntimeError: boom", payload["exc"])


# --------------------------------------------------------------------------- #
#  3. IO tracing                                                              #
# --------------------------------------------------------------------------- #
class TraceIoTests(unittest.TestCase):
    def test_disabled_by_default(self) -> None:
        lg = get_logger("trace-test")
        with patch.dict(os.environ, {"FILECOUNT_TRACE_IO": "0"}):
            self.assertFalse(is_trace_io_enabled())
            with self.assertRaises(AssertionError):
                with self.assertLogs(lg, level="DEBUG"):
                    trace_io(lg, "skip directory", path="vendor")

    def test_enabled_by_env(self) -> None:
        lg = get_logger("trace-test")
        with patch.dict(os.environ, {"FILECOUNT_TRACE_IO": "1"}):
            with self.assertLogs(lg, level="DEBUG") as logs:
                trace_io(lg, "skip directory", path="vendor")
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(logs.records[0].context, {"path": "vendor"})
        self.assertIn("skip directory", logs.output[0])


# --------------------------------------------------------------------------- #
#  4. Base logger setup                                                       #
# --------------------------------------------------------------------------- #
class BaseLoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.base = logging.getLogger("filecount")
        self._saved = (list(self.base.handlers), self.base.level, self.base.propagate)
        self.base.handlers.clear()

    def tearDown(self) -> None:
        handlers, level, propagate = self._saved
        self.base.handlers[:] = handlers
        self.base.setLevel(level)
        self.base.propagate = propagate
        cli._configure_logging.__dict__.pop("_configured_mode", None)

    def test_single_handler_on_repeat_calls(self) -> None:
        setup_base_logger(stream=io.StringIO())
        setup_base_logger(stream=io.StringIO())
        self.assertEqual(len(self.base.handlers), 1)

    def test_switch_to_json_after_plain(self) -> None:
        buf = io.StringIO()
        setup_base_logger(json_logs=False, level=logging.INFO, stream=buf)
        setup_base_logger(json_logs=True, level=logging.WARNING)
        self.assertEqual(self.base.level, logging.WARNING)
        self.assertIsInstance(self.base.handlers[0].formatter, JsonLogFormatter)

        get_logger("pool").warning("switched")
        self.assertEqual(json.loads(buf.getvalue().strip())["msg"], "switched")

    def test_cli_logging_mode_change(self) -> None:
        setup_base_logger(stream=io.StringIO())
        cli._configure_logging(False)
        self.assertNotIsInstance(self.base.handlers[0].formatter, JsonLogFormatter)
        cli._configure_logging(True)
        self.assertIsInstance(self.base.handlers[0].formatter, JsonLogFormatter)

if __name__ == "__main__":
    unittest.main()
