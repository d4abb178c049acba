"""Tests for common.logging: JSON log lines."""

import json
import logging

from managed_records.common.logging import JSONFormatter, get_logger, setup_logging


def _record(msg: str, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord(
        name="managed_records.client",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record("page failed")))
        assert entry["level"] == "ERROR"
        assert entry["logger"] == "managed_records.client"
        assert entry["message"] == "page failed"
        assert "timestamp" in entry
        assert "exception" not in entry

    def test_includes_exception(self):
        try:
            raise ValueError("bad page")
        except ValueError:
            import sys
            entry = json.loads(JSONFormatter().format(_record("page failed", sys.exc_info())))
        assert "ValueError: bad page" in entry["exception"]


class TestSetupLogging:
    def test_does_not_stack_handlers(self):
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        root = logging.getLogger("managed_records")
        json_handlers = [h for h in root.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(json_handlers) == 1
        assert root.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger("managed_records").level == logging.INFO


class TestGetLogger:
    def test_scoped_name(self):
        assert get_logger("transport").name == "managed_records.transport"
