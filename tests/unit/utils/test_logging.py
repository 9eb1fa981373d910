"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

from chromaramp.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging side effects after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "Test message", level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="chromaramp.test",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.funcName = "test_function"
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Records become JSON with level, message, timestamp and context."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "chromaramp.test"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self):
        """Extra record attributes land in the context."""
        data = json.loads(StructuredJSONFormatter().format(_record(family="cyan", steps=12)))

        assert data["context"]["family"] == "cyan"
        assert data["context"]["steps"] == 12

    def test_exception_info(self):
        """Exceptions are summarized in the context."""
        try:
            raise ValueError("bad curve")
        except ValueError:
            record = _record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad curve"
        assert "Traceback" in data["context"]["stack_trace"]


class TestConfigureLogging:
    def test_sets_level(self):
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_structured_formatter(self):
        configure_logging(structured=True)
        (handler,) = logging.getLogger().handlers
        assert isinstance(handler.formatter, StructuredJSONFormatter)

    def test_file_output(self, tmp_path: Path):
        log_file = tmp_path / "ramps.log"
        configure_logging(level="INFO", filename=str(log_file), format_string="%(message)s")

        logging.getLogger("chromaramp.test").info("hello ramps")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.read_text().strip() == "hello ramps"


class TestGetLogger:
    def test_plain_logger(self):
        assert isinstance(get_logger("chromaramp.x"), logging.Logger)

    def test_adapter_with_context(self):
        adapter = get_logger("chromaramp.x", family="cyan")
        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"family": "cyan"}


class TestLogPerformance:
    def test_logs_duration(self, caplog: pytest.LogCaptureFixture):
        @log_performance
        def work(x: int) -> int:
            return x * 2

        with caplog.at_level(logging.DEBUG, logger=__name__):
            assert work(21) == 42

        assert any("took" in r.getMessage() for r in caplog.records)
        assert work.__name__ == "work"
