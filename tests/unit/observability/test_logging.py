"""Unit tests for structured logging."""

import json
import logging
import sys

import pytest

from fuzzy_lookup.observability import (
    JsonFormatter,
    configure_logging,
    configure_logging_from_settings,
    set_trace_context,
)


def _record(msg="test message", level=logging.INFO, name="fuzzy_lookup.fuzzy_set", **extra):
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestJsonFormatter:
    def test_format_includes_trace_context(self):
        set_trace_context("a" * 32, "b" * 16)

        data = json.loads(JsonFormatter().format(_record()))

        assert data["message"] == "test message"
        assert data["level"] == "INFO"
        assert data["logger"] == "fuzzy_lookup.fuzzy_set"
        assert data["component"] == "fuzzy_set"
        assert data["trace_id"] == "a" * 32
        assert data["span_id"] == "b" * 16
        assert "timestamp" in data

    def test_format_includes_extra_fields(self):
        data = json.loads(JsonFormatter().format(_record(entry_count=3, gram_sizes={3, 2})))

        assert data["entry_count"] == 3
        assert data["gram_sizes"] == [2, 3]
        assert "args" not in data
        assert "pathname" not in data

    def test_redacts_sensitive_fields(self):
        data = json.loads(JsonFormatter().format(_record(token="secret-value")))

        assert data["token"] == "[REDACTED]"

    def test_truncates_long_values(self):
        formatter = JsonFormatter()
        data = json.loads(formatter.format(_record(msg="x" * 5000, detail="y" * 1000)))

        assert len(data["message"]) == formatter.MAX_MESSAGE_LEN + 3
        assert data["detail"].endswith("...")
        assert len(data["detail"]) == formatter.MAX_VALUE_LEN + 3

    def test_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: boom" in data["exception"]


@pytest.mark.unit
class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_handler_installed(self):
        configure_logging("debug")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_plain_text_handler(self):
        configure_logging("warning", json_output=False)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_per_logger_overrides(self):
        configure_logging("info", logger_levels={"fuzzy_lookup.search": "error"})

        assert logging.getLogger("fuzzy_lookup.search").level == logging.ERROR

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")

        assert logging.getLogger().level == logging.INFO

    def test_from_settings(self, monkeypatch):
        monkeypatch.setenv("FUZZY_LOOKUP_LOG_LEVEL", "error")
        monkeypatch.setenv("FUZZY_LOOKUP_LOG_JSON", "false")

        configure_logging_from_settings()

        root = logging.getLogger()
        assert root.level == logging.ERROR
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
