"""Tests for structured logging utilities."""

import logging
import uuid

import pytest

from worktime.utils.logging_utils import (
    ContextFilter,
    LogContext,
    generate_correlation_id,
    get_log_context,
    log_function_call,
)


class TestGenerateCorrelationId:
    """Test correlation ID generation."""

    def test_generate_correlation_id_format(self):
        """Test correlation ID has correct UUID format."""
        corr_id = generate_correlation_id()
        assert isinstance(corr_id, str)
        uuid.UUID(corr_id)

    def test_generate_correlation_id_uniqueness(self):
        """Test each correlation ID is unique."""
        ids = [generate_correlation_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestLogContext:
    """Test LogContext context manager."""

    def test_fields_available_inside(self):
        """Test that fields are set within the block."""
        with LogContext(correlation_id="abc", start="08:00"):
            assert get_log_context().get("correlation_id") == "abc"
            assert get_log_context()["start"] == "08:00"

    def test_fields_removed_after(self):
        """Test that fields are gone after the block."""
        with LogContext(correlation_id="abc"):
            pass
        assert get_log_context().get("correlation_id") is None

    def test_nested_contexts(self):
        """Test that an inner context adds to and restores the outer one."""
        with LogContext(correlation_id="outer"):
            with LogContext(step="parse"):
                assert get_log_context() == {"correlation_id": "outer", "step": "parse"}
            assert get_log_context() == {"correlation_id": "outer"}

    def test_restored_after_exception(self):
        """Test that fields are removed even when the block raises."""
        with pytest.raises(RuntimeError):
            with LogContext(correlation_id="abc"):
                raise RuntimeError("boom")
        assert get_log_context().get("correlation_id") is None


class TestContextFilter:
    """Test ContextFilter."""

    def test_copies_fields_to_record(self):
        """Test that context fields become record attributes."""
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
        with LogContext(correlation_id="abc"):
            assert ContextFilter().filter(record) is True
        assert record.correlation_id == "abc"


class TestLogFunctionCall:
    """Test log_function_call decorator."""

    def test_logs_entry_and_exit(self, caplog):
        """Test entry and exit messages without arguments."""

        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(1, 2) == 3

        messages = [r.getMessage() for r in caplog.records]
        assert "Entering add" in messages
        assert "Exiting add" in messages

    def test_logs_arguments(self, caplog):
        """Test that arguments are included when requested."""

        @log_function_call(include_args=True, level="INFO")
        def greet(name, punctuation="!"):
            return f"Hello {name}{punctuation}"

        with caplog.at_level(logging.INFO):
            greet("Ada", punctuation="?")

        assert "Entering greet with args: 'Ada', punctuation='?'" in caplog.text

    def test_logs_and_reraises_exceptions(self, caplog):
        """Test that exceptions are logged and propagated."""

        @log_function_call
        def fail():
            raise ValueError("bad value")

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ValueError, match="bad value"):
                fail()

        assert "Exception in fail: ValueError: bad value" in caplog.text

    def test_preserves_metadata(self):
        """Test that functools.wraps keeps name and docstring."""

        @log_function_call
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
