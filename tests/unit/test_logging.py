"""
Tests for structured logging helpers and formatters.
"""

import json
import logging

import pytest

from catalog.logging import (
    HumanReadableFormatter,
    StructuredJSONFormatter,
    clear_log_context,
    get_log_context,
    set_log_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_log_context()
    yield
    clear_log_context()


def make_record(msg="Searching books", level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="catalog",
        level=level,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogContext:
    """Tests for log context helpers."""

    def test_set_merges_fields(self):
        """Test fields accumulate across calls."""
        set_log_context(endpoint="/books/search")
        set_log_context(method="GET")

        assert get_log_context() == {"endpoint": "/books/search", "method": "GET"}

    def test_clear(self):
        """Test clearing removes all fields."""
        set_log_context(endpoint="/authors")
        clear_log_context()

        assert get_log_context() == {}


class TestStructuredJSONFormatter:
    """Tests for StructuredJSONFormatter class."""

    def test_format_includes_context_and_extra(self):
        """Test JSON output contains message, context and extra fields."""
        set_log_context(endpoint="/books/search", method="GET")
        record = make_record(filters={"genre": "Sci-Fi"})

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["message"] == "Searching books"
        assert data["level"] == "INFO"
        assert data["logger"] == "catalog"
        assert data["endpoint"] == "/books/search"
        assert data["method"] == "GET"
        assert data["filters"] == {"genre": "Sci-Fi"}
        assert "request_id" not in data

    def test_format_truncates_huge_messages(self):
        """Test oversized log lines are truncated."""
        record = make_record(msg="x" * 200_000)

        output = StructuredJSONFormatter().format(record)

        assert len(output) < 200_000
        assert json.loads(output)["message"].endswith("... [TRUNCATED]")


def test_human_readable_formatter():
    """Test console format shows a placeholder without correlation ID."""
    output = HumanReadableFormatter().format(make_record(msg="Started"))

    assert "[-] INFO: Started" in output
