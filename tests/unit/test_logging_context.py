"""Tests for request context propagation into log records."""

import logging

from quicksearch.shared.context import (
    get_correlation_id,
    get_request_id,
    reset_request_context,
    set_request_context,
)
from quicksearch.shared.telemetry.logging import LOG_FORMAT, RequestContextFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("quicksearch", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_outside_request_uses_placeholder() -> None:
    record = _record()
    assert RequestContextFilter().filter(record) is True
    assert record.request_id == "-"
    assert record.correlation_id == "-"


def test_filter_adds_request_and_correlation_ids() -> None:
    tokens = set_request_context("req-1", "corr-1")
    try:
        record = _record()
        RequestContextFilter().filter(record)
        formatted = logging.Formatter(LOG_FORMAT).format(record)
    finally:
        reset_request_context(tokens)

    assert record.request_id == "req-1"
    assert record.correlation_id == "corr-1"
    assert "[req-1/corr-1] hello" in formatted


def test_reset_restores_previous_context() -> None:
    outer = set_request_context("outer", "outer-corr")
    inner = set_request_context("inner", "inner-corr")
    reset_request_context(inner)
    try:
        assert get_request_id() == "outer"
        assert get_correlation_id() == "outer-corr"
    finally:
        reset_request_context(outer)
    assert get_request_id() is None
    assert get_correlation_id() is None
