"""Tests for request-id aware logging."""

import logging

from catechesis.shared.logging import RequestIdFilter, current_request_id


def _record() -> logging.LogRecord:
    return logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)


def test_filter_uses_dash_outside_request() -> None:
    record = _record()
    assert RequestIdFilter().filter(record)
    assert record.request_id == "-"


def test_filter_uses_current_request_id() -> None:
    token = current_request_id.set("req-42")
    try:
        record = _record()
        RequestIdFilter().filter(record)
        assert record.request_id == "req-42"
    finally:
        current_request_id.reset(token)
