"""
Tests for logging configuration and correlation id injection.
"""

import logging

import pytest

from jobly.core.logging import LoggingContextFilter, configure_logging, correlation_id_var


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record() -> logging.LogRecord:
    return logging.LogRecord("jobly.test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_uses_placeholder_without_context():
    record = _record()

    assert LoggingContextFilter().filter(record) is True
    assert record.correlation_id == "-"


def test_filter_injects_correlation_id():
    token = correlation_id_var.set("cid-42")
    try:
        record = _record()
        LoggingContextFilter().filter(record)
    finally:
        correlation_id_var.reset(token)

    assert record.correlation_id == "cid-42"


def test_configure_logging_installs_single_handler(restore_root_logger):
    configure_logging(logging.DEBUG)
    configure_logging("WARNING")

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert any(isinstance(f, LoggingContextFilter) for f in root.handlers[0].filters)
    assert "cid=%(correlation_id)s" in root.handlers[0].formatter._fmt
