"""
Test suite for correlation tracking and logging configuration.

System role: Verification of observability helpers
"""

import logging

from docvault.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from docvault.observability.logger import CorrelationIdFilter, configure_logging


class TestCorrelation:
    def test_set_and_get(self):
        set_correlation_id("req-1")
        try:
            assert get_correlation_id() == "req-1"
        finally:
            clear_correlation_id()

    def test_generates_uuid_when_missing(self):
        value = set_correlation_id()
        try:
            assert len(value) == 36
            assert get_correlation_id() == value
        finally:
            clear_correlation_id()

    def test_empty_after_clear(self):
        set_correlation_id("req-1")
        clear_correlation_id()

        assert get_correlation_id() == ""


class TestLogger:
    def test_filter_injects_correlation_id(self):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
        set_correlation_id("req-9")
        try:
            assert CorrelationIdFilter().filter(record) is True
        finally:
            clear_correlation_id()

        assert record.correlation_id == "req-9"

    def test_filter_placeholder_outside_request(self):
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"

    def test_configure_logging_sets_level_and_quiets_botocore(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert logging.getLogger("botocore").level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
