"""Tests for logging configuration."""

import logging

from watchboard.logging_config import (
    CorrelationFilter,
    correlation_id_var,
    generate_correlation_id,
    setup_logging,
)


class TestCorrelationId:
    def test_prefixed_with_token(self):
        assert generate_correlation_id(7).startswith("7-")

    def test_unique(self):
        assert generate_correlation_id() != generate_correlation_id()

    def test_filter_injects_current_id(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        token = correlation_id_var.set("3-abc")
        try:
            assert CorrelationFilter().filter(record) is True
        finally:
            correlation_id_var.reset(token)
        assert record.correlation_id == "3-abc"


class TestSetupLogging:
    def test_sets_level_and_single_handler(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug")
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
