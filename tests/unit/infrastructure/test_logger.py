"""
Unit tests for logging configuration.

Usage:
    pytest tests/unit/infrastructure/test_logger.py
"""

import json
import logging
import time

from mutstd.config.settings import Settings, load_config
from mutstd.infrastructure.monitoring.logger import (
    JSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
    set_load_id,
    setup_logging,
)


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="mutstd.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Unit tests for JSONFormatter."""

    def test_basic_fields(self):
        """Test standard keys are present."""
        payload = json.loads(JSONFormatter().format(_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "mutstd.test"
        assert payload["message"] == "hello"
        assert payload["line"] == 10

    def test_extra_fields_included(self):
        """Test values passed via extra= are serialized."""
        payload = json.loads(JSONFormatter().format(_record(entries=3, roots=2)))

        assert payload["entries"] == 3
        assert payload["roots"] == 2

    def test_load_id_included(self):
        """Test the current load ID is attached."""
        load_id = set_load_id("load-1")

        payload = json.loads(JSONFormatter().format(_record()))

        assert load_id == "load-1"
        assert payload["load_id"] == "load-1"

    def test_set_load_id_generates_uuid(self):
        """Test a load ID is generated when none is given."""
        load_id = set_load_id()

        assert len(load_id) == 36


class TestSetupLogging:
    """Unit tests for setup_logging."""

    def setup_method(self):
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def teardown_method(self):
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_json_handler(self):
        """Test JSON formatter is installed."""
        setup_logging(level="debug", json_logs=True)
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_plain_handler(self):
        """Test plain text formatter is installed."""
        setup_logging(level="warning", json_logs=False)
        root = logging.getLogger()

        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_log_performance(self, caplog):
        """Test duration is logged with the operation name."""
        logger = get_logger("mutstd.perf")

        with caplog.at_level(logging.INFO, logger="mutstd.perf"):
            log_performance(logger, "load_catalog", time.perf_counter())

        assert caplog.records[0].operation == "load_catalog"
        assert caplog.records[0].duration_ms >= 0

    # ================================================================
    # Settings-driven configuration
    # ================================================================

    def test_configure_logging_from_settings(self):
        """Test log_level and json_logs reach the root logger."""
        configure_logging(Settings(log_level="error", json_logs=True))
        root = logging.getLogger()

        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_configure_logging_from_yaml(self):
        """Test development.yaml values reach the root logger."""
        configure_logging(load_config(env="development"))
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_configure_logging_uses_global_settings(self, test_settings):
        """Test the global settings are used when none are given."""
        configure_logging()
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)
