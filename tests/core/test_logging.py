"""Tests for JSON logging configuration."""

import json
import logging

import pytest

from sipcore.core.logging import JsonFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestJsonFormatter:

    def test_format(self):
        record = logging.LogRecord(
            "sipcore.sip.route", logging.INFO, __file__, 1, "parsed %d", (2,), None
        )
        record.header = "Route"
        payload = json.loads(JsonFormatter().format(record))
        assert payload["level"] == "INFO"
        assert payload["logger"] == "sipcore.sip.route"
        assert payload["msg"] == "parsed 2"
        assert payload["header"] == "Route"
        assert "ts" in payload


class TestConfigureLogging:

    def test_console_only(self, restore_root_logger):
        configure_logging(log_file="", log_level="debug")
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_with_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "sipcore.log"
        configure_logging(log_file=str(log_file), log_level="INFO")
        logging.getLogger("sipcore.test").info("hello")
        for handler in restore_root_logger.handlers:
            handler.flush()
        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["msg"] == "hello"

    def test_unknown_level_falls_back(self, restore_root_logger):
        configure_logging(log_file="", log_level="chatty")
        assert restore_root_logger.level == logging.WARNING
