"""
Unit Tests: Structured Logger
=============================
Tests: cached get_logger(), idempotent handlers, JSON payload format.
"""

import json
import logging
from types import SimpleNamespace

from creational.core.logger import JsonFormatter, StructuredLogger, get_logger
from creational.domain.interfaces.products import GuiVariant
from creational.infrastructure.config.settings import LoggingSettings


def _config(**overrides):
    values = dict(
        level="INFO",
        console_enabled=True,
        file_enabled=False,
        structured_logging=True,
        log_dir="logs",
        max_file_size_mb=1,
        backup_count=1,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class TestLoggerCache:
    """get_logger() returns one StructuredLogger per name."""

    def test_same_name_same_instance(self):
        config = LoggingSettings(console_enabled=True, file_enabled=False)
        first = get_logger("tests.logger.cache", config)
        second = get_logger("tests.logger.cache")

        assert first is second
        assert first.logger is second.logger

    def test_handlers_do_not_accumulate(self):
        logger = get_logger("tests.logger.handlers", LoggingSettings(console_enabled=True))
        initial = len(logger.logger.handlers)

        for _ in range(5):
            get_logger("tests.logger.handlers")

        assert len(logger.logger.handlers) == initial

    def test_different_names_different_instances(self):
        assert get_logger("tests.logger.a") is not get_logger("tests.logger.b")


class TestStructuredLogger:
    """Handler setup is idempotent and honours the config."""

    def test_console_handler_added_once(self):
        first = StructuredLogger("tests.logger.console", _config())
        StructuredLogger("tests.logger.console", _config())

        assert len(first.logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        logger = StructuredLogger(
            "tests.logger.file",
            _config(console_enabled=False, file_enabled=True, log_dir=str(tmp_path)),
        )
        logger.info("registry.frozen", {"registry": "gui"})
        for handler in logger.logger.handlers:
            handler.flush()

        lines = (tmp_path / "tests.logger.file.jsonl").read_text().splitlines()
        record = json.loads(lines[-1])

        assert record["event_type"] == "registry.frozen"
        assert record["data"] == {"registry": "gui"}
        assert record["level"] == "INFO"

    def test_level_from_enum(self):
        logger = StructuredLogger("tests.logger.level", LoggingSettings(level="WARNING", console_enabled=False))
        assert logger.logger.level == logging.WARNING


class TestJsonFormatter:
    """Records become single-line JSON objects."""

    def _record(self, msg):
        return logging.LogRecord("x", logging.INFO, __file__, 1, msg, None, None)

    def test_dict_payload(self):
        output = JsonFormatter().format(self._record({
            "event_type": "registry.resolve",
            "data": {"variant": GuiVariant.MAC},
        }))
        record = json.loads(output)

        assert record["event_type"] == "registry.resolve"
        assert record["data"]["variant"] == "mac"

    def test_enum_keys_use_values(self):
        output = JsonFormatter().format(self._record({"data": {GuiVariant.WINDOWS: 1}}))
        assert json.loads(output)["data"] == {"windows": 1}

    def test_plain_message(self):
        record = json.loads(JsonFormatter().format(self._record("hello")))
        assert record["message"] == "hello"
