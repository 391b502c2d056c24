"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

from hoshizora.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self) -> None:
        record = _record()
        record.funcName = "test_function"

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self) -> None:
        record = _record()
        record.source_path = "maps/end_time.osu"
        record.line_number = 12

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["source_path"] == "maps/end_time.osu"
        assert data["context"]["line_number"] == 12

    def test_exception_info(self) -> None:
        try:
            raise ValueError("bad value")
        except ValueError:
            record = logging.LogRecord(
                name="test.logger",
                level=logging.ERROR,
                pathname=__file__,
                lineno=1,
                msg="failed",
                args=(),
                exc_info=sys.exc_info(),
            )

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "bad value"
        assert "Traceback" in data["context"]["stack_trace"]


class TestConfigureLogging:
    def test_sets_level(self) -> None:
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_structured_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "decode.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)

        logging.getLogger("hoshizora.test").info("decoded")
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "decoded"
        assert entry["context"]["logger_name"] == "hoshizora.test"

        configure_logging(level="WARNING")


class TestGetLogger:
    def test_plain_logger(self) -> None:
        logger = get_logger("hoshizora.decoder")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "hoshizora.decoder"

    def test_adapter_with_context(self) -> None:
        logger = get_logger("hoshizora.decoder", source_path="a.osu")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"source_path": "a.osu"}
