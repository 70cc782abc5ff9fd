"""Tests for centralized logging configuration."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from pydantic import ValidationError

from chance.system import LoggerFactory, LoggingConfig


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before and after each test."""
    LoggerFactory.reset()
    yield
    LoggerFactory.reset()


def test_default_configuration():
    """First get_logger() call configures defaults."""
    logger = LoggerFactory.get_logger()

    assert LoggerFactory.is_configured()
    assert hasattr(logger, "info")

    config = LoggerFactory.get_config()
    assert config.level == "INFO"
    assert config.format == "console"
    assert config.enable_file is False


def test_explicit_configuration():
    LoggerFactory.configure(LoggingConfig(level="DEBUG", format="json"))

    assert LoggerFactory.get_config().level == "DEBUG"
    assert LoggerFactory.get_config().format == "json"
    assert logging.getLogger().level == logging.DEBUG


def test_console_handler_writes_to_stderr():
    LoggerFactory.configure(LoggingConfig())

    stream_handlers = [h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler]
    assert stream_handlers[0].stream is sys.stderr


def test_file_logs_are_json_lines(tmp_path):
    """File output is one JSON object per event with key/value context."""
    log_file = tmp_path / "chance.log"
    LoggerFactory.configure(
        LoggingConfig(level="INFO", enable_file=True, file_path=log_file, file_level="DEBUG", file_rotation=False)
    )
    logger = LoggerFactory.get_logger()

    logger.info("journal_service.trade_logged", symbol="AAPL", pnl="498")

    record = json.loads(log_file.read_text().strip())
    assert record["event"] == "journal_service.trade_logged"
    assert record["symbol"] == "AAPL"
    assert record["pnl"] == "498"
    assert "log_timestamp" in record
    assert record["level"] == "info"


def test_file_logging_default_path(tmp_path, monkeypatch):
    """File logging without a path writes to logs/chance.log."""
    monkeypatch.chdir(tmp_path)

    LoggerFactory.configure(LoggingConfig(enable_file=True, file_path=None, file_rotation=False))

    assert LoggerFactory.get_config().file_path == Path("logs/chance.log")
    assert (tmp_path / "logs").is_dir()


def test_file_logging_creates_directory(tmp_path):
    log_file = tmp_path / "logs" / "nested" / "chance.log"

    LoggerFactory.configure(LoggingConfig(enable_file=True, file_path=log_file, file_rotation=False))
    LoggerFactory.get_logger().warning("analyst.missing_api_key")

    assert log_file.exists()


def test_rotating_file_handler(tmp_path):
    log_file = tmp_path / "rotating.log"

    LoggerFactory.configure(
        LoggingConfig(enable_file=True, file_path=log_file, file_rotation=True, max_file_size_mb=1, backup_count=2)
    )

    handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1
    assert handlers[0].maxBytes == 1024 * 1024
    assert handlers[0].backupCount == 2


def test_file_level_independent_from_console_level(tmp_path):
    log_file = tmp_path / "debug.log"
    LoggerFactory.configure(
        LoggingConfig(level="WARNING", enable_file=True, file_path=log_file, file_level="DEBUG", file_rotation=False)
    )
    logger = LoggerFactory.get_logger()

    logger.debug("csv_import.row_skipped", line=3)
    logger.warning("csv_import.no_valid_trades", skipped=3)

    events = [json.loads(line)["event"] for line in log_file.read_text().splitlines() if line.strip()]
    assert events == ["csv_import.row_skipped", "csv_import.no_valid_trades"]


def test_reset_clears_configuration():
    LoggerFactory.configure(LoggingConfig(level="ERROR"))

    LoggerFactory.reset()

    assert not LoggerFactory.is_configured()
    assert LoggerFactory.get_config().level == "INFO"
    assert logging.getLogger().handlers == []


def test_invalid_level_rejected():
    with pytest.raises(ValidationError):
        LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]


@pytest.mark.parametrize("fmt", ["iso", "compact", "time", "short"])
def test_timestamp_formats(fmt):
    timestamper = LoggerFactory._get_timestamper(fmt)

    event = timestamper(None, "info", {})

    assert event["log_timestamp"]
