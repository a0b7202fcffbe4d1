"""Tests for structured logging setup."""

import logging

import pytest

from pattern_catalog.config.schemas import LogDestination, LoggingConfig, LogLevel
from pattern_catalog.domain.base.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging


class TestSetupLogging:
    """Test handler and level configuration."""

    def test_sets_root_level(self):
        setup_logging(LoggingConfig(level=LogLevel.DEBUG))
        assert logging.getLogger().level == logging.DEBUG

    def test_stderr_destination_adds_stream_handler(self):
        setup_logging(LoggingConfig(destination=LogDestination.STDERR))
        handlers = logging.getLogger().handlers

        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_none_destination_discards_records(self):
        setup_logging(LoggingConfig(destination=LogDestination.NONE))
        handlers = logging.getLogger().handlers

        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_file_destination_writes_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "catalog.log"
        setup_logging(
            LoggingConfig(
                level=LogLevel.INFO,
                destination=LogDestination.FILE,
                file_path=str(log_file),
            )
        )

        get_logger("tests.logger").info("Registered pattern", pattern="observer")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "Registered pattern" in content
        assert "pattern=observer" in content

    def test_records_below_level_are_filtered(self, tmp_path):
        log_file = tmp_path / "catalog.log"
        setup_logging(
            LoggingConfig(
                level=LogLevel.WARNING,
                destination=LogDestination.FILE,
                file_path=str(log_file),
            )
        )

        logger = get_logger("tests.logger")
        logger.info("hidden message")
        logger.warning("visible message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "visible message" in content
        assert "hidden message" not in content

    def test_unopenable_log_file_raises_configuration_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        setup_logging(LoggingConfig(destination=LogDestination.STDERR))
        previous = list(logging.getLogger().handlers)

        with pytest.raises(ConfigurationError, match="Cannot open log file"):
            setup_logging(
                LoggingConfig(
                    destination=LogDestination.FILE,
                    file_path=str(blocker / "sub" / "catalog.log"),
                )
            )

        assert logging.getLogger().handlers == previous

    def test_lower_case_level_accepted(self):
        assert LoggingConfig(level="debug").level == LogLevel.DEBUG
