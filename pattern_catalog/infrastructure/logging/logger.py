"""Structured logging setup built on structlog and the standard logging module."""
import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List, Optional

import structlog

from pattern_catalog.domain.base.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pattern_catalog.config.schemas import LoggingConfig

_configure_lock = threading.Lock()
_configured = False

# Applied to records that do not come from structlog (plain logging.getLogger users)
_FOREIGN_PRE_CHAIN = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _build_handlers(config: "LoggingConfig") -> List[logging.Handler]:
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
        foreign_pre_chain=_FOREIGN_PRE_CHAIN,
    )

    handlers: List[logging.Handler] = []

    if config.writes_file:
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=config.max_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
            )
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {log_path}: {e}") from e
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.writes_stderr:
        # stdout is reserved for demo output
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if not handlers:
        handlers.append(logging.NullHandler())

    return handlers


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging configuration. Defaults to ``LoggingConfig()``.

    Returns:
        Configured structlog logger for the package.

    Raises:
        ConfigurationError: If the log file cannot be opened
    """
    global _configured

    if config is None:
        # The config package logs through this module, so its schemas load late
        from pattern_catalog.config.schemas import LoggingConfig

        config = LoggingConfig()

    with _configure_lock:
        # Existing handlers stay in place if the new ones cannot be built
        new_handlers = _build_handlers(config)

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.level.value))

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in new_handlers:
            root_logger.addHandler(handler)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        _configured = True

    logger = structlog.get_logger("pattern_catalog")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger, configuring defaults on first use."""
    if not _configured:
        setup_logging()
    return structlog.get_logger(name)
