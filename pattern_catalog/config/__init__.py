"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
    RunnerConfig,
    validate_config,
)
from .loader import ConfigurationLoader
from .manager import ConfigurationManager

__all__ = [
    'AppConfig',
    'validate_config',
    'LogDestination',
    'LoggingConfig',
    'LogLevel',
    'OutputConfig',
    'OutputFormat',
    'RunnerConfig',
    'ConfigurationLoader',
    'ConfigurationManager',
]
