"""Configuration schemas."""
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.domain.base.exceptions import ConfigurationError

from .app_schema import AppConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel
from .runner_schema import OutputConfig, OutputFormat, RunnerConfig


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration data.

    Args:
        data: Raw configuration dictionary

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If the data does not match the schema
    """
    try:
        return AppConfig.from_dict(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


__all__ = [
    "AppConfig",
    "LogDestination",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "RunnerConfig",
    "validate_config",
]
