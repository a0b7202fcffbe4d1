"""Base domain layer - exceptions and output sink shared by all demos."""

from .exceptions import (
    ConfigurationError,
    DemoExecutionError,
    DomainException,
    DuplicateKeyError,
    InvalidArgumentError,
    NotFoundError,
    ValidationError,
)
from .output import DemoOutput

__all__ = [
    "ConfigurationError",
    "DemoExecutionError",
    "DemoOutput",
    "DomainException",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "NotFoundError",
    "ValidationError",
]
