"""Domain exceptions - error taxonomy shared by every layer."""
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all catalog errors."""
    pass


class ValidationError(DomainException):
    """Raised when a value fails domain validation."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class InvalidArgumentError(ValidationError):
    """Raised when an operation receives an argument it cannot handle."""
    def __init__(self, argument: str, value: Any, allowed: Optional[Iterable[str]] = None):
        allowed_list = sorted(allowed) if allowed is not None else []
        message = f"Invalid {argument}: {value!r}"
        if allowed_list:
            message += f" (expected one of: {', '.join(allowed_list)})"
        super().__init__(message, details={"allowed": allowed_list})
        self.argument = argument
        self.value = value
        self.allowed = allowed_list


class NotFoundError(DomainException):
    """Raised when a requested catalog entry cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} '{resource_id}' not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class DuplicateKeyError(ConfigurationError):
    """Raised when a name is registered twice."""
    def __init__(self, resource_type: str, key: str):
        super().__init__(f"{resource_type} '{key}' is already registered")
        self.resource_type = resource_type
        self.key = key


class DemoExecutionError(DomainException):
    """Raised when a demo fails with an unexpected error."""
    def __init__(self, demo_name: str, message: str):
        super().__init__(f"Demo '{demo_name}' failed: {message}")
        self.demo_name = demo_name
