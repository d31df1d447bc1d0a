"""
Configuration-specific exceptions.
"""

from typing import Any, List, Optional

from .base import ExceptionContext, GobenchClientError
from .templates import ErrorCodes, ErrorMessageTemplates


class ConfigurationError(GobenchClientError):
    """Base exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        description: Optional[str] = None,
        error_code: str = ErrorCodes.CONFIG_ERROR,
        field: Optional[str] = None,
    ):
        super().__init__(
            message,
            description,
            error_code,
            ExceptionContext(operation="config", field=field),
        )


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        message = ErrorMessageTemplates.CONFIG_INVALID.format(
            field=field, value=value, expected=expected
        )
        description = (
            f"Please check the configuration for '{field}' and ensure it "
            f"matches the expected format: {expected}"
        )
        super().__init__(message, description, ErrorCodes.CONFIG_INVALID, field)
        self.value = value
        self.expected = expected

    @property
    def field(self) -> Optional[str]:
        return self.context.field


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, description: Optional[str] = None):
        message = ErrorMessageTemplates.CONFIG_MISSING.format(field=field)
        if not description:
            description = (
                f"Please provide a value for '{field}' in your configuration "
                "file or environment variables"
            )
        super().__init__(message, description, ErrorCodes.CONFIG_MISSING, field)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        description = "Please check your configuration file and fix the validation errors listed above"
        super().__init__(message, description, ErrorCodes.CONFIG_VALIDATION)
