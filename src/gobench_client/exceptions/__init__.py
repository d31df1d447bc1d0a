"""
gobench client exception hierarchy.

Exception Hierarchy:
    GobenchClientError (base)
    ├── ValidationError
    │   ├── MissingNameError
    │   ├── MissingScenarioError
    │   ├── MissingIdError
    │   ├── InvalidScenarioPayloadError
    │   └── CloneSourceNotFoundError
    ├── ApiError
    │   ├── ApiConnectionError
    │   ├── ApiResponseError
    │   ├── ApplicationNotFoundError
    │   └── UnexpectedGatewayError
    └── ConfigurationError
        ├── InvalidConfigurationError
        ├── MissingConfigurationError
        └── ConfigurationValidationError
"""

from .api import (
    ApiConnectionError,
    ApiError,
    ApiResponseError,
    ApplicationNotFoundError,
    UnexpectedGatewayError,
)
from .base import ExceptionContext, GobenchClientError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)
from .templates import ErrorCodes, ErrorMessageTemplates
from .validation import (
    CloneSourceNotFoundError,
    InvalidScenarioPayloadError,
    MissingIdError,
    MissingNameError,
    MissingScenarioError,
    ValidationError,
)

__all__ = [
    "GobenchClientError",
    "ExceptionContext",
    "ErrorCodes",
    "ErrorMessageTemplates",
    # Validation
    "ValidationError",
    "MissingNameError",
    "MissingScenarioError",
    "MissingIdError",
    "InvalidScenarioPayloadError",
    "CloneSourceNotFoundError",
    # API
    "ApiError",
    "ApiConnectionError",
    "ApiResponseError",
    "ApplicationNotFoundError",
    "UnexpectedGatewayError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
]
