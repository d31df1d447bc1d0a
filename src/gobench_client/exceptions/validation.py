"""
Validation exceptions.

Raised synchronously by the dispatchers before any network call. Each
carries a short ``message`` and a longer ``description`` meant for the
user-facing error surface.
"""

from typing import Optional

from .base import ExceptionContext, GobenchClientError
from .templates import ErrorCodes


class ValidationError(GobenchClientError):
    """Base class for input validation errors."""

    def __init__(
        self,
        message: str,
        description: Optional[str] = None,
        error_code: str = ErrorCodes.VALIDATION_FAILED,
        field: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        super().__init__(
            message,
            description,
            error_code,
            ExceptionContext(operation=operation, field=field),
        )


class MissingNameError(ValidationError):
    """Raised when an application is submitted without a name."""

    def __init__(self):
        super().__init__(
            "name is required.",
            "name of a application represent to a scenario. "
            "It will show on sidebar.",
            ErrorCodes.MISSING_NAME,
            field="name",
            operation="create",
        )


class MissingScenarioError(ValidationError):
    """Raised when an application is submitted without a scenario."""

    def __init__(self):
        super().__init__(
            "scenario is required.",
            "scenario of a application should be filled in.",
            ErrorCodes.MISSING_SCENARIO,
            field="scenario",
            operation="create",
        )


class MissingIdError(ValidationError):
    """Raised when delete or cancel is invoked without an application id."""

    def __init__(self, operation: Optional[str] = None):
        super().__init__(
            "missing parameter.",
            "missing id params.",
            ErrorCodes.MISSING_ID,
            field="id",
            operation=operation,
        )


class InvalidScenarioPayloadError(ValidationError):
    """Raised when an encoded scenario payload cannot be decoded."""

    def __init__(self, details: str):
        super().__init__(
            "scenario payload is not valid base64 text.",
            f"The encoded scenario could not be decoded: {details}",
            ErrorCodes.INVALID_SCENARIO_PAYLOAD,
            field="scenario",
        )


class CloneSourceNotFoundError(ValidationError):
    """Raised when a clone request names an application the store does not know."""

    def __init__(self, name: str):
        super().__init__(
            f"application '{name}' not found.",
            "Only applications listed by the backend can be cloned.",
            ErrorCodes.CLONE_SOURCE_NOT_FOUND,
            field="name",
            operation="clone",
        )
        self.name = name
