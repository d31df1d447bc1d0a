"""
API gateway exceptions.

All exceptions related to talking to the gobench master REST API. The
message always names the failing operation (``API delete: ...``).
"""

from typing import Any, Optional

from .base import ExceptionContext, GobenchClientError
from .templates import ErrorCodes, ErrorMessageTemplates


class ApiError(GobenchClientError):
    """Base class for API gateway errors."""

    def __init__(
        self,
        operation: str,
        message: str,
        description: Optional[str] = None,
        error_code: str = ErrorCodes.API_ERROR,
        status_code: Optional[int] = None,
        application_id: Optional[Any] = None,
        user_action: Optional[str] = None,
        response_excerpt: Optional[str] = None,
    ):
        super().__init__(
            ErrorMessageTemplates.API_ERROR.format(operation=operation, message=message),
            description,
            error_code,
            ExceptionContext(
                operation=operation,
                application_id=application_id,
                status_code=status_code,
            ),
            user_action=user_action,
            response_excerpt=response_excerpt,
        )

    @property
    def status_code(self) -> Optional[int]:
        return self.context.status_code


class ApiConnectionError(ApiError):
    """Raised when the backend cannot be reached."""

    def __init__(self, operation: str, url: str, details: Optional[str] = None):
        self.url = url
        super().__init__(
            operation,
            f"connection to {url} failed" + (f" - {details}" if details else ""),
            description="Check that the gobench master is running and the API URL is correct",
            error_code=ErrorCodes.API_CONNECTION_FAILED,
            user_action="Run: gobench-client --api-url http://<host>:<port> list",
        )


class ApiResponseError(ApiError):
    """Raised when the backend answers with an error status or an unreadable body."""

    def __init__(
        self,
        operation: str,
        status_code: Optional[int] = None,
        body: Optional[Any] = None,
        details: Optional[str] = None,
    ):
        if details is None:
            details = f"backend answered HTTP {status_code}"
        super().__init__(
            operation,
            details,
            description="Inspect the gobench master logs for the failing request",
            error_code=ErrorCodes.API_BAD_RESPONSE,
            status_code=status_code,
            response_excerpt=str(body)[:500] if body else None,
        )
        self.body = body


class ApplicationNotFoundError(ApiError):
    """Raised when the backend does not know the requested application."""

    def __init__(self, operation: str, application_id: Any):
        super().__init__(
            operation,
            ErrorMessageTemplates.APPLICATION_NOT_FOUND.format(
                application_id=application_id
            ),
            description="Refresh the application list; it may have been deleted",
            error_code=ErrorCodes.APPLICATION_NOT_FOUND,
            status_code=404,
            application_id=application_id,
        )


class UnexpectedGatewayError(ApiError):
    """Wraps a non-client exception raised while talking to the gateway."""

    def __init__(self, operation: str, cause: BaseException):
        self.cause = cause
        super().__init__(
            operation,
            f"unexpected {type(cause).__name__}: {cause}",
            description="The application list is unchanged; the next refresh retries",
            error_code=ErrorCodes.API_UNEXPECTED,
        )
