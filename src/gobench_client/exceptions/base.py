"""
Base exception for the gobench client.

A client error carries what the error surface shows (a short ``message``
and a longer ``description``) and where it happened: the client
operation, the application it targeted and, for backend failures, the
HTTP status. Loggers and notices read the same fields.
"""

import uuid
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ExceptionContext:
    """Where an error happened."""

    operation: Optional[str] = None
    application_id: Optional[Any] = None
    field: Optional[str] = None
    status_code: Optional[int] = None

    def as_fields(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


class GobenchClientError(Exception):
    """Base exception for all gobench client errors.

    Attributes:
        message: Short text shown first on the error surface
        description: Longer explanation shown under the message
        error_code: Stable code for programmatic handling (see ``ErrorCodes``)
        context: ``ExceptionContext`` naming the operation and application
        user_action: Optional command the user can run to recover
        response_excerpt: Start of the backend response body, kept for logs
        correlation_id: Short id tying the notice to its log lines
    """

    def __init__(
        self,
        message: str,
        description: Optional[str] = None,
        error_code: Optional[str] = None,
        context: Optional[ExceptionContext] = None,
        user_action: Optional[str] = None,
        response_excerpt: Optional[str] = None,
    ):
        self.message = message
        self.description = description
        self.error_code = error_code
        self.context = context or ExceptionContext()
        self.user_action = user_action
        self.response_excerpt = response_excerpt
        self.correlation_id = str(uuid.uuid4())[:8]
        super().__init__(message)

    @property
    def operation(self) -> Optional[str]:
        return self.context.operation

    @property
    def application_id(self) -> Optional[Any]:
        return self.context.application_id

    def __str__(self) -> str:
        if self.description:
            return f"{self.message} ({self.description})"
        return self.message

    def in_context(self, **changes) -> "GobenchClientError":
        """Record where the error happened once the caller knows it."""
        self.context = replace(self.context, **changes)
        return self

    def log_fields(self) -> Dict[str, Any]:
        """Structured fields for ``ClientLogger`` calls about this error."""
        fields = self.context.as_fields()
        fields["error_code"] = self.error_code
        fields["error_id"] = self.correlation_id
        return fields
