"""
User-facing error notices.

``NotificationCenter`` is the default ``ErrorSurface``: it keeps the
reported notices, logs them with the error's operation and application
context and forwards them to any listener (the CLI prints them).
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from gobench_client.exceptions import GobenchClientError, ValidationError
from gobench_client.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ErrorNotice:
    type: str
    message: str
    description: Optional[str]
    error_code: Optional[str] = None
    correlation_id: Optional[str] = None

    @classmethod
    def from_exception(cls, error: GobenchClientError) -> "ErrorNotice":
        return cls(
            type="error",
            message=error.message,
            description=error.description,
            error_code=error.error_code,
            correlation_id=error.correlation_id,
        )


NoticeListener = Callable[[ErrorNotice, GobenchClientError], None]


class NotificationCenter:
    def __init__(self):
        self.notices: List[ErrorNotice] = []
        self._listeners: List[NoticeListener] = []

    @property
    def last(self) -> Optional[ErrorNotice]:
        return self.notices[-1] if self.notices else None

    def report(self, error: GobenchClientError) -> None:
        notice = ErrorNotice.from_exception(error)
        self.notices.append(notice)

        if isinstance(error, ValidationError):
            logger.warning(f"Validation failed: {notice.message}", **error.log_fields())
        else:
            logger.error(notice.message, **error.log_fields())

        for listener in list(self._listeners):
            listener(notice, error)

    def add_listener(self, listener: NoticeListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self.remove_listener(listener)

    def remove_listener(self, listener: NoticeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def clear(self) -> None:
        self.notices.clear()
