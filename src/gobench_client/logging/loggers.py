"""
Logger wrapper attaching a correlation id and the client's structured
context (operation, application id, error code) to every record.
"""

import logging
from typing import Any, Dict, Optional
from uuid import uuid4


class ClientLogger:
    """Logger wrapper adding a correlation id and structured context to every record."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())[:8]
        self.extra_context: Dict[str, Any] = {}

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs):
        if not self.logger.isEnabledFor(level):
            return
        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        context = dict(self.extra_context)
        context.update((k, v) for k, v in kwargs.items() if v is not None)
        if context:
            extra["extra_context"] = context

        self.logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, **kwargs):
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log at ERROR with the active exception's traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def with_context(self, **kwargs) -> "ClientLogger":
        """Child logger sharing the correlation id, with extra context (e.g. one operation)."""
        child = ClientLogger(self.logger.name, self.correlation_id)
        child.extra_context = dict(self.extra_context)
        child.extra_context.update((k, v) for k, v in kwargs.items() if v is not None)
        return child
