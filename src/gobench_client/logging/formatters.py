"""
Log formatters.

``StructuredFormatter`` writes one JSON object per record. The fields the
client attaches through ``ClientLogger`` (operation, application id, error
code and id) become top-level keys so log queries can filter on them; any
other context goes under ``context``.
"""

import json
import logging
import traceback
from datetime import datetime, timezone

from rich.console import Console
from rich.logging import RichHandler

from ..constants import DEFAULT_SERVICE_NAME

TOP_LEVEL_FIELDS = ("operation", "application_id", "error_code", "error_id")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME, version: str = "unknown"):
        super().__init__()
        self.service_name = service_name
        self.version = version

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "version": self.version,
        }

        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            entry["correlation_id"] = correlation_id

        context = dict(getattr(record, "extra_context", None) or {})
        for key in TOP_LEVEL_FIELDS:
            if key in context:
                entry[key] = context.pop(key)
        if context:
            entry["context"] = context

        if record.exc_info and record.exc_info[0] is not None:
            error = record.exc_info[1]
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": getattr(error, "message", str(error)),
                "traceback": traceback.format_exception(*record.exc_info),
            }
            code = getattr(error, "error_code", None)
            if code:
                entry.setdefault("error_code", code)

        return json.dumps(entry, default=str)


def create_console_formatter() -> logging.Formatter:
    """Human-readable single-line format for the console and log files."""
    return logging.Formatter(
        "%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_rich_handler() -> logging.Handler:
    """Rich handler writing to stderr so command output on stdout stays clean."""
    return RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
