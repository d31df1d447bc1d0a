"""
Unit tests for logging formatters and the client logger.
"""

import json
import logging
import sys

from rich.logging import RichHandler

from gobench_client.exceptions import ApplicationNotFoundError
from gobench_client.logging import (
    ClientLogger,
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)


def make_record(msg="Test message", exc_info=None, **attrs):
    record = logging.LogRecord(
        name="gobench_client.test",
        level=logging.INFO,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.created = 1709633229.0
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_defaults(self):
        formatter = StructuredFormatter()
        assert formatter.service_name == "gobench-client"
        assert formatter.version == "unknown"

    def test_format_basic_record(self):
        entry = json.loads(StructuredFormatter("svc", "1.0").format(make_record()))

        assert entry == {
            "timestamp": "2024-03-05T10:07:09+00:00",
            "level": "INFO",
            "logger": "gobench_client.test",
            "message": "Test message",
            "service": "svc",
            "version": "1.0",
        }

    def test_operation_and_application_are_top_level(self):
        record = make_record(
            correlation_id="abc",
            extra_context={"operation": "delete", "application_id": 3, "after": "delete"},
        )
        entry = json.loads(StructuredFormatter().format(record))

        assert entry["correlation_id"] == "abc"
        assert entry["operation"] == "delete"
        assert entry["application_id"] == 3
        assert entry["context"] == {"after": "delete"}

    def test_client_exception_carries_error_code(self):
        try:
            raise ApplicationNotFoundError("cancel", 9)
        except ApplicationNotFoundError:
            record = make_record(exc_info=sys.exc_info())

        entry = json.loads(StructuredFormatter().format(record))
        assert entry["exception"]["type"] == "ApplicationNotFoundError"
        assert entry["exception"]["message"] == "API cancel: Application 9 not found"
        assert entry["error_code"] == "APPLICATION_NOT_FOUND"

    def test_other_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record(exc_info=sys.exc_info())

        entry = json.loads(StructuredFormatter().format(record))
        assert entry["exception"]["message"] == "boom"
        assert "error_code" not in entry


class TestOtherFormatters:
    def test_console_formatter(self):
        output = create_console_formatter().format(make_record())
        assert "[    INFO] gobench_client.test: Test message" in output

    def test_rich_handler(self):
        assert isinstance(create_rich_handler(), RichHandler)


class TestClientLogger:
    def test_records_carry_correlation_and_context(self, caplog):
        logger = ClientLogger("gobench_client.test", correlation_id="cid")

        with caplog.at_level(logging.INFO, logger="gobench_client.test"):
            logger.info("refreshed", operation="list", application_id=None)

        record = caplog.records[0]
        assert record.correlation_id == "cid"
        assert record.extra_context == {"operation": "list"}

    def test_disabled_level_emits_nothing(self, caplog):
        logger = ClientLogger("gobench_client.test")
        with caplog.at_level(logging.WARNING, logger="gobench_client.test"):
            logger.debug("hidden", operation="list")
        assert caplog.records == []

    def test_exception_includes_traceback(self, caplog):
        logger = ClientLogger("gobench_client.test")
        with caplog.at_level(logging.ERROR, logger="gobench_client.test"):
            try:
                raise RuntimeError("x")
            except RuntimeError:
                logger.exception("failed")

        assert caplog.records[0].exc_info is not None

    def test_with_context_shares_correlation(self, caplog):
        base = ClientLogger("gobench_client.test", correlation_id="cid")
        child = base.with_context(operation="delete", application_id=4)

        with caplog.at_level(logging.INFO, logger="gobench_client.test"):
            child.info("deleted", after="delete")

        assert caplog.records[0].correlation_id == "cid"
        assert caplog.records[0].extra_context == {
            "operation": "delete", "application_id": 4, "after": "delete",
        }
        assert base.extra_context == {}
