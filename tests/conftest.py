"""
Pytest configuration and shared fixtures for gobench client tests.
"""

import dataclasses
import itertools
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pytest

from gobench_client.application import (
    ApplicationDispatchers,
    ApplicationStore,
    HistoryNavigator,
    NotificationCenter,
)
from gobench_client.constants import ENV_PREFIX
from gobench_client.exceptions import ApplicationNotFoundError, GobenchClientError
from gobench_client.models import Application, decode_scenario


class FakeGateway:
    """In-memory stand-in for the gobench master.

    Behaves like the backend: create assigns ids, delete removes records,
    cancel moves the status to ``cancel``, and ``list`` returns a fresh list
    every call. Set ``failures[op]`` to make an operation raise.
    """

    def __init__(self, apps: Optional[List[Application]] = None):
        self.apps: List[Application] = list(apps or [])
        self.calls: List[tuple] = []
        self.failures: Dict[str, GobenchClientError] = {}
        self._ids = itertools.count(100)
        self.closed = False

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)

    def _record(self, operation: str, argument: Any = None) -> None:
        self.calls.append((operation, argument))
        if operation in self.failures:
            raise self.failures[operation]

    async def list(self) -> List[Application]:
        self._record("list")
        return list(self.apps)

    async def create(self, record: Mapping[str, str]) -> Application:
        self._record("create", dict(record))
        app = Application(
            name=record["name"],
            scenario=decode_scenario(record["scenario"]),
            id=next(self._ids),
            status="pending",
        )
        self.apps.append(app)
        return app

    async def delete(self, application_id: Any) -> None:
        self._record("delete", application_id)
        before = len(self.apps)
        self.apps = [a for a in self.apps if str(a.id) != str(application_id)]
        if len(self.apps) == before:
            raise ApplicationNotFoundError("delete", application_id)

    async def cancel(self, application_id: Any) -> None:
        self._record("cancel", application_id)
        for i, app in enumerate(self.apps):
            if str(app.id) == str(application_id):
                self.apps[i] = dataclasses.replace(app, status="cancel")
                return
        raise ApplicationNotFoundError("cancel", application_id)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def config_file(temp_dir):
    """Path of a not-yet-written config file."""
    return temp_dir / ".config" / "gobench-client" / "config.toml"


@pytest.fixture
def sample_apps():
    return [
        Application(name="load-test", scenario="package main\n\nfunc main() {}\n", id=1, status="finished"),
        Application(name="smoke", scenario="// smoke ✓ 負荷\n", id=2, status="running"),
    ]


@pytest.fixture
def fake_gateway(sample_apps):
    return FakeGateway(sample_apps)


@pytest.fixture
def empty_gateway():
    return FakeGateway()


@pytest.fixture
def notifications():
    return NotificationCenter()


@pytest.fixture
def navigator():
    return HistoryNavigator()


@pytest.fixture
def store(fake_gateway):
    return ApplicationStore(fake_gateway)


@pytest.fixture
def dispatchers(store, fake_gateway, navigator, notifications):
    return ApplicationDispatchers(store, fake_gateway, navigator, notifications)


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure GOBENCH_* environment variables do not leak into tests."""
    for var in list(os.environ):
        if var.startswith(ENV_PREFIX):
            monkeypatch.delenv(var, raising=False)
    yield
