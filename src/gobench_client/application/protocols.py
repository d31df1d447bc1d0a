"""
Collaborator protocols for the application synchronization layer.

The store, scheduler and dispatchers depend only on these interfaces,
which lets the CLI, tests and any other presentation layer inject their
own implementations.
"""

from typing import Any, List, Mapping, Protocol, runtime_checkable

from gobench_client.exceptions import GobenchClientError
from gobench_client.models import Application


@runtime_checkable
class ApplicationGateway(Protocol):
    """Awaitable access to the remote application resource."""

    async def list(self) -> List[Application]:
        """Return the application collection in backend order."""
        ...

    async def create(self, record: Mapping[str, str]) -> Application:
        """Create from ``{"name", "scenario"}`` where scenario is base64 text."""
        ...

    async def delete(self, application_id: Any) -> None:
        ...

    async def cancel(self, application_id: Any) -> None:
        """Cancel a running benchmark without deleting the record."""
        ...


@runtime_checkable
class ErrorSurface(Protocol):
    """User-facing sink for validation and backend errors."""

    def report(self, error: GobenchClientError) -> None:
        ...


@runtime_checkable
class Navigator(Protocol):
    """Navigation side effects of the dispatchers."""

    def push(self, route: str) -> None:
        ...

    def go_back(self) -> None:
        ...
