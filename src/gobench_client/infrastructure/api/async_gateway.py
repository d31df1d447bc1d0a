"""
Awaitable adapter over the blocking gateway.

Each call runs in a worker thread so the event loop is only suspended at
gateway boundaries and never blocked by network I/O.
"""

import asyncio
from typing import Any, List, Mapping

from gobench_client.models import Application

from .gateway import GobenchApi


class AsyncApplicationGateway:
    """Implements the ``ApplicationGateway`` protocol on top of ``GobenchApi``."""

    def __init__(self, api: GobenchApi):
        self.api = api

    async def list(self) -> List[Application]:
        return await asyncio.to_thread(self.api.list_applications)

    async def create(self, record: Mapping[str, str]) -> Application:
        return await asyncio.to_thread(
            self.api.create_application, record["name"], record["scenario"]
        )

    async def delete(self, application_id: Any) -> None:
        await asyncio.to_thread(self.api.delete_application, application_id)

    async def cancel(self, application_id: Any) -> None:
        await asyncio.to_thread(self.api.cancel_application, application_id)

    def close(self) -> None:
        self.api.close()
