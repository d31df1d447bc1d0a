"""
Polling scheduler.

Refreshes the store at a fixed interval while its owner is active. The
task is owned by whoever starts it and must be stopped on teardown; use
the scheduler as an async context manager to guarantee that.
"""

import asyncio
from typing import Optional

from gobench_client.constants import DEFAULT_POLL_INTERVAL_SECONDS
from gobench_client.exceptions import GobenchClientError, UnexpectedGatewayError
from gobench_client.logging import get_logger

from .protocols import ErrorSurface
from .store import ApplicationStore

logger = get_logger(__name__)


class PollingScheduler:
    def __init__(
        self,
        store: ApplicationStore,
        interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        error_surface: Optional[ErrorSurface] = None,
    ):
        if interval <= 0:
            raise ValueError("Polling interval must be positive")
        self.store = store
        self.interval = interval
        self.error_surface = error_surface
        self.ticks = 0
        self.refreshes = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start polling on the running event loop; a second start is a no-op."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"Polling started every {self.interval}s")

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("Polling task had already failed", operation="poll")
        logger.debug(f"Polling stopped after {self.ticks} tick(s)")

    async def __aenter__(self) -> "PollingScheduler":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    async def tick(self) -> bool:
        """Run one poll; returns whether a refresh was issued.

        Nothing is polled until the store knows at least one application.
        """
        self.ticks += 1
        if not self.store.has_apps:
            logger.debug("Skipping poll: no known applications")
            return False

        self.refreshes += 1
        try:
            await self.store.refresh()
        except GobenchClientError as e:
            logger.warning(f"Poll refresh failed: {e.message}", **e.log_fields())
            self._report(e)
        except Exception as e:
            logger.exception(f"Poll refresh failed unexpectedly: {e!r}", operation="poll")
            self._report(UnexpectedGatewayError("list", e))
        return True

    def _report(self, error: GobenchClientError) -> None:
        if self.error_surface is not None:
            self.error_surface.report(error)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self.tick()
