"""
Application session: the composition root of the synchronization layer.

Builds the store and dispatchers around one gateway, registers the
mutation handles on the store, performs the initial load and owns the
polling scheduler for as long as the session is open.

Usage:
    async with ApplicationSession(gateway, poll_interval=10) as session:
        session.store.subscribe(render)
        await session.dispatchers.create("load-test", scenario)
"""

from typing import Optional

from gobench_client.constants import DEFAULT_POLL_INTERVAL_SECONDS
from gobench_client.exceptions import GobenchClientError, UnexpectedGatewayError
from gobench_client.logging import get_logger

from .create_form import Clock, CreateApplicationForm, utc_now
from .dispatchers import ApplicationDispatchers
from .notifications import NotificationCenter
from .protocols import ApplicationGateway, ErrorSurface, Navigator
from .routes import HistoryNavigator
from .scheduler import PollingScheduler
from .store import ApplicationStore

logger = get_logger(__name__)


class ApplicationSession:
    def __init__(
        self,
        gateway: ApplicationGateway,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        navigator: Optional[Navigator] = None,
        error_surface: Optional[ErrorSurface] = None,
        poll: bool = True,
    ):
        self.gateway = gateway
        self.navigator = navigator if navigator is not None else HistoryNavigator()
        self.error_surface = error_surface if error_surface is not None else NotificationCenter()
        self.store = ApplicationStore(gateway)
        self.dispatchers = ApplicationDispatchers(
            self.store, gateway, self.navigator, self.error_surface
        )
        self.scheduler = PollingScheduler(self.store, poll_interval, self.error_surface)
        self.poll = poll

        for name, handle in self.dispatchers.handles().items():
            self.store.register(name, handle)

    async def load(self) -> bool:
        """Initial list; failures are reported and leave ``apps`` unknown."""
        try:
            return await self.store.refresh()
        except GobenchClientError as e:
            logger.error(f"Initial application load failed: {e.message}", **e.log_fields())
            self.error_surface.report(e)
            return False
        except Exception as e:
            logger.exception(f"Initial application load failed unexpectedly: {e!r}", operation="load")
            self.error_surface.report(UnexpectedGatewayError("list", e))
            return False

    def creation_form(self, route: Optional[str] = None, clock: Clock = utc_now) -> CreateApplicationForm:
        """Creation view for ``route``, defaulting to the navigator's current route."""
        if route is None:
            route = getattr(self.navigator, "current", None) or ""
        return CreateApplicationForm(self.store, self.dispatchers, route, clock)

    async def open(self) -> None:
        await self.load()
        if self.poll:
            self.scheduler.start()

    async def close(self) -> None:
        await self.scheduler.stop()

    async def __aenter__(self) -> "ApplicationSession":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
