"""
Creation view state, including the clone pre-fill.

A form built from a clone route (``/application-create?n=<name>``) copies
the named application's scenario and derives a fresh name from it. The
pre-fill is applied at most once per form: if the application is not in
the store yet the form waits for the next snapshot, and once applied no
later snapshot touches the fields again.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from gobench_client.models import Application

from . import routes
from .dispatchers import ApplicationDispatchers
from .store import ApplicationStore, StoreSnapshot

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def clone_timestamp(moment: datetime) -> str:
    """``Y-M-D-H-Min-Sec`` in UTC without padding.

    The month is zero-based (January is 0), matching the names the web
    client has always generated.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return (
        f"{moment.year}-{moment.month - 1}-{moment.day}-"
        f"{moment.hour}-{moment.minute}-{moment.second}"
    )


def clone_name(original: str, moment: datetime) -> str:
    return f"{original}-{clone_timestamp(moment)}"


class CreateApplicationForm:
    def __init__(
        self,
        store: ApplicationStore,
        dispatchers: ApplicationDispatchers,
        route: str = routes.CREATE_APPLICATION_ROUTE,
        clock: Clock = utc_now,
    ):
        self.store = store
        self.dispatchers = dispatchers
        self.clock = clock
        self.clone_of = routes.clone_source(route)
        self.name = ""
        self.scenario = ""
        self.prefill_applied = False
        self.cloned_from: Optional[Application] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

        if self.clone_of is not None and not self._try_prefill(store.snapshot):
            self._unsubscribe = store.subscribe(self._on_snapshot)

    @property
    def is_clone(self) -> bool:
        return self.clone_of is not None

    @property
    def submit_label(self) -> str:
        return "Clone Application" if self.is_clone else "Create Application"

    def set_name(self, value: str) -> None:
        self.name = value

    def set_scenario(self, value: str) -> None:
        self.scenario = value

    async def submit(self) -> Optional[Application]:
        return await self.dispatchers.create(self.name, self.scenario)

    def cancel(self) -> None:
        self.close()
        self.dispatchers.navigator.go_back()

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_snapshot(self, snapshot: StoreSnapshot) -> None:
        if self._try_prefill(snapshot):
            self.close()

    def _try_prefill(self, snapshot: StoreSnapshot) -> bool:
        if self.prefill_applied:
            return True
        source = snapshot.find(self.clone_of)
        if source is None:
            return False

        self.name = clone_name(self.clone_of, self.clock())
        self.scenario = source.scenario
        self.cloned_from = source
        self.prefill_applied = True
        logger.debug(f"Pre-filled creation form from {source}")
        return True
