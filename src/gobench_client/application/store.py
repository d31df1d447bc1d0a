"""
Shared application store.

Single source of truth for the application collection and the mutation
handles. Consumers read ``snapshot`` or subscribe to receive every new
snapshot. Snapshots are immutable; each change builds a new one.

Refreshes are sequenced: every call to ``refresh`` takes a number when it
is issued, and a response is applied only if no later-issued refresh has
already been applied. Overlapping refreshes therefore resolve to the most
recently issued one, whatever order their responses arrive in.
"""

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, List, Mapping, Optional, Tuple

from gobench_client.models import Application

from .protocols import ApplicationGateway

logger = logging.getLogger(__name__)

HANDLE_NAMES = ("create", "clone", "delete", "cancel")

Listener = Callable[["StoreSnapshot"], None]


@dataclass(frozen=True)
class StoreSnapshot:
    """Versioned view combining the collection and the registered handles."""

    apps: Optional[Tuple[Application, ...]] = None
    loading: bool = True
    version: int = 0
    handles: Mapping[str, Callable] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def create(self) -> Optional[Callable]:
        return self.handles.get("create")

    @property
    def clone(self) -> Optional[Callable]:
        return self.handles.get("clone")

    @property
    def delete(self) -> Optional[Callable]:
        return self.handles.get("delete")

    @property
    def cancel(self) -> Optional[Callable]:
        return self.handles.get("cancel")

    @property
    def has_apps(self) -> bool:
        return bool(self.apps)

    def find(self, name: str) -> Optional[Application]:
        for app in self.apps or ():
            if app.name == name:
                return app
        return None


class ApplicationStore:
    def __init__(self, gateway: ApplicationGateway):
        self.gateway = gateway
        self._snapshot = StoreSnapshot()
        self._listeners: List[Listener] = []
        self._issued_seq = 0
        self._applied_seq = 0

    @property
    def snapshot(self) -> StoreSnapshot:
        return self._snapshot

    @property
    def apps(self) -> Optional[Tuple[Application, ...]]:
        return self._snapshot.apps

    @property
    def loading(self) -> bool:
        return self._snapshot.loading

    @property
    def has_apps(self) -> bool:
        return self._snapshot.has_apps

    def find(self, name: str) -> Optional[Application]:
        return self._snapshot.find(name)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def register(self, name: str, handle: Callable) -> bool:
        """Attach a mutation handle once; re-registering a name is a no-op."""
        if name not in HANDLE_NAMES:
            raise ValueError(
                f"Unknown handle '{name}', expected one of: {', '.join(HANDLE_NAMES)}"
            )
        if name in self._snapshot.handles:
            return False

        handles = dict(self._snapshot.handles)
        handles[name] = handle
        self._publish(handles=MappingProxyType(handles))
        return True

    async def refresh(self) -> bool:
        """Re-list the collection and replace it wholesale.

        Returns False when the response was superseded by a later-issued
        refresh. Gateway errors propagate and leave the store untouched.
        """
        self._issued_seq += 1
        seq = self._issued_seq

        apps = await self.gateway.list()

        if seq < self._applied_seq:
            logger.debug(
                f"Discarding stale refresh #{seq}; #{self._applied_seq} already applied"
            )
            return False

        self._applied_seq = seq
        self._publish(apps=tuple(apps), loading=False)
        logger.debug(f"Refresh #{seq} applied: {len(apps)} application(s)")
        return True

    def _publish(self, **changes) -> None:
        self._snapshot = replace(
            self._snapshot, version=self._snapshot.version + 1, **changes
        )
        snapshot = self._snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception(f"Store listener {listener!r} failed")
