"""
Application lifecycle synchronization layer.

- store: shared application store with sequenced refreshes
- scheduler: polling of the store while applications are known
- dispatchers: create, clone, delete and cancel actions
- create_form: creation view with the one-shot clone pre-fill
- session: wiring of the above around one gateway
"""

from .create_form import CreateApplicationForm, clone_name, clone_timestamp
from .dispatchers import ApplicationDispatchers
from .notifications import ErrorNotice, NotificationCenter
from .protocols import ApplicationGateway, ErrorSurface, Navigator
from .routes import HistoryNavigator
from .scheduler import PollingScheduler
from .session import ApplicationSession
from .store import ApplicationStore, StoreSnapshot

__all__ = [
    "ApplicationStore",
    "StoreSnapshot",
    "PollingScheduler",
    "ApplicationDispatchers",
    "CreateApplicationForm",
    "ApplicationSession",
    "HistoryNavigator",
    "NotificationCenter",
    "ErrorNotice",
    "ApplicationGateway",
    "ErrorSurface",
    "Navigator",
    "clone_name",
    "clone_timestamp",
]
