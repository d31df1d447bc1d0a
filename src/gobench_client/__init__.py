"""
gobench-client: operator client for gobench benchmark applications.

Keeps a local, periodically refreshed view of the applications known to a
gobench master and dispatches create, clone, delete and cancel actions
against its REST API.

Architecture Overview:
- models: Application record and scenario payload codec
- application: store, polling scheduler, dispatchers, creation form
- infrastructure: HTTP transport and API gateway
- core.config: TOML/environment configuration
- cli: command-line front end
"""

__version__ = "0.1.0"

from .application import ApplicationSession, ApplicationStore
from .exceptions import GobenchClientError
from .models import Application

__all__ = [
    "__version__",
    "Application",
    "ApplicationSession",
    "ApplicationStore",
    "GobenchClientError",
]
