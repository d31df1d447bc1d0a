"""
Client-visible routes and an in-memory navigation history.
"""

import logging
from typing import Any, List, Optional
from urllib.parse import parse_qs, urlencode, urlsplit

from gobench_client.constants import (
    APPLICATION_ROUTE,
    CLONE_QUERY_PARAM,
    CREATE_APPLICATION_ROUTE,
    ROOT_ROUTE,
)

logger = logging.getLogger(__name__)


def application_detail(application_id: Any) -> str:
    return APPLICATION_ROUTE.format(id=application_id)


def create_application(clone_of: Optional[str] = None) -> str:
    if clone_of is None:
        return CREATE_APPLICATION_ROUTE
    return f"{CREATE_APPLICATION_ROUTE}?{urlencode({CLONE_QUERY_PARAM: clone_of})}"


def clone_source(route: str) -> Optional[str]:
    """Name of the application a creation route asks to clone, if any."""
    parts = urlsplit(route)
    if parts.path != CREATE_APPLICATION_ROUTE:
        return None
    values = parse_qs(parts.query).get(CLONE_QUERY_PARAM)
    return values[0] if values else None


def application_id_from(route: str) -> Optional[str]:
    prefix = APPLICATION_ROUTE.split("{", 1)[0]
    path = urlsplit(route).path
    if path.startswith(prefix) and len(path) > len(prefix):
        return path[len(prefix):]
    return None


class HistoryNavigator:
    """Browser-history-like navigator; ``current`` is the top of the stack."""

    def __init__(self, initial: str = ROOT_ROUTE):
        self.history: List[str] = [initial]

    @property
    def current(self) -> str:
        return self.history[-1]

    def push(self, route: str) -> None:
        logger.debug(f"Navigate {self.current} -> {route}")
        self.history.append(route)

    def go_back(self) -> None:
        if len(self.history) > 1:
            self.history.pop()
