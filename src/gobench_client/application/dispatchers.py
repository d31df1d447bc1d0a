"""
Action dispatchers: create, clone, delete and cancel.

Each dispatcher validates its input before touching the network, calls
the gateway, then explicitly refreshes the store and navigates. Every
failure is reported to the error surface; the store is only ever changed
by a complete refresh.
"""

from typing import Any, Callable, Dict, Optional

from gobench_client.exceptions import (
    GobenchClientError,
    MissingIdError,
    MissingNameError,
    MissingScenarioError,
)
from gobench_client.logging import get_logger
from gobench_client.models import Application, encode_scenario

from . import routes
from .protocols import ApplicationGateway, ErrorSurface, Navigator
from .store import ApplicationStore

logger = get_logger(__name__)


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _missing_id(application_id: Any) -> bool:
    return application_id is None or (
        isinstance(application_id, str) and application_id.strip() == ""
    )


class ApplicationDispatchers:
    def __init__(
        self,
        store: ApplicationStore,
        gateway: ApplicationGateway,
        navigator: Navigator,
        error_surface: ErrorSurface,
    ):
        self.store = store
        self.gateway = gateway
        self.navigator = navigator
        self.error_surface = error_surface

    def handles(self) -> Dict[str, Callable]:
        """Handles to register on the store, keyed by snapshot attribute."""
        return {
            "create": self.create,
            "clone": self.clone,
            "delete": self.delete,
            "cancel": self.cancel,
        }

    async def create(self, name: Optional[str], scenario: Optional[str]) -> Optional[Application]:
        """Create an application and open its detail view.

        Returns the created record, or None when validation or the backend
        call failed (the error has been reported).
        """
        if _blank(name):
            return self._fail(MissingNameError())
        if _blank(scenario):
            return self._fail(MissingScenarioError())

        try:
            created = await self.gateway.create(
                {"name": name, "scenario": encode_scenario(scenario)}
            )
        except GobenchClientError as e:
            return self._fail(e)

        logger.info(f"Application {created} created", operation="create", application_id=created.id)
        await self._refresh_after("create")
        self.navigator.push(routes.application_detail(created.id))
        return created

    def clone(self, name: str) -> None:
        """Open the creation view pre-filled from the application ``name``."""
        self.navigator.push(routes.create_application(clone_of=name))

    async def delete(self, application_id: Any) -> bool:
        if _missing_id(application_id):
            self._fail(MissingIdError("delete"))
            return False

        try:
            await self.gateway.delete(application_id)
        except GobenchClientError as e:
            self._fail(e.in_context(application_id=application_id))
            return False

        logger.info(f"Application {application_id} deleted", operation="delete", application_id=application_id)
        await self._refresh_after("delete")
        self.navigator.push(routes.ROOT_ROUTE)
        return True

    async def cancel(self, application_id: Any) -> bool:
        if _missing_id(application_id):
            self._fail(MissingIdError("cancel"))
            return False

        try:
            await self.gateway.cancel(application_id)
        except GobenchClientError as e:
            self._fail(e.in_context(application_id=application_id))
            return False

        logger.info(
            f"Application {application_id} cancelled", operation="cancel", application_id=application_id
        )
        await self._refresh_after("cancel")
        return True

    async def _refresh_after(self, operation: str) -> None:
        # The mutation already succeeded; a failed re-list only leaves the view stale.
        try:
            await self.store.refresh()
        except GobenchClientError as e:
            logger.warning(f"Refresh after {operation} failed: {e.message}", after=operation, **e.log_fields())
            self.error_surface.report(e)

    def _fail(self, error: GobenchClientError) -> None:
        self.error_surface.report(error)
        return None
