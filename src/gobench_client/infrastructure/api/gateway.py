"""
gobench master REST API gateway.

Blocking client for the four application operations the core consumes.
Transport failures and error statuses are turned into ``ApiError``
subclasses so callers only ever handle the client's own exception types.
"""

import logging
from typing import Any, List, Optional

import requests

from gobench_client.constants import APPLICATIONS_ENDPOINT, HTTP_STATUS_NOT_FOUND
from gobench_client.exceptions import (
    ApiConnectionError,
    ApiError,
    ApiResponseError,
    ApplicationNotFoundError,
)
from gobench_client.infrastructure.http import HttpClient
from gobench_client.models import Application

logger = logging.getLogger(__name__)


class GobenchApi:
    """Blocking gateway over the ``/api/applications`` resource."""

    def __init__(self, http_client: HttpClient):
        self.http = http_client

    @classmethod
    def from_config(cls, api_config, session: Optional[requests.Session] = None) -> "GobenchApi":
        return cls(
            HttpClient(
                api_config.base_url,
                session=session,
                timeout=api_config.timeout,
                max_retries=api_config.max_retries,
                backoff_factor=api_config.backoff_factor,
            )
        )

    def list_applications(self) -> List[Application]:
        payload = self._send("list", "GET", APPLICATIONS_ENDPOINT)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ApiResponseError(
                "list", details="expected a JSON array of applications", body=payload
            )
        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                raise ApiResponseError(
                    "list",
                    details=f"application #{index} is not a JSON object",
                    body=payload,
                )
        return [Application.from_dict(item) for item in payload]

    def create_application(self, name: str, scenario_payload: str) -> Application:
        """Create an application; ``scenario_payload`` is already base64 encoded."""
        payload = self._send(
            "create",
            "POST",
            APPLICATIONS_ENDPOINT,
            json={"name": name, "scenario": scenario_payload},
        )
        if not isinstance(payload, dict) or payload.get("id") is None:
            raise ApiResponseError(
                "create", details="response carries no application id", body=payload
            )
        application = Application.from_dict(payload)
        logger.info(f"Created application {application}")
        return application

    def delete_application(self, application_id: Any) -> None:
        self._send(
            "delete",
            "DELETE",
            f"{APPLICATIONS_ENDPOINT}/{application_id}",
            application_id=application_id,
        )
        logger.info(f"Deleted application {application_id}")

    def cancel_application(self, application_id: Any) -> None:
        self._send(
            "cancel",
            "PUT",
            f"{APPLICATIONS_ENDPOINT}/{application_id}/cancel",
            application_id=application_id,
        )
        logger.info(f"Cancelled application {application_id}")

    def close(self) -> None:
        self.http.close()

    def _send(
        self,
        operation: str,
        method: str,
        endpoint: str,
        application_id: Optional[Any] = None,
        **kwargs
    ) -> Any:
        try:
            response = self.http.request(method, endpoint, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise ApiConnectionError(operation, self.http.url_for(endpoint), str(e)) from e
        except requests.RequestException as e:
            raise ApiError(operation, f"request failed: {e}") from e

        if response.status_code == HTTP_STATUS_NOT_FOUND and application_id is not None:
            raise ApplicationNotFoundError(operation, application_id)
        if response.status_code >= 400:
            raise ApiResponseError(operation, response.status_code, body=response.text)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiResponseError(
                operation,
                response.status_code,
                body=response.text,
                details=f"response is not valid JSON: {e}",
            ) from e
