"""Holded API client for employees, projects and project time tracking.

Holded (https://developers.holded.com) authenticates every call with a
per-account API key sent in the ``key`` header. Two API families are used:

- Projects API: projects and their time-tracking entries
- Team API: employees

The client holds exactly one key, is created per request and is closed when
the request completes. Responses are returned as parsed JSON without any
interpretation of their schema.
"""

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from holded_bridge.config import (
    DEFAULT_HOLDED_PROJECTS_BASE_URL,
    DEFAULT_HOLDED_TEAM_BASE_URL,
    Settings,
)
from holded_bridge.infrastructure.holded.payloads import (
    coerce_number,
    strip_empty,
    to_query_params,
)
from holded_bridge.observability.metrics import HOLDED_API_REQUESTS
from holded_bridge.shared.exceptions import HoldedAPIError

logger = logging.getLogger(__name__)


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


class HoldedClient:
    """Thin async wrapper around the Holded projects and team APIs.

    Usage::

        async with HoldedClient(api_key) as holded:
            employees = await holded.get_employees()
    """

    def __init__(
        self,
        api_key: str,
        *,
        projects_base_url: str = DEFAULT_HOLDED_PROJECTS_BASE_URL,
        team_base_url: str = DEFAULT_HOLDED_TEAM_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the Holded client.

        Args:
            api_key: Holded API key for a single account
            projects_base_url: Base URL of the projects API
            team_base_url: Base URL of the team API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._api_key = api_key
        self.projects_base_url = projects_base_url.rstrip("/")
        self.team_base_url = team_base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(
        cls,
        api_key: str,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HoldedClient":
        return cls(
            api_key,
            projects_base_url=settings.holded_projects_base_url,
            team_base_url=settings.holded_team_base_url,
            timeout=settings.holded_timeout_seconds,
            transport=transport,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={
                    "accept": "application/json",
                    "key": self._api_key,
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HoldedClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _request_json(
        self,
        operation: str,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Perform one call and parse the JSON body.

        Raises:
            HoldedAPIError: transport failure, HTTP status >= 400 or non-JSON body
        """
        client = await self._get_client()

        try:
            response = await client.request(method, url, params=params or None, json=json)
        except httpx.RequestError as e:
            HOLDED_API_REQUESTS.labels(operation=operation, outcome="transport_error").inc()
            raise HoldedAPIError(
                f"Holded request failed: {e}",
                operation=operation,
            ) from e

        if response.status_code >= 400:
            HOLDED_API_REQUESTS.labels(operation=operation, outcome="http_error").inc()
            logger.warning(f"Holded {operation} returned HTTP {response.status_code}")
            raise HoldedAPIError(
                f"Holded returned HTTP {response.status_code}",
                operation=operation,
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            HOLDED_API_REQUESTS.labels(operation=operation, outcome="invalid_body").inc()
            raise HoldedAPIError(
                "Holded returned a non-JSON body",
                operation=operation,
                status_code=response.status_code,
                body=response.text,
            ) from e

        HOLDED_API_REQUESTS.labels(operation=operation, outcome="success").inc()
        return data

    async def get_employees(self) -> Any:
        """List the account's employees (team API)."""
        return await self._request_json(
            "get_employees",
            "GET",
            f"{self.team_base_url}/employees",
        )

    async def get_projects(self, filters: Mapping[str, Any] | None = None) -> Any:
        """List projects.

        Args:
            filters: Optional filters (name, status, archived, customerId,
                page, limit, ...). Empty values are dropped and the rest are
                sent as query parameters.
        """
        return await self._request_json(
            "get_projects",
            "GET",
            f"{self.projects_base_url}/projects",
            params=to_query_params(filters),
        )

    async def register_time(
        self,
        project_id: str,
        user_id: str,
        duration: int | float | str,
    ) -> Any:
        """Register a time entry on a project.

        Args:
            project_id: Holded project ID
            user_id: Holded employee/user ID
            duration: Duration in seconds; numeric strings are accepted

        Raises:
            ValidationError: If duration is not numeric
        """
        body = {"userId": user_id, "duration": coerce_number(duration, "duration")}
        return await self._request_json(
            "register_time",
            "POST",
            f"{self.projects_base_url}/projects/{_segment(project_id)}/times",
            json=body,
        )

    async def get_project_time_slots(self, project_id: str) -> Any:
        """List the time-tracking entries of a project."""
        return await self._request_json(
            "get_project_time_slots",
            "GET",
            f"{self.projects_base_url}/projects/{_segment(project_id)}/times",
        )

    async def update_project_time(
        self,
        project_id: str,
        time_tracking_id: str,
        payload: Mapping[str, Any],
    ) -> Any:
        """Update fields of an existing time-tracking entry.

        Only non-empty fields of ``payload`` are sent.
        """
        return await self._request_json(
            "update_project_time",
            "PUT",
            f"{self.projects_base_url}/projects/{_segment(project_id)}"
            f"/times/{_segment(time_tracking_id)}",
            json=strip_empty(payload),
        )
