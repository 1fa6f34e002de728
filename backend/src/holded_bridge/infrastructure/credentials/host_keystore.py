"""Credential provider backed by the host platform's key-store API."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from holded_bridge.infrastructure.credentials.base import CredentialProvider
from holded_bridge.shared.exceptions import HostPlatformError

logger = logging.getLogger(__name__)


class HostKeyStoreProvider(CredentialProvider):
    """Looks keys up through the host platform's HTTP key-store.

    A 404 means the key is not stored on the host; any other failure is an
    error, not a silent miss.
    """

    def __init__(
        self,
        base_url: str,
        *,
        keys_path: str = "/api/core/v1/keys/{name}",
        service_token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the key-store client.

        Args:
            base_url: Host platform API root
            keys_path: Path template with a "{name}" placeholder
            service_token: Optional host service token, sent as ``token`` query param
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.keys_path = keys_path
        self.service_token = service_token
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def provider_name(self) -> str:
        return "host_keystore"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_credential(self, name: str) -> str | None:
        client = await self._get_client()
        url = f"{self.base_url}{self.keys_path.format(name=quote(name, safe=''))}"
        params = {"token": self.service_token} if self.service_token else None

        try:
            response = await client.get(url, params=params)
        except httpx.RequestError as e:
            raise HostPlatformError(
                f"Key-store request failed: {e}", details={"key": name}
            ) from e

        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise HostPlatformError(
                f"Key-store returned HTTP {response.status_code}",
                details={"key": name, "status_code": response.status_code},
            )

        try:
            data: Any = response.json()
        except ValueError as e:
            raise HostPlatformError(
                "Key-store returned a non-JSON body", details={"key": name}
            ) from e

        value = data.get("value") if isinstance(data, dict) else None
        return str(value) if value is not None else None
