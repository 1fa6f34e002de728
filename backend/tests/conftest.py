"""
Pytest configuration and fixtures for Holded Bridge tests.
"""
import json
from typing import Any

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from holded_bridge.api.deps import get_holded_client_factory
from holded_bridge.config import Settings
from holded_bridge.infrastructure.credentials import (
    CredentialChain,
    EnvironmentCredentialProvider,
)
from holded_bridge.infrastructure.holded import HoldedClient
from holded_bridge.main import create_app

TEST_API_KEY = "test-holded-key"


class FakeHolded:
    """Stand-in for the Holded API behind an httpx.MockTransport.

    Records every request; answers with ``payload`` (JSON) and
    ``status_code`` unless ``raw_body`` or ``error`` is set.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = {"status": 1}
        self.raw_body: bytes | None = None
        self.error: Exception | None = None
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def holded_api() -> FakeHolded:
    return FakeHolded()


@pytest.fixture
def holded_client(holded_api: FakeHolded) -> HoldedClient:
    return HoldedClient(TEST_API_KEY, transport=holded_api.transport)


@pytest.fixture
def holded_api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    """Expose the Holded key through the environment fallback."""
    monkeypatch.setenv("HOLDED_API_KEY", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def no_holded_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOLDED_API_KEY", raising=False)


@pytest.fixture
def app(holded_api: FakeHolded) -> FastAPI:
    """Test application: environment-only credential chain, fake Holded transport."""
    application = create_app()
    application.state.credential_chain = CredentialChain([EnvironmentCredentialProvider()])

    def _fake_factory() -> Any:
        return lambda api_key: HoldedClient(api_key, transport=holded_api.transport)

    application.dependency_overrides[get_holded_client_factory] = _fake_factory
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create sync test client."""
    return TestClient(app)
