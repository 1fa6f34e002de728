"""FastAPI dependencies for API routes."""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request

from holded_bridge.config import Settings, get_settings
from holded_bridge.infrastructure.credentials import CredentialChain, build_credential_chain
from holded_bridge.infrastructure.holded import HoldedClient

HoldedClientFactory = Callable[[str], HoldedClient]


def get_app_settings() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_credential_chain(request: Request, settings: SettingsDep) -> CredentialChain:
    """Shared credential chain, created by the lifespan or lazily on first use."""
    chain = getattr(request.app.state, "credential_chain", None)
    if chain is None:
        chain = build_credential_chain(settings)
        request.app.state.credential_chain = chain
    return chain


def get_holded_client_factory(settings: SettingsDep) -> HoldedClientFactory:
    """Return a callable building one HoldedClient per credential."""

    def _factory(api_key: str) -> HoldedClient:
        return HoldedClient.from_settings(api_key, settings)

    return _factory


CredentialChainDep = Annotated[CredentialChain, Depends(get_credential_chain)]
HoldedClientFactoryDep = Annotated[HoldedClientFactory, Depends(get_holded_client_factory)]

__all__ = [
    "CredentialChainDep",
    "HoldedClientFactory",
    "HoldedClientFactoryDep",
    "SettingsDep",
    "get_app_settings",
    "get_credential_chain",
    "get_holded_client_factory",
]
