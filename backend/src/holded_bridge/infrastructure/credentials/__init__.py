"""Credential providers: host key-store first, environment as fallback."""

from holded_bridge.infrastructure.credentials.base import CredentialProvider
from holded_bridge.infrastructure.credentials.chain import CredentialChain
from holded_bridge.infrastructure.credentials.environment import (
    EnvironmentCredentialProvider,
)
from holded_bridge.infrastructure.credentials.factory import build_credential_chain
from holded_bridge.infrastructure.credentials.host_keystore import HostKeyStoreProvider

__all__ = [
    "CredentialChain",
    "CredentialProvider",
    "EnvironmentCredentialProvider",
    "HostKeyStoreProvider",
    "build_credential_chain",
]
