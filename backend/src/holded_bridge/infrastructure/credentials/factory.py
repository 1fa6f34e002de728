"""Factory for the credential chain.

The chain holds the host key-store HTTP client, so it is built once at
startup and shared; only the credential lookup itself happens per request.
"""

from holded_bridge.config import Settings
from holded_bridge.infrastructure.credentials.base import CredentialProvider
from holded_bridge.infrastructure.credentials.chain import CredentialChain
from holded_bridge.infrastructure.credentials.environment import (
    EnvironmentCredentialProvider,
)
from holded_bridge.infrastructure.credentials.host_keystore import HostKeyStoreProvider


def build_credential_chain(settings: Settings) -> CredentialChain:
    providers: list[CredentialProvider] = []
    if settings.host_api_url:
        providers.append(
            HostKeyStoreProvider(
                settings.host_api_url,
                keys_path=settings.host_keys_path,
                service_token=settings.host_service_token or None,
            )
        )
    providers.append(EnvironmentCredentialProvider())
    return CredentialChain(providers)
