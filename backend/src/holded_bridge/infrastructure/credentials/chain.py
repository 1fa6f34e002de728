"""Ordered credential provider chain."""

from holded_bridge.infrastructure.credentials.base import CredentialProvider
from holded_bridge.shared.exceptions import CredentialNotFoundError
from holded_bridge.shared.logging import get_logger

logger = get_logger(__name__)


class CredentialChain:
    """Tries each provider in order; the first non-empty value wins.

    Nothing is cached: every ``resolve`` call asks the providers again.
    """

    def __init__(self, providers: list[CredentialProvider]):
        self.providers = list(providers)

    @property
    def provider_names(self) -> list[str]:
        return [p.provider_name for p in self.providers]

    async def resolve(self, name: str) -> str:
        """Resolve a credential.

        Raises:
            CredentialNotFoundError: If no provider has a non-empty value
        """
        for provider in self.providers:
            value = await provider.get_credential(name)
            if value:
                logger.debug("credential_resolved", name=name, provider=provider.provider_name)
                return value

        raise CredentialNotFoundError(name, self.provider_names)

    async def close(self) -> None:
        for provider in self.providers:
            await provider.close()
