"""Base class for credential providers."""

from abc import ABC, abstractmethod


class CredentialProvider(ABC):
    """A single source of named secrets (host key-store, environment, ...)."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return provider name for logging/reference."""
        pass

    @abstractmethod
    async def get_credential(self, name: str) -> str | None:
        """Look up a secret by name.

        Args:
            name: Secret name, e.g. "HOLDED_API_KEY"

        Returns:
            The value, or None if this provider does not have it
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None
