"""Credential provider backed by process environment variables."""

import os

from holded_bridge.infrastructure.credentials.base import CredentialProvider


class EnvironmentCredentialProvider(CredentialProvider):
    """Reads the variable at call time, so changes are picked up without restart."""

    @property
    def provider_name(self) -> str:
        return "environment"

    async def get_credential(self, name: str) -> str | None:
        return os.environ.get(name)
