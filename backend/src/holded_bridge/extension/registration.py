"""Extension initialization: build descriptors and hand them to the host."""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from holded_bridge.config import Settings, get_settings
from holded_bridge.extension.actions import HOLDED_ACTIONS
from holded_bridge.extension.cards import HOLDED_CARDS
from holded_bridge.extension.models import ActionDescriptor, ExtensionManifest
from holded_bridge.shared.logging import get_logger

logger = get_logger(__name__)

TokenProvider = Callable[[], Awaitable[str]]


class ExtensionRegistry(Protocol):
    """Host-side action and card registries."""

    async def add_action(self, descriptor: dict[str, Any]) -> None: ...

    async def add_card(self, descriptor: dict[str, Any]) -> None: ...


def static_token_provider(token: str) -> TokenProvider:
    async def _provide() -> str:
        return token

    return _provide


async def initialize_extension(
    registry: ExtensionRegistry | None = None,
    token_provider: TokenProvider | None = None,
) -> ExtensionManifest:
    """Build the action and card descriptors, registering them if a registry is given.

    A service token is requested once per action. Actions are registered
    before cards, each in declaration order. Registry errors are not caught:
    they abort initialization.

    Args:
        registry: Host registry to push descriptors to, or None to only build them
        token_provider: Async callable returning a host service token

    Returns:
        The manifest of everything declared
    """
    actions: list[ActionDescriptor] = []
    for action in HOLDED_ACTIONS:
        token = await token_provider() if token_provider is not None else None
        actions.append(action.model_copy(update={"token": token}))

    manifest = ExtensionManifest(actions=actions, cards=list(HOLDED_CARDS))

    if registry is not None:
        for action in manifest.actions:
            await registry.add_action(action.to_payload())
        for card in manifest.cards:
            await registry.add_card(card.to_payload())
        logger.info(
            "holded_extension_initialized",
            actions=len(manifest.actions),
            cards=len(manifest.cards),
        )

    return manifest


def settings_token_provider(settings: Settings) -> TokenProvider | None:
    """Token provider backed by HOST_SERVICE_TOKEN, or None when it is unset."""
    if not settings.host_service_token:
        return None
    return static_token_provider(settings.host_service_token)


async def register_extension(
    registry: ExtensionRegistry,
    settings: Settings | None = None,
    token_provider: TokenProvider | None = None,
) -> ExtensionManifest:
    """Register the extension with the host.

    Actions carry the configured HOST_SERVICE_TOKEN unless an explicit
    ``token_provider`` is given.
    """
    settings = settings or get_settings()
    return await initialize_extension(
        registry,
        token_provider=token_provider or settings_token_provider(settings),
    )
