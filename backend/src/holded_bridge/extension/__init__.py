"""Action and card descriptors the extension declares to the host platform."""

from holded_bridge.extension.actions import HOLDED_ACTIONS
from holded_bridge.extension.cards import HOLDED_CARDS
from holded_bridge.extension.models import (
    ActionDescriptor,
    CardDefaults,
    CardDescriptor,
    CardRules,
    ConfigParam,
    ExtensionManifest,
)
from holded_bridge.extension.registration import (
    ExtensionRegistry,
    TokenProvider,
    initialize_extension,
    register_extension,
    settings_token_provider,
    static_token_provider,
)

__all__ = [
    "HOLDED_ACTIONS",
    "HOLDED_CARDS",
    "ActionDescriptor",
    "CardDefaults",
    "CardDescriptor",
    "CardRules",
    "ConfigParam",
    "ExtensionManifest",
    "ExtensionRegistry",
    "TokenProvider",
    "initialize_extension",
    "register_extension",
    "settings_token_provider",
    "static_token_provider",
]
