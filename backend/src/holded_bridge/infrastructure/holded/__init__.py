"""Holded API client and payload helpers."""

from holded_bridge.infrastructure.holded.client import HoldedClient
from holded_bridge.infrastructure.holded.payloads import (
    coerce_bool,
    coerce_number,
    is_empty,
    strip_empty,
    to_query_params,
)

__all__ = [
    "HoldedClient",
    "coerce_bool",
    "coerce_number",
    "is_empty",
    "strip_empty",
    "to_query_params",
]
