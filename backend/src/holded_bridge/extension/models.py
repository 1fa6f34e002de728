"""Descriptor models registered with the host automation platform.

Field aliases reproduce the camelCase shape the host registries expect;
``to_payload()`` is what gets handed to a registry or served as JSON.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from holded_bridge.infrastructure.holded.payloads import (
    coerce_bool,
    coerce_number,
    is_empty,
)
from holded_bridge.shared.exceptions import ValidationError

HttpMethod = Literal["get", "post"]


class DescriptorModel(BaseModel):
    """Base model for descriptors: immutable, populated by field name or alias."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ActionDescriptor(DescriptorModel):
    """Programmatic entry point for one endpoint."""

    group: str = "holded"
    tag: str = "holded"
    name: str
    description: str
    url: str
    # Human-readable documentation per parameter, not types
    params: dict[str, str] = Field(default_factory=dict)
    emit_event: bool = Field(default=True, alias="emitEvent")
    receive_board: bool = Field(default=False, alias="receiveBoard")
    token: str | None = None
    method: HttpMethod = "get"


class ConfigParam(DescriptorModel):
    """One input widget on a card."""

    visible: bool = True
    default_value: str = Field(default="", alias="defaultValue")
    type: Literal["text", "number"] = "text"
    label: str | None = None


class CardRules(DescriptorModel):
    """Declarative input rules a card applies before calling its action.

    The host evaluates these; ``prepare`` is the reference evaluation and is
    what the tests exercise.
    """

    action_url: str = Field(alias="actionUrl")
    method: HttpMethod = "get"
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    numeric: tuple[str, ...] = ()
    boolean: tuple[str, ...] = ()
    require_update_field: bool = Field(default=False, alias="requireUpdateField")

    def _cast(self, field: str, value: Any) -> Any:
        if field in self.numeric:
            return coerce_number(value, field)
        if field in self.boolean:
            return coerce_bool(value)
        return value

    def prepare(self, user_params: Mapping[str, Any]) -> dict[str, Any]:
        """Validate user input and build the action payload.

        Raises:
            ValidationError: On a missing required field, a non-numeric value
                for a numeric field, or no updatable field when one is needed
        """
        payload: dict[str, Any] = {}

        for field in self.required:
            value = user_params.get(field)
            if is_empty(value):
                raise ValidationError(
                    f"{field} parameter is required", details={"field": field}
                )
            payload[field] = self._cast(field, value)

        for field in self.optional:
            value = user_params.get(field)
            if not is_empty(value):
                payload[field] = self._cast(field, value)

        if self.require_update_field and not any(f in payload for f in self.optional):
            raise ValidationError("Provide at least one updatable field")

        return payload


class CardDefaults(DescriptorModel):
    width: int = 3
    height: int = 5
    name: str
    icon: str
    color: str = "#ED4C46"
    description: str
    type: Literal["action"] = "action"
    params: dict[str, str] | None = None
    rules: CardRules
    config_params: dict[str, ConfigParam] | None = Field(default=None, alias="configParams")


class CardDescriptor(DescriptorModel):
    """UI widget that invokes one endpoint."""

    group: str = "holded"
    tag: str = "table"
    id: str
    template_name: str = Field(alias="templateName")
    name: str
    defaults: CardDefaults
    emit_event: bool = Field(default=True, alias="emitEvent")


class ExtensionManifest(DescriptorModel):
    """Everything the extension declares to the host."""

    actions: list[ActionDescriptor]
    cards: list[CardDescriptor]
