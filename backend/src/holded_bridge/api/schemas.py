"""Request bodies for the Holded endpoints.

Fields are typed ``Any``: presence is checked by the routes (400 with a
specific message) and values are forwarded as the caller sent them. Only
the camelCase keys fill the ID fields; any other spelling is an ordinary
extra key.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from holded_bridge.infrastructure.holded.payloads import strip_empty


class JSONObjectBody(BaseModel):
    """Base for bodies read from an arbitrary JSON document."""

    @classmethod
    def from_body(cls, raw: Any) -> Self:
        """Validate a decoded JSON body; anything but an object counts as ``{}``."""
        return cls.model_validate(raw if isinstance(raw, dict) else {})


class RegisterTimeRequest(JSONObjectBody):
    """Register a time entry on a project."""

    model_config = ConfigDict(extra="ignore")

    project_id: Any = Field(default=None, alias="projectId")
    user_id: Any = Field(default=None, alias="userId")
    duration: Any = None


class UpdateProjectTimeRequest(JSONObjectBody):
    """Update a project time entry.

    Every field besides the two IDs (duration, desc, costHour, date, start,
    end, userId, taskId, categoryId, billable, ...) is forwarded to Holded.
    """

    model_config = ConfigDict(extra="allow")

    project_id: Any = Field(default=None, alias="projectId")
    time_tracking_id: Any = Field(default=None, alias="timeTrackingId")

    def updates(self) -> dict[str, Any]:
        """Non-empty fields to send to Holded."""
        return strip_empty(self.model_extra)
