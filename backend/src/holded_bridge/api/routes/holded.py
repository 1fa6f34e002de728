"""Holded proxy routes.

Each route validates its input, resolves the Holded key, builds one client,
calls one Holded operation and relays the JSON unchanged. Failures after
validation are logged with detail and answered with a fixed message.
"""

from collections.abc import Awaitable, Callable
from typing import Annotated, Any

from fastapi import APIRouter, Body, Query, Request
from fastapi.responses import JSONResponse

from holded_bridge.api.deps import (
    CredentialChainDep,
    HoldedClientFactory,
    HoldedClientFactoryDep,
    SettingsDep,
)
from holded_bridge.api.schemas import RegisterTimeRequest, UpdateProjectTimeRequest
from holded_bridge.config import Settings
from holded_bridge.extension import initialize_extension
from holded_bridge.infrastructure.credentials import CredentialChain
from holded_bridge.infrastructure.holded import HoldedClient, coerce_number, is_empty
from holded_bridge.shared.exceptions import ValidationError
from holded_bridge.shared.logging import get_logger, holded_operation_context

logger = get_logger(__name__)

router = APIRouter(prefix="/holded", tags=["Holded"])


async def _call_holded(
    operation: str,
    failure_message: str,
    *,
    settings: Settings,
    chain: CredentialChain,
    client_factory: HoldedClientFactory,
    call: Callable[[HoldedClient], Awaitable[Any]],
) -> JSONResponse:
    with holded_operation_context(operation):
        try:
            api_key = await chain.resolve(settings.holded_api_key_name)
            async with client_factory(api_key) as holded:
                result = await call(holded)
        except Exception as e:
            logger.exception(
                "holded_request_failed",
                error=str(e),
                details=getattr(e, "details", None),
            )
            return JSONResponse(status_code=500, content={"error": failure_message})

    return JSONResponse(content=result)


@router.get("/employees")
async def list_employees(
    settings: SettingsDep,
    chain: CredentialChainDep,
    client_factory: HoldedClientFactoryDep,
) -> JSONResponse:
    """List Holded employees."""
    return await _call_holded(
        "get_employees",
        "Failed to fetch employees",
        settings=settings,
        chain=chain,
        client_factory=client_factory,
        call=lambda holded: holded.get_employees(),
    )


@router.get("/project_time_slots")
async def list_project_time_slots(
    settings: SettingsDep,
    chain: CredentialChainDep,
    client_factory: HoldedClientFactoryDep,
    project_id: Annotated[str | None, Query(alias="projectId")] = None,
) -> JSONResponse:
    """List the time entries of one project."""
    if is_empty(project_id):
        raise ValidationError("projectId query parameter is required")

    return await _call_holded(
        "get_project_time_slots",
        "Failed to fetch project time slots",
        settings=settings,
        chain=chain,
        client_factory=client_factory,
        call=lambda holded: holded.get_project_time_slots(str(project_id)),
    )


@router.post("/register_time")
async def register_time(
    settings: SettingsDep,
    chain: CredentialChainDep,
    client_factory: HoldedClientFactoryDep,
    payload: Annotated[Any, Body()] = None,
) -> JSONResponse:
    """Register a time entry on a project."""
    body = RegisterTimeRequest.from_body(payload)
    if is_empty(body.project_id) or is_empty(body.user_id) or is_empty(body.duration):
        raise ValidationError(
            "Required parameters: projectId, userId, duration",
            details={"required": ["projectId", "userId", "duration"]},
        )
    duration = coerce_number(body.duration, "duration")

    return await _call_holded(
        "register_time",
        "Failed to register time slot",
        settings=settings,
        chain=chain,
        client_factory=client_factory,
        call=lambda holded: holded.register_time(
            str(body.project_id), str(body.user_id), duration
        ),
    )


@router.get("/projects")
async def list_projects(
    request: Request,
    settings: SettingsDep,
    chain: CredentialChainDep,
    client_factory: HoldedClientFactoryDep,
) -> JSONResponse:
    """List projects; every query parameter is forwarded as a filter."""
    # First value wins for repeated keys
    filters = {
        key: request.query_params.getlist(key)[0] for key in request.query_params.keys()
    }

    return await _call_holded(
        "get_projects",
        "Failed to fetch projects",
        settings=settings,
        chain=chain,
        client_factory=client_factory,
        call=lambda holded: holded.get_projects(filters),
    )


@router.post("/update_project_time")
async def update_project_time(
    settings: SettingsDep,
    chain: CredentialChainDep,
    client_factory: HoldedClientFactoryDep,
    payload: Annotated[Any, Body()] = None,
) -> JSONResponse:
    """Update one or more fields of a project time entry."""
    body = UpdateProjectTimeRequest.from_body(payload)
    if is_empty(body.project_id):
        raise ValidationError("projectId is required")
    if is_empty(body.time_tracking_id):
        raise ValidationError("timeTrackingId is required")

    updates = body.updates()
    if not updates:
        raise ValidationError("Provide at least one field to update")

    return await _call_holded(
        "update_project_time",
        "Failed to update project time",
        settings=settings,
        chain=chain,
        client_factory=client_factory,
        call=lambda holded: holded.update_project_time(
            str(body.project_id), str(body.time_tracking_id), updates
        ),
    )


@router.get("/extension")
async def extension_manifest() -> dict[str, Any]:
    """Action and card descriptors, for hosts that pull instead of being pushed to.

    Service tokens are never included here.
    """
    manifest = await initialize_extension()
    return manifest.to_payload()
