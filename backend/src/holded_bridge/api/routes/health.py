"""Health check endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from holded_bridge.api.deps import CredentialChainDep, SettingsDep
from holded_bridge.shared.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ReadyResponse(BaseModel):
    """Readiness check response."""

    ready: bool
    checks: dict[str, bool]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check - always returns OK if service is running."""
    from holded_bridge import __version__

    return HealthResponse(status="healthy", version=__version__)


@router.get("/ready", response_model=ReadyResponse)
async def readiness_check(
    settings: SettingsDep,
    chain: CredentialChainDep,
) -> ReadyResponse:
    """Readiness check - verifies the Holded key can be resolved.

    Holded itself is not called.
    """
    checks: dict[str, bool] = {}

    try:
        await chain.resolve(settings.holded_api_key_name)
        checks["credential"] = True
    except Exception as e:
        logger.warning("credential_check_failed", error=str(e))
        checks["credential"] = False

    return ReadyResponse(ready=all(checks.values()), checks=checks)
