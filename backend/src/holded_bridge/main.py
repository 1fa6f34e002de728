"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from holded_bridge import __version__
from holded_bridge.api.router import api_router
from holded_bridge.config import get_settings
from holded_bridge.infrastructure.credentials import build_credential_chain
from holded_bridge.observability.metrics import setup_metrics
from holded_bridge.shared.exceptions import HoldedBridgeError, ValidationError
from holded_bridge.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - startup and shutdown events."""
    setup_logging()
    logger.info("holded_bridge_starting", version=__version__)

    settings = get_settings()
    app.state.credential_chain = getattr(
        app.state, "credential_chain", None
    ) or build_credential_chain(settings)
    logger.info(
        "credential_chain_ready",
        providers=app.state.credential_chain.provider_names,
    )

    yield

    logger.info("holded_bridge_stopping")
    chain = getattr(app.state, "credential_chain", None)
    if chain is not None:
        await chain.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Holded Bridge",
        description="Holded employees, projects and time tracking for the host automation platform",
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api/v1")

    setup_metrics(app)

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers.

    Error bodies use the ``{"error": message}`` shape host cards display.
    """

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        _ = request
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        _ = request
        logger.info("request_validation_failed", errors=len(exc.errors()))
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(HoldedBridgeError)
    async def holded_bridge_error_handler(
        request: Request, exc: HoldedBridgeError
    ) -> JSONResponse:
        logger.error(
            "unhandled_holded_bridge_error",
            path=request.url.path,
            error=exc.message,
            details=exc.details,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


app = create_app()
