"""Main API router aggregating all v1 routes."""

from fastapi import APIRouter

from holded_bridge.api.routes import health, holded

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(holded.router)
