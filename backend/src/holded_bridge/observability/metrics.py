"""Prometheus metrics for the HTTP surface and the outgoing Holded calls."""

import time
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.responses import Response

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status_code"],
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)
# outcome: success, http_error, transport_error, invalid_body
HOLDED_API_REQUESTS = Counter(
    "holded_api_requests_total",
    "Outgoing Holded API calls",
    ["operation", "outcome"],
)


def _get_route_path(request: Request) -> str:
    route: Any | None = request.scope.get("route")
    path = getattr(route, "path", None) if route is not None else None
    if isinstance(path, str) and path:
        return path
    return "unknown"


def setup_metrics(app: FastAPI) -> None:
    """Attach Prometheus metrics and /metrics endpoint to the app."""

    @app.middleware("http")
    async def metrics_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            path = _get_route_path(request)
            status_code = str(response.status_code) if response else "500"
            REQUEST_LATENCY.labels(method=request.method, path=path).observe(
                time.perf_counter() - start
            )
            REQUEST_COUNT.labels(
                method=request.method, path=path, status_code=status_code
            ).inc()

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
