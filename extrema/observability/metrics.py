"""Prometheus metrics & middleware for the extrema service.

Collects per-endpoint request count and latency, counts engine errors per
operation, and exposes the /metrics endpoint for Prometheus.
"""
from __future__ import annotations

from fastapi import APIRouter, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
import time

# Prometheus metric names as constants
REQUEST_COUNT_NAME = "extrema_request_total"
REQUEST_LATENCY_NAME = "extrema_request_duration_seconds"
REQUEST_ERROR_COUNT_NAME = "extrema_request_errors_total"
ENGINE_ERROR_COUNT_NAME = "extrema_engine_errors_total"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# Collectors are process-global and thread-safe.
# REQUEST_COUNT: Counter for total HTTP requests, labeled by path, method, and status code.
REQUEST_COUNT = Counter(
    name=REQUEST_COUNT_NAME,
    documentation="Total HTTP requests",
    labelnames=["path", "method", "status"],
)

# REQUEST_LATENCY: Histogram for request duration (seconds), labeled by path and method.
# Each (path, method) pair gets _bucket, _count and _sum series, e.g.
# extrema_request_duration_seconds_bucket{le="0.005",path="/maxk",method="POST"} 12.0
REQUEST_LATENCY = Histogram(
    name=REQUEST_LATENCY_NAME,
    documentation="Request latency in seconds",
    labelnames=["path", "method"],
)

# REQUEST_ERROR_COUNT: Counter for error responses (status >= 400)
REQUEST_ERROR_COUNT = Counter(
    name=REQUEST_ERROR_COUNT_NAME,
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# ENGINE_ERROR_COUNT: typed engine failures, e.g. operation="maxk", error="RangeError".
# Schema validation failures never reach the engine and are not counted here.
ENGINE_ERROR_COUNT = Counter(
    name=ENGINE_ERROR_COUNT_NAME,
    documentation="Reduction engine errors by operation and error kind",
    labelnames=["operation", "error"],
)


def record_engine_error(operation: str, error: str) -> None:
    """Count one engine error; called by the stats routes before answering 400."""
    ENGINE_ERROR_COUNT.labels(operation, error).inc()

# -----------------------------------------------------------------------------
# ASGI middleware
# -----------------------------------------------------------------------------
# Middleware to collect metrics per request.
# - Records the start time.
# - On response start, increments the request counter and observes the latency.
# - Labels come from the route path template, HTTP method, and status code.
class MetricsMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        # Only instrument HTTP requests (not websockets, lifespan, etc.)
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        req = Request(scope, receive)
        started_at = time.perf_counter()

        async def send_wrapper(message):
            # Intercept the response start to record metrics
            if message["type"] == "http.response.start":
                status_code = message["status"]
                # Prefer the route template, fall back to the raw path for unmatched routes
                route = scope.get("route")
                if route and hasattr(route, "path"):
                    path_template = route.path
                else:
                    path_template = scope.get("path", "")
                # Increment request counter with labels
                REQUEST_COUNT.labels(path_template, req.method, status_code).inc()
                # Increment error counter if status >= 400
                if int(status_code) >= 400:
                    REQUEST_ERROR_COUNT.labels(path_template, req.method, status_code).inc()
                # Observe request latency in seconds
                REQUEST_LATENCY.labels(path_template, req.method).observe(time.perf_counter() - started_at)
            await send(message)

        # Call the next middleware or route handler
        await self.app(scope, receive, send_wrapper)

# -----------------------------------------------------------------------------
# /metrics endpoint
# -----------------------------------------------------------------------------
# Router exposing every collector in plaintext format for scraping.
metrics_router = APIRouter()

@metrics_router.get("/metrics")
async def metrics():
    # Expose Prometheus metrics in plaintext format (Prometheus scrapes this endpoint)
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
