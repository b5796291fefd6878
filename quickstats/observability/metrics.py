"""Prometheus metrics & middleware for the analysis service.

Counts requests, rejected requests and latency per route template, and
exposes them on /metrics for scraping.
"""
from __future__ import annotations

import time

from fastapi import APIRouter, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)

from quickstats.config import METRICS_PREFIX

REQUEST_COUNT_NAME = f"{METRICS_PREFIX}_request_total"
REQUEST_LATENCY_NAME = f"{METRICS_PREFIX}_request_duration_seconds"
REQUEST_ERROR_COUNT_NAME = f"{METRICS_PREFIX}_request_errors_total"
REJECTED_INPUT_COUNT_NAME = f"{METRICS_PREFIX}_rejected_input_total"

# -----------------------------------------------------------------------------
# Metric objects (process-global)
# -----------------------------------------------------------------------------
REQUEST_COUNT = Counter(
    name=REQUEST_COUNT_NAME,
    documentation="Total HTTP requests",
    labelnames=["path", "method", "status"],
)

REQUEST_LATENCY = Histogram(
    name=REQUEST_LATENCY_NAME,
    documentation="Request latency in seconds",
    labelnames=["path", "method"],
)

REQUEST_ERROR_COUNT = Counter(
    name=REQUEST_ERROR_COUNT_NAME,
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# Inputs the numeric core refused, by operation and error class
REJECTED_INPUT_COUNT = Counter(
    name=REJECTED_INPUT_COUNT_NAME,
    documentation="Inputs rejected by the numeric core",
    labelnames=["operation", "error"],
)


def record_rejection(operation: str, exc: Exception) -> None:
    REJECTED_INPUT_COUNT.labels(operation, type(exc).__name__).inc()


# -----------------------------------------------------------------------------
# ASGI middleware
# -----------------------------------------------------------------------------
class MetricsMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        # websockets and lifespan events pass straight through
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        req = Request(scope, receive)
        started_at = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_code = message["status"]
                # Prefer the route template so label cardinality stays bounded
                route = scope.get("route")
                if route and hasattr(route, "path"):
                    path_template = route.path
                else:
                    path_template = scope.get("path", "")
                REQUEST_COUNT.labels(path_template, req.method, status_code).inc()
                if int(status_code) >= 400:
                    REQUEST_ERROR_COUNT.labels(path_template, req.method, status_code).inc()
                REQUEST_LATENCY.labels(path_template, req.method).observe(time.perf_counter() - started_at)
            await send(message)

        await self.app(scope, receive, send_wrapper)


# -----------------------------------------------------------------------------
# /metrics endpoint
# -----------------------------------------------------------------------------
metrics_router = APIRouter()


@metrics_router.get("/metrics")
async def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
