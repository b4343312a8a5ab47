"""Prometheus metrics & middleware for the statistics API.

Collects per-endpoint request count and latency plus the size of every dataset
analysed, and exposes them on /metrics for Prometheus.
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

# Prometheus metric names as constants
REQUEST_COUNT_NAME = "stats_api_request_total"
REQUEST_LATENCY_NAME = "stats_api_request_duration_seconds"
REQUEST_ERROR_COUNT_NAME = "stats_api_request_errors_total"
DATASET_SIZE_NAME = "stats_api_dataset_size"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# Module-level and thread-safe; registered once in the default registry.
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

# Error responses only (status >= 400)
REQUEST_ERROR_COUNT = Counter(
    name=REQUEST_ERROR_COUNT_NAME,
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# Number of numeric values per computation, labelled by operation
# ("statistics", "histogram", "csv_column").
DATASET_SIZE = Histogram(
    name=DATASET_SIZE_NAME,
    documentation="Number of numeric values per analysed dataset",
    labelnames=["operation"],
    buckets=(1, 10, 100, 1_000, 10_000, 100_000, 1_000_000, float("inf")),
)


def observe_dataset(operation: str, size: int) -> None:
    DATASET_SIZE.labels(operation).observe(size)


# -----------------------------------------------------------------------------
# ASGI middleware
# -----------------------------------------------------------------------------
# Wraps every HTTP request: records the start time and, when the response
# starts, increments the counters and observes the latency. Labels come from
# the route path template (if matched), the HTTP method and the status code.
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
            if message["type"] == "http.response.start":
                status_code = message["status"]
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
    # Plaintext exposition format, scraped by Prometheus
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
