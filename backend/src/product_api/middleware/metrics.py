"""Prometheus metrics middleware for HTTP and stock-adjustment traffic."""
import time
from typing import Callable

from prometheus_client import Counter, Gauge, Histogram, generate_latest
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


# =============================================================================
# Prometheus Metrics Definitions
# =============================================================================

# Request metrics
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_requests_active",
    "Number of active HTTP requests",
)

# Stock-specific metrics
STOCK_OPERATIONS = Counter(
    "stock_operations_total",
    "Stock adjustment attempts",
    ["operation", "result"],  # result: success, rejected, not_found, error
)


# =============================================================================
# Metrics Middleware
# =============================================================================

class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics for all HTTP requests."""

    PRODUCTS_PREFIX = "/api/v1/products"

    # Endpoints to normalize for metrics (reduce cardinality), most specific first
    ENDPOINT_PATTERNS = {
        "/api/v1/products/decrement-stock": "/api/v1/products/decrement-stock",
        "/api/v1/products/add-to-stock": "/api/v1/products/add-to-stock",
        "/api/v1/products/category": "/api/v1/products/category",
        "/api/v1/products/with-stock": "/api/v1/products/with-stock",
        "/api/v1/products/low-stock": "/api/v1/products/low-stock",
        "/api/v1/products": "/api/v1/products",
    }

    STOCK_OPERATION_ENDPOINTS = {
        "/api/v1/products/decrement-stock": "decrement",
        "/api/v1/products/add-to-stock": "add",
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Skip metrics endpoint to avoid recursion
        if request.url.path == "/metrics":
            return await call_next(request)

        # Track active requests
        ACTIVE_REQUESTS.inc()
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception:
            status_code = 500
            raise
        finally:
            ACTIVE_REQUESTS.dec()
            latency = time.perf_counter() - start_time

            # Normalize endpoint for metrics (reduce cardinality)
            endpoint = self._normalize_endpoint(request.url.path)

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code,
            ).inc()

            REQUEST_LATENCY.labels(
                method=request.method,
                endpoint=endpoint,
            ).observe(latency)

            operation = self.STOCK_OPERATION_ENDPOINTS.get(endpoint)
            if operation and request.method == "PUT":
                STOCK_OPERATIONS.labels(
                    operation=operation,
                    result=self._stock_result(status_code),
                ).inc()

        return response

    def _normalize_endpoint(self, path: str) -> str:
        """Normalize endpoint path to reduce metric cardinality."""
        for pattern, normalized in self.ENDPOINT_PATTERNS.items():
            if path.startswith(pattern):
                if normalized == self.PRODUCTS_PREFIX and path.rstrip("/") != pattern:
                    return f"{self.PRODUCTS_PREFIX}/{{product_id}}"
                return normalized

        # Keep health and other endpoints as-is
        if path in ("/health", "/metrics"):
            return path

        return "/other"

    @staticmethod
    def _stock_result(status_code: int) -> str:
        if status_code == 200:
            return "success"
        if status_code == 404:
            return "not_found"
        if status_code >= 500:
            return "error"
        return "rejected"


# =============================================================================
# Metrics Endpoint
# =============================================================================

async def metrics_endpoint(request: Request) -> Response:
    """Prometheus metrics scrape endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
