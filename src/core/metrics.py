"""Prometheus metrics for the Loans service.

Business Metrics:
- loans_operation_total: Loan lifecycle operations by outcome

Technical Metrics:
- loans_operation_latency_seconds: Service operation latency
- loans_http_requests_total: HTTP requests by endpoint/status
- loans_http_request_latency_seconds: HTTP request latency
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

loan_operations_total = Counter(
    "loans_operation_total",
    "Total number of loan lifecycle operations",
    ["operation", "outcome"],  # create/fetch/update/delete; success, not_found, already_exists
)


# =============================================================================
# Technical Metrics
# =============================================================================

loan_operation_latency = Histogram(
    "loans_operation_latency_seconds",
    "Loan service operation latency in seconds",
    ["operation"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

http_requests_total = Counter(
    "loans_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "loans_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_loan_operation(operation: str, outcome: str = "success") -> None:
    """Record the outcome of a loan lifecycle operation."""
    loan_operations_total.labels(operation=operation, outcome=outcome).inc()


@contextmanager
def track_operation_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track loan service operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        loan_operation_latency.labels(operation=operation).observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
