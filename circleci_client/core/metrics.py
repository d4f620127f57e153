"""
Prometheus Metrics for outgoing API calls.

Counters are labelled by service so several clients in one process stay
distinguishable.
"""

import time
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

# =============================================================================
# External API Metrics
# =============================================================================

external_api_requests_total = Counter(
    "external_api_requests_total",
    "Total external API requests by service",
    ["service"],
)

external_api_errors_total = Counter(
    "external_api_errors_total",
    "Total external API errors by service",
    ["service"],
)

external_api_duration_seconds = Histogram(
    "external_api_duration_seconds",
    "External API request duration in seconds",
    ["service"],
    buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)


def track_external_api(service: str):
    """Context manager to track external API call metrics."""

    @contextmanager
    def _tracker():
        start_time = time.time()
        external_api_requests_total.labels(service=service).inc()
        try:
            yield
            duration = time.time() - start_time
            external_api_duration_seconds.labels(service=service).observe(duration)
        except Exception:
            external_api_errors_total.labels(service=service).inc()
            raise

    return _tracker()
