"""Prometheus metrics for AAS API requests."""

from prometheus_client import CollectorRegistry, Counter, Histogram
from prometheus_client import REGISTRY as DEFAULT_REGISTRY


class ClientMetrics:
    """Collection of Prometheus metrics recorded per HTTP request.

    Metrics are registered in the given registry (the process default if
    omitted); exposing them is left to the application.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics."""
        registry = registry if registry is not None else DEFAULT_REGISTRY

        self.requests_total = Counter(
            "aas_client_requests_total",
            "Total number of HTTP requests sent to the AAS API",
            ["method", "status"],
            registry=registry,
        )

        self.request_errors_total = Counter(
            "aas_client_request_errors_total",
            "Total number of failed AAS API calls",
            ["error_type"],
            registry=registry,
        )

        self.request_duration_seconds = Histogram(
            "aas_client_request_duration_seconds",
            "Round-trip time of AAS API requests",
            ["method"],
            buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
            registry=registry,
        )

    def record_response(self, method: str, status_code: int, duration: float) -> None:
        self.requests_total.labels(method=method, status=str(status_code)).inc()
        self.request_duration_seconds.labels(method=method).observe(duration)

    def record_error(self, error: Exception) -> None:
        self.request_errors_total.labels(error_type=type(error).__name__).inc()


METRICS = ClientMetrics()
