"""Observability components: logging and request metrics."""

from aas_api_client.observability.logging import setup_logging
from aas_api_client.observability.metrics import METRICS, ClientMetrics

__all__ = ["setup_logging", "METRICS", "ClientMetrics"]
