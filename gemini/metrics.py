"""
Prometheus metrics for monitoring.

Counts authenticated calls by outcome and records their latency.
"""

from typing import Optional
import logging

from prometheus_client import CollectorRegistry, Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)


class Metrics:
    """
    Prometheus metrics collector.

    Tracks:
    - Authenticated request outcomes
    - Authenticated request latency
    - Session registrations
    """

    def __init__(
        self,
        enabled: bool = True,
        port: Optional[int] = None,
        registry: Optional[CollectorRegistry] = None
    ):
        """
        Initialize metrics.

        Args:
            enabled: Enable metrics collection
            port: Metrics HTTP server port (no server if None)
            registry: Collector registry (a private one if None)
        """
        self.enabled = enabled
        self.registry = registry or CollectorRegistry()

        if not self.enabled:
            return

        self.api_requests = Counter(
            'gemini_api_requests_total',
            'Total authenticated API requests',
            ['endpoint', 'status'],
            registry=self.registry
        )

        self.api_latency = Histogram(
            'gemini_api_latency_seconds',
            'Authenticated API request latency',
            ['endpoint'],
            registry=self.registry
        )

        self.sessions_added = Counter(
            'gemini_sessions_added_total',
            'Sessions registered',
            ['role'],
            registry=self.registry
        )

        if port is not None:
            try:
                start_http_server(port, registry=self.registry)
                logger.info(f"Metrics server started on port {port}")
            except OSError as e:
                logger.error(f"Failed to start metrics server: {e}")

    def track_api_request(self, endpoint: str, status: str) -> None:
        """Record API request outcome."""
        if self.enabled:
            self.api_requests.labels(endpoint=endpoint, status=status).inc()

    def track_api_latency(self, endpoint: str, duration: float) -> None:
        """Record API latency."""
        if self.enabled:
            self.api_latency.labels(endpoint=endpoint).observe(duration)

    def track_session(self, role: str) -> None:
        """Record session registration."""
        if self.enabled:
            self.sessions_added.labels(role=role).inc()
