"""Prometheus metrics for itinerary lifecycle operations."""

from prometheus_client import Counter

itinerary_operations_total = Counter(
    "itinerary_operations_total",
    "Total itinerary lifecycle operations",
    ["operation", "outcome"],
)

itinerary_skipped_total = Counter(
    "itinerary_skipped_total",
    "Items silently skipped by batch itinerary operations",
    ["operation", "reason"],
)


class PrometheusItineraryMetrics:
    """Prometheus-based itinerary metrics implementation."""

    def inc_operation(self, operation: str, outcome: str) -> None:
        """Increment lifecycle operation counter."""
        itinerary_operations_total.labels(operation=operation, outcome=outcome).inc()

    def inc_skipped(self, operation: str, reason: str, count: int = 1) -> None:
        """Increment silent-skip counter."""
        if count > 0:
            itinerary_skipped_total.labels(operation=operation, reason=reason).inc(count)
