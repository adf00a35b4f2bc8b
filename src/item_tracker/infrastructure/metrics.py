"""Prometheus metrics for the item tracker."""

from __future__ import annotations

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Histogram,
    Info,
    start_http_server,
)


class ItemTrackerMetrics:
    """Registry of all item tracker metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # List path
        self.list_reads_total = Counter(
            "item_tracker_list_reads_total",
            "List reads by the store that answered them",
            ["source"],  # cache, durable
            registry=self._registry,
        )

        self.cache_backfill_writes_total = Counter(
            "item_tracker_cache_backfill_writes_total",
            "Cache writes issued while backfilling from the durable store",
            ["status"],  # success, error
            registry=self._registry,
        )

        # Create path
        self.items_created_total = Counter(
            "item_tracker_items_created_total",
            "Create attempts by outcome",
            ["status"],  # success, duplicate, error
            registry=self._registry,
        )

        self.secondary_write_failures_total = Counter(
            "item_tracker_secondary_write_failures_total",
            "Best-effort writes to an accelerator that failed",
            ["store"],  # cache, index
            registry=self._registry,
        )

        # Search path
        self.searches_total = Counter(
            "item_tracker_searches_total",
            "Search requests by outcome",
            ["status"],  # success, error
            registry=self._registry,
        )

        self.operation_latency_seconds = Histogram(
            "item_tracker_operation_latency_seconds",
            "Coordinator operation latency in seconds",
            ["operation"],  # list, create, search
            buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
            registry=self._registry,
        )

        self.info = Info(
            "item_tracker",
            "Item tracker information",
            registry=self._registry,
        )


_metrics: ItemTrackerMetrics | None = None


def setup_metrics(
    port: int = 8009,
    registry: CollectorRegistry | None = None,
    serve: bool = True,
) -> ItemTrackerMetrics:
    """
    Set up the metrics registry and optionally the scrape endpoint.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry
        serve: Whether to start the HTTP server

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = ItemTrackerMetrics(registry)

    from item_tracker import __version__
    _metrics.info.info({"version": __version__})

    if serve:
        start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> ItemTrackerMetrics:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = ItemTrackerMetrics()
    return _metrics
