"""Infrastructure layer - cross-cutting concerns."""

from item_tracker.infrastructure.config import Config, get_config
from item_tracker.infrastructure.logging import get_logger, setup_logging
from item_tracker.infrastructure.metrics import ItemTrackerMetrics, get_metrics, setup_metrics
from item_tracker.infrastructure.tracing import get_tracer, setup_tracing, trace_span

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "ItemTrackerMetrics",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
