"""Best-effort writes to the cache and search index.

Once the durable store has committed, writes to the accelerators are
attempted and their failures are logged and counted, never returned.
"""

from __future__ import annotations

from typing import Any, Callable

from item_tracker.infrastructure.logging import get_logger
from item_tracker.infrastructure.metrics import ItemTrackerMetrics

logger = get_logger(__name__)


class SecondaryWriter:
    """Runs writes whose failure must not reach the caller."""

    def __init__(self, metrics: ItemTrackerMetrics | None = None) -> None:
        """Initialize the writer.

        Args:
            metrics: Metrics registry to count failures in, if any.
        """
        self._metrics = metrics

    def attempt(
        self,
        store: str,
        action: str,
        write: Callable[[], Any],
        **context: Any,
    ) -> bool:
        """Run ``write`` and absorb any failure.

        Args:
            store: Store being written to ("cache" or "index").
            action: Short name of the write, used in log events.
            write: Zero-argument callable performing the write.
            **context: Extra fields bound to the log events.

        Returns:
            True if the write succeeded, False if it failed.
        """
        try:
            write()
        except Exception as e:
            logger.warning(
                "secondary_write_failed",
                store=store,
                action=action,
                error=str(e),
                error_type=type(e).__name__,
                **context,
            )
            if self._metrics is not None:
                self._metrics.secondary_write_failures_total.labels(store=store).inc()
            return False

        logger.info("secondary_write_succeeded", store=store, action=action, **context)
        return True
