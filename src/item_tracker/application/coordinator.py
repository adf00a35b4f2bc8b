"""Item Coordinator.

Decides, for every list, create and search, which of the three stores
to consult or update and in what order, and how to behave when one of
them fails.

    list:   cache, or on an empty cache the durable store then backfill
    create: durable store (commit point), then cache, then index
    search: index only

The durable store is the source of truth. The cache and index are
accelerators: their write failures are absorbed, and every search
failure reads as "no matches".
"""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any, ContextManager

from item_tracker.application.secondary_writes import SecondaryWriter
from item_tracker.domain.entities import TEXT_FIELD, ItemTitle, TitleDocument
from item_tracker.domain.errors import CreateFailed, InvalidTitle, StoreUnavailable
from item_tracker.infrastructure.logging import get_logger
from item_tracker.infrastructure.metrics import ItemTrackerMetrics
from item_tracker.infrastructure.tracing import trace_span
from item_tracker.ports.outbound import (
    DuplicateTitleError,
    ItemStorePort,
    StoreError,
    TitleCachePort,
    TitleIndexPort,
)

DEFAULT_CACHE_SET_KEY = "items"

logger = get_logger(__name__)


class ItemCoordinator:
    """Coordinates the durable store, title cache and title index.

    Thread Safety:
        Holds no mutable state of its own. Concurrent calls only share
        the injected store adapters.
    """

    def __init__(
        self,
        item_store: ItemStorePort,
        title_cache: TitleCachePort,
        title_index: TitleIndexPort,
        cache_set_key: str = DEFAULT_CACHE_SET_KEY,
        metrics: ItemTrackerMetrics | None = None,
        secondary_writer: SecondaryWriter | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            item_store: Durable store (source of truth).
            title_cache: Title cache used to accelerate list reads.
            title_index: Search index used for text queries.
            cache_set_key: The single cache key every title is stored under.
            metrics: Optional metrics registry.
            secondary_writer: Runner for best-effort accelerator writes.
        """
        self._item_store = item_store
        self._title_cache = title_cache
        self._title_index = title_index
        self._cache_set_key = cache_set_key
        self._metrics = metrics
        self._secondary = secondary_writer or SecondaryWriter(metrics)

    def list_items(self) -> list[ItemTitle]:
        """List every item title.

        A non-empty cache is returned as is, without touching the
        durable store. An empty cache falls back to the durable store
        and each title is written back into the cache.

        Returns:
            Item titles.

        Raises:
            StoreUnavailable: If the cache connection fails, or the
                durable store fails on a cache miss.
        """
        with self._timed("list"), trace_span("item_tracker.list_items") as span:
            try:
                cached = self._title_cache.list_members(self._cache_set_key)
            except StoreError as e:
                logger.error("cache_unavailable", operation="list", error=str(e))
                raise StoreUnavailable("cache", str(e)) from e

            if cached:
                span.set_attribute("item_tracker.source", "cache")
                self._count_list_read("cache")
                logger.info("cache_hit", count=len(cached))
                return [ItemTitle(title=title) for title in sorted(cached)]

            span.set_attribute("item_tracker.source", "durable")
            logger.info("cache_miss", set_key=self._cache_set_key)

            try:
                items = self._item_store.list_items()
            except StoreError as e:
                logger.error("durable_store_unavailable", operation="list", error=str(e))
                raise StoreUnavailable("durable", str(e)) from e

            self._count_list_read("durable")
            logger.info("durable_read", count=len(items))

            for item in items:
                self._backfill(item.title)

            return items

    def create_item(self, title: str) -> str:
        """Create an item.

        The durable insert is the commit point. Cache and index writes
        follow, and their failures do not fail the create.

        Args:
            title: Non-empty item title.

        Returns:
            The accepted title.

        Raises:
            InvalidTitle: If the title is empty.
            CreateFailed: If the durable insert fails, including when
                the title already exists.
        """
        if not isinstance(title, str) or not title.strip():
            raise InvalidTitle(title)

        with self._timed("create"), trace_span("item_tracker.create_item", {"item.title": title}):
            try:
                item = self._item_store.insert_item(title)
            except DuplicateTitleError as e:
                logger.warning("item_create_duplicate", title=title)
                self._count_create("duplicate")
                raise CreateFailed(title, str(e), duplicate=True) from e
            except StoreError as e:
                logger.error("item_create_failed", title=title, error=str(e))
                self._count_create("error")
                raise CreateFailed(title, str(e)) from e

            logger.info("item_committed", item_id=item.id, title=title)
            self._count_create("success")

            self._secondary.attempt(
                "cache",
                "add_member",
                lambda: self._title_cache.add_member(self._cache_set_key, title),
                title=title,
            )
            self._secondary.attempt(
                "index",
                "index_document",
                lambda: self._title_index.index_document(TitleDocument(text=title)),
                title=title,
            )

            return title

    def search_items(self, text: str) -> list[dict[str, Any]]:
        """Search item titles.

        Any index failure returns an empty list, so a search backend
        outage looks exactly like "no matches".

        Args:
            text: Free-text query.

        Returns:
            Raw index hit records in relevance order.
        """
        with self._timed("search"), trace_span("item_tracker.search_items"):
            try:
                hits = self._title_index.match_query(TEXT_FIELD, text)
            except Exception as e:
                logger.warning("search_failed", search_text=text, error=str(e))
                self._count_search("error")
                return []

            logger.info("search_matched", search_text=text, hits=len(hits))
            self._count_search("success")
            return hits

    def _backfill(self, title: str) -> None:
        succeeded = self._secondary.attempt(
            "cache",
            "backfill",
            lambda: self._title_cache.add_member(self._cache_set_key, title),
            title=title,
        )
        if self._metrics is not None:
            status = "success" if succeeded else "error"
            self._metrics.cache_backfill_writes_total.labels(status=status).inc()

    def _timed(self, operation: str) -> ContextManager[Any]:
        if self._metrics is None:
            return nullcontext()
        return self._metrics.operation_latency_seconds.labels(operation=operation).time()

    def _count_list_read(self, source: str) -> None:
        if self._metrics is not None:
            self._metrics.list_reads_total.labels(source=source).inc()

    def _count_create(self, status: str) -> None:
        if self._metrics is not None:
            self._metrics.items_created_total.labels(status=status).inc()

    def _count_search(self, status: str) -> None:
        if self._metrics is not None:
            self._metrics.searches_total.labels(status=status).inc()
