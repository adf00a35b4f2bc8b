"""Dependency injection container for the item tracker.

Builds the process-scoped store clients once at startup, wraps them in
their adapters and injects those into the coordinator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

from opentelemetry import trace
from prometheus_client import CollectorRegistry

from item_tracker.adapters.outbound import (
    ElasticsearchTitleIndex,
    InMemoryItemStore,
    InMemoryTitleCache,
    InMemoryTitleIndex,
    RedisTitleCache,
    SqlItemStore,
    build_elasticsearch_client,
    build_engine,
    build_redis_client,
)
from item_tracker.application import ItemCoordinator
from item_tracker.infrastructure.config import Config, get_config
from item_tracker.infrastructure.logging import setup_logging
from item_tracker.infrastructure.metrics import ItemTrackerMetrics, setup_metrics
from item_tracker.infrastructure.tracing import setup_tracing
from item_tracker.ports.outbound import (
    ItemStorePort,
    StoreError,
    TitleCachePort,
    TitleIndexPort,
)


@dataclass
class Container:
    """Dependency injection container for item tracker components."""

    config: Config
    logger: Any  # structlog.stdlib.BoundLogger
    tracer: trace.Tracer
    metrics: ItemTrackerMetrics
    item_store: ItemStorePort
    title_cache: TitleCachePort
    title_index: TitleIndexPort
    coordinator: ItemCoordinator
    closers: list[Callable[[], Any]] = field(default_factory=list)

    _instance: ClassVar["Container | None"] = None

    @classmethod
    def create(
        cls,
        config: Config | None = None,
        metrics_registry: CollectorRegistry | None = None,
    ) -> "Container":
        """Create and initialize the container with all dependencies."""
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        observability = config.observability

        logger = setup_logging(observability.log_level, observability.log_format)
        tracer = setup_tracing(
            service_name=observability.service_name,
            otlp_endpoint=observability.otlp_endpoint,
            environment=observability.environment,
        )
        metrics = setup_metrics(
            port=observability.metrics_port,
            registry=metrics_registry,
            serve=observability.metrics_enabled,
        )

        closers: list[Callable[[], Any]] = []
        if config.backend == "memory":
            item_store: ItemStorePort = InMemoryItemStore()
            title_cache: TitleCachePort = InMemoryTitleCache()
            title_index: TitleIndexPort = InMemoryTitleIndex(config.search.index_name)
        else:
            engine = build_engine(config.durable)
            redis_client = build_redis_client(config.cache)
            es_client = build_elasticsearch_client(config.search)
            closers.extend([engine.dispose, redis_client.close, es_client.close])

            item_store = SqlItemStore(engine, table_name=config.durable.table_name)
            title_cache = RedisTitleCache(redis_client)
            title_index = ElasticsearchTitleIndex(es_client, index_name=config.search.index_name)

        coordinator = ItemCoordinator(
            item_store=item_store,
            title_cache=title_cache,
            title_index=title_index,
            cache_set_key=config.cache.set_key,
            metrics=metrics,
        )

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
            item_store=item_store,
            title_cache=title_cache,
            title_index=title_index,
            coordinator=coordinator,
            closers=closers,
        )

        logger.info(
            "item_tracker_container_initialized",
            environment=observability.environment,
            backend=config.backend,
            cache_set_key=config.cache.set_key,
            index=config.search.index_name,
        )

        return cls._instance

    def bootstrap(self) -> None:
        """Prepare the durable table and the search index.

        Failures are logged and do not stop startup; the stores are
        expected to come up independently.
        """
        with self.tracer.start_as_current_span("item_tracker.bootstrap") as span:
            try:
                self.item_store.create_table()
            except StoreError as e:
                span.set_attribute("item_table.ready", False)
                self.logger.error("item_table_setup_failed", error=str(e))

            try:
                self.title_index.ensure_index()
            except StoreError as e:
                span.set_attribute("search_index.ready", False)
                self.logger.error("search_index_setup_failed", error=str(e))

    def close(self) -> None:
        """Release pooled store clients."""
        for closer in self.closers:
            try:
                closer()
            except Exception as e:
                self.logger.warning("store_client_close_failed", error=str(e))
        self.closers.clear()

    @classmethod
    def get(cls) -> "Container":
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
