"""Pytest configuration and fixtures for item_tracker tests."""

from __future__ import annotations

from typing import Generator

import pytest
from prometheus_client import CollectorRegistry
from sqlalchemy.engine import Engine

from item_tracker.adapters.outbound import (
    InMemoryItemStore,
    InMemoryTitleCache,
    InMemoryTitleIndex,
    SqlItemStore,
    build_engine,
)
from item_tracker.application import ItemCoordinator
from item_tracker.infrastructure.config import DurableStoreConfig
from item_tracker.infrastructure.container import Container
from item_tracker.infrastructure.metrics import ItemTrackerMetrics

CACHE_KEY = "items"


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Reset the DI container before and after each test."""
    Container.reset()
    yield
    Container.reset()


@pytest.fixture
def metrics_registry() -> CollectorRegistry:
    """Provide a separate registry to avoid conflicts between tests."""
    return CollectorRegistry(auto_describe=True)


@pytest.fixture
def metrics(metrics_registry: CollectorRegistry) -> ItemTrackerMetrics:
    """Provide a fresh metrics registry for each test."""
    return ItemTrackerMetrics(registry=metrics_registry)


@pytest.fixture
def item_store() -> InMemoryItemStore:
    return InMemoryItemStore()


@pytest.fixture
def title_cache() -> InMemoryTitleCache:
    return InMemoryTitleCache()


@pytest.fixture
def title_index() -> InMemoryTitleIndex:
    index = InMemoryTitleIndex()
    index.ensure_index()
    return index


@pytest.fixture
def coordinator(
    item_store: InMemoryItemStore,
    title_cache: InMemoryTitleCache,
    title_index: InMemoryTitleIndex,
    metrics: ItemTrackerMetrics,
) -> ItemCoordinator:
    """Provide a coordinator over the in-memory stores."""
    return ItemCoordinator(
        item_store=item_store,
        title_cache=title_cache,
        title_index=title_index,
        cache_set_key=CACHE_KEY,
        metrics=metrics,
    )


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    """Provide an in-memory SQLite engine."""
    engine = build_engine(DurableStoreConfig(url="sqlite://"))
    yield engine
    engine.dispose()


@pytest.fixture
def sql_item_store(sqlite_engine: Engine) -> SqlItemStore:
    """Provide a durable store with its table created."""
    store = SqlItemStore(sqlite_engine, table_name="items")
    store.create_table()
    return store


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
