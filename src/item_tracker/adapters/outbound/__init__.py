"""Outbound adapters - implementations of the store ports.

Production adapters wrap SQLAlchemy, redis-py and the Elasticsearch
client. The in-memory adapters back local development and tests.
"""

from item_tracker.adapters.outbound.elasticsearch_title_index import (
    ElasticsearchTitleIndex,
    build_elasticsearch_client,
)
from item_tracker.adapters.outbound.memory import (
    InMemoryItemStore,
    InMemoryTitleCache,
    InMemoryTitleIndex,
)
from item_tracker.adapters.outbound.redis_title_cache import (
    RedisTitleCache,
    build_redis_client,
)
from item_tracker.adapters.outbound.sql_item_store import SqlItemStore, build_engine

__all__ = [
    "SqlItemStore",
    "build_engine",
    "RedisTitleCache",
    "build_redis_client",
    "ElasticsearchTitleIndex",
    "build_elasticsearch_client",
    "InMemoryItemStore",
    "InMemoryTitleCache",
    "InMemoryTitleIndex",
]
