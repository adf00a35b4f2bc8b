"""Adapters layer - concrete implementations of port interfaces.

Adapters provide the actual implementations:
- Inbound adapters: Handle incoming requests (REST)
- Outbound adapters: Talk to the durable store, cache and search index
"""

from item_tracker.adapters.outbound import (
    ElasticsearchTitleIndex,
    InMemoryItemStore,
    InMemoryTitleCache,
    InMemoryTitleIndex,
    RedisTitleCache,
    SqlItemStore,
)

__all__ = [
    "SqlItemStore",
    "RedisTitleCache",
    "ElasticsearchTitleIndex",
    "InMemoryItemStore",
    "InMemoryTitleCache",
    "InMemoryTitleIndex",
]
