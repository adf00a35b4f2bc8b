"""Ports layer - interface definitions following Hexagonal Architecture.

The coordinator depends only on the outbound ports declared here. The
durable store, cache and search index adapters implement them.
"""

from item_tracker.ports.outbound import (
    DuplicateTitleError,
    ItemStorePort,
    StoreConnectionError,
    StoreError,
    TitleCachePort,
    TitleIndexPort,
)

__all__ = [
    "ItemStorePort",
    "TitleCachePort",
    "TitleIndexPort",
    "StoreError",
    "StoreConnectionError",
    "DuplicateTitleError",
]
