"""Outbound ports - interfaces for the three backing stores.

Outbound ports define contracts for the durable store, the title cache
and the search index that the coordinator orchestrates.
"""

from item_tracker.ports.outbound.errors import (
    DuplicateTitleError,
    StoreConnectionError,
    StoreError,
)
from item_tracker.ports.outbound.item_store import ItemStorePort
from item_tracker.ports.outbound.title_cache import TitleCachePort
from item_tracker.ports.outbound.title_index import TitleIndexPort

__all__ = [
    "ItemStorePort",
    "TitleCachePort",
    "TitleIndexPort",
    "StoreError",
    "StoreConnectionError",
    "DuplicateTitleError",
]
