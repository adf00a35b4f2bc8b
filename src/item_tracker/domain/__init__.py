"""Domain layer - items, indexed documents and the error taxonomy."""

from item_tracker.domain.entities import Item, ItemTitle, TitleDocument
from item_tracker.domain.errors import (
    CreateFailed,
    InvalidTitle,
    ItemTrackerError,
    StoreUnavailable,
)

__all__ = [
    "Item",
    "ItemTitle",
    "TitleDocument",
    "ItemTrackerError",
    "StoreUnavailable",
    "CreateFailed",
    "InvalidTitle",
]
