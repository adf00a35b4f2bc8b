"""Domain entities."""

from item_tracker.domain.entities.item import Item, ItemTitle
from item_tracker.domain.entities.title_document import TEXT_FIELD, TitleDocument

__all__ = ["Item", "ItemTitle", "TitleDocument", "TEXT_FIELD"]
