"""Durable item store port.

The durable store is the source of truth and the only component whose
data survives process and cache loss.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from item_tracker.domain.entities import Item, ItemTitle


@runtime_checkable
class ItemStorePort(Protocol):
    """Protocol for the relational item store.

    Thread Safety:
        Implementations are shared by all concurrent requests and must
        be safe to call from several threads at once.
    """

    @abstractmethod
    def create_table(self) -> None:
        """Create the items table if it does not exist.

        Idempotent. Called once at bootstrap.
        """
        ...

    @abstractmethod
    def insert_item(self, title: str) -> Item:
        """Insert a new item.

        Args:
            title: Item title.

        Returns:
            The stored item, carrying the id assigned by the store.

        Raises:
            DuplicateTitleError: If the title already exists.
            StoreConnectionError: If the store cannot be reached.
        """
        ...

    @abstractmethod
    def list_items(self) -> list[ItemTitle]:
        """List every item title.

        Raises:
            StoreConnectionError: If the store cannot be reached.
        """
        ...
