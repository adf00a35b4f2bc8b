"""Title cache port."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class TitleCachePort(Protocol):
    """Protocol for the in-memory title set.

    The cache is an unordered, duplicate-free set of titles per key.
    Adding a member is idempotent. Nothing is ever evicted.
    """

    @abstractmethod
    def add_member(self, set_key: str, title: str) -> None:
        """Add a title to the set stored at ``set_key``.

        Raises:
            StoreConnectionError: If the cache cannot be reached.
        """
        ...

    @abstractmethod
    def list_members(self, set_key: str) -> set[str]:
        """Return every title in the set stored at ``set_key``.

        Soft failures are reported as an empty set; only a hard
        connection failure raises.

        Raises:
            StoreConnectionError: If the cache cannot be reached.
        """
        ...
