"""Search index port."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Protocol, runtime_checkable

from item_tracker.domain.entities import TitleDocument


@runtime_checkable
class TitleIndexPort(Protocol):
    """Protocol for the full-text title index.

    The index name is fixed per adapter instance. Documents are append
    only.
    """

    @abstractmethod
    def ensure_index(self) -> bool:
        """Create the index if it does not exist.

        Returns:
            True if the index was created, False if it already existed.
        """
        ...

    @abstractmethod
    def index_document(self, document: TitleDocument) -> None:
        """Append a document to the index.

        Raises:
            StoreConnectionError: If the index cannot be reached.
        """
        ...

    @abstractmethod
    def match_query(self, field: str, text: str) -> list[dict[str, Any]]:
        """Run a match query over ``field``.

        Args:
            field: Document field to match against.
            text: Free-text query.

        Returns:
            Raw hit records in the index's relevance order.

        Raises:
            StoreConnectionError: If the index cannot be reached.
        """
        ...
