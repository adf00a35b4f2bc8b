"""In-memory store adapters.

Simple implementations of the three store ports for local development
and testing. Data is not persisted across restarts. Each adapter has an
``available`` switch; turning it off makes every call raise
StoreConnectionError, which is how tests simulate a dropped connection.

Usage:
    store = InMemoryItemStore()
    cache = InMemoryTitleCache()
    cache.available = False  # next call raises StoreConnectionError
"""

from __future__ import annotations

import re
import threading
from typing import Any

from item_tracker.domain.entities import TEXT_FIELD, Item, ItemTitle, TitleDocument
from item_tracker.ports.outbound.errors import DuplicateTitleError, StoreConnectionError

_TOKEN_PATTERN = re.compile(r"\w+")


def _tokens(text: str) -> list[str]:
    return _TOKEN_PATTERN.findall(text.lower())


class _Switchable:
    """Shared availability switch."""

    store_name = "memory"

    def __init__(self) -> None:
        self.available = True
        self._lock = threading.Lock()

    def _check_available(self) -> None:
        if not self.available:
            raise StoreConnectionError(self.store_name, "connection refused")


class InMemoryItemStore(_Switchable):
    """In-memory implementation of ItemStorePort."""

    store_name = "durable"

    def __init__(self) -> None:
        super().__init__()
        self._items: dict[str, int] = {}
        self._next_id = 1

    def create_table(self) -> None:
        self._check_available()

    def insert_item(self, title: str) -> Item:
        self._check_available()
        with self._lock:
            if title in self._items:
                raise DuplicateTitleError(self.store_name, title)
            item_id = self._next_id
            self._items[title] = item_id
            self._next_id += 1
        return Item(id=item_id, title=title)

    def list_items(self) -> list[ItemTitle]:
        self._check_available()
        with self._lock:
            ordered = sorted(self._items.items(), key=lambda entry: entry[1])
        return [ItemTitle(title=title) for title, _ in ordered]


class InMemoryTitleCache(_Switchable):
    """In-memory implementation of TitleCachePort."""

    store_name = "cache"

    def __init__(self) -> None:
        super().__init__()
        self._sets: dict[str, set[str]] = {}

    def add_member(self, set_key: str, title: str) -> None:
        self._check_available()
        with self._lock:
            self._sets.setdefault(set_key, set()).add(title)

    def list_members(self, set_key: str) -> set[str]:
        self._check_available()
        with self._lock:
            return set(self._sets.get(set_key, ()))

    def clear(self) -> None:
        """Drop every set, as after a cache restart."""
        with self._lock:
            self._sets.clear()


class InMemoryTitleIndex(_Switchable):
    """In-memory implementation of TitleIndexPort.

    Scores a document by how many query tokens it contains and returns
    hits shaped like Elasticsearch hit records.
    """

    store_name = "index"

    def __init__(self, index_name: str = "items") -> None:
        super().__init__()
        self._index_name = index_name
        self._exists = False
        self._documents: list[TitleDocument] = []

    @property
    def documents(self) -> list[TitleDocument]:
        with self._lock:
            return list(self._documents)

    def ensure_index(self) -> bool:
        self._check_available()
        with self._lock:
            created = not self._exists
            self._exists = True
        return created

    def index_document(self, document: TitleDocument) -> None:
        self._check_available()
        with self._lock:
            self._exists = True
            self._documents.append(document)

    def match_query(self, field: str, text: str) -> list[dict[str, Any]]:
        self._check_available()
        query_tokens = set(_tokens(text))
        if field != TEXT_FIELD or not query_tokens:
            return []

        with self._lock:
            documents = list(enumerate(self._documents))

        hits = []
        for position, document in documents:
            score = len(query_tokens.intersection(_tokens(document.text)))
            if score:
                hits.append(
                    {
                        "_index": self._index_name,
                        "_id": str(position),
                        "_score": float(score),
                        "_source": document.to_source(),
                    }
                )

        # Stable sort keeps insertion order among equal scores
        hits.sort(key=lambda hit: hit["_score"], reverse=True)
        return hits
