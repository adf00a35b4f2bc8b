"""Unit tests for the in-memory store adapters."""

from __future__ import annotations

import pytest

from item_tracker.adapters.outbound import (
    InMemoryItemStore,
    InMemoryTitleCache,
    InMemoryTitleIndex,
)
from item_tracker.domain.entities import Item, ItemTitle, TitleDocument
from item_tracker.ports.outbound import (
    DuplicateTitleError,
    ItemStorePort,
    StoreConnectionError,
    TitleCachePort,
    TitleIndexPort,
)


@pytest.mark.unit
class TestInMemoryItemStore:

    def test_implements_port(self, item_store: InMemoryItemStore) -> None:
        assert isinstance(item_store, ItemStorePort)

    def test_insert_and_list(self, item_store: InMemoryItemStore) -> None:
        assert item_store.insert_item("buy milk") == Item(id=1, title="buy milk")
        assert item_store.insert_item("walk dog") == Item(id=2, title="walk dog")
        assert item_store.list_items() == [ItemTitle("buy milk"), ItemTitle("walk dog")]

    def test_duplicate(self, item_store: InMemoryItemStore) -> None:
        item_store.insert_item("buy milk")

        with pytest.raises(DuplicateTitleError):
            item_store.insert_item("buy milk")

    def test_unavailable(self, item_store: InMemoryItemStore) -> None:
        item_store.available = False

        with pytest.raises(StoreConnectionError) as exc_info:
            item_store.list_items()

        assert exc_info.value.store == "durable"


@pytest.mark.unit
class TestInMemoryTitleCache:

    def test_implements_port(self, title_cache: InMemoryTitleCache) -> None:
        assert isinstance(title_cache, TitleCachePort)

    def test_add_member_is_idempotent(self, title_cache: InMemoryTitleCache) -> None:
        title_cache.add_member("items", "buy milk")
        title_cache.add_member("items", "buy milk")

        assert title_cache.list_members("items") == {"buy milk"}

    def test_keys_are_separate(self, title_cache: InMemoryTitleCache) -> None:
        title_cache.add_member("items", "buy milk")

        assert title_cache.list_members("other") == set()

    def test_clear(self, title_cache: InMemoryTitleCache) -> None:
        title_cache.add_member("items", "buy milk")
        title_cache.clear()

        assert title_cache.list_members("items") == set()


@pytest.mark.unit
class TestInMemoryTitleIndex:

    def test_implements_port(self, title_index: InMemoryTitleIndex) -> None:
        assert isinstance(title_index, TitleIndexPort)

    def test_ensure_index_reports_creation_once(self) -> None:
        index = InMemoryTitleIndex()

        assert index.ensure_index() is True
        assert index.ensure_index() is False

    def test_match_ranks_by_shared_tokens(self, title_index: InMemoryTitleIndex) -> None:
        title_index.index_document(TitleDocument(text="buy milk"))
        title_index.index_document(TitleDocument(text="buy oat milk today"))
        title_index.index_document(TitleDocument(text="walk dog"))

        hits = title_index.match_query("text", "Oat Milk")

        assert [hit["_source"]["text"] for hit in hits] == ["buy oat milk today", "buy milk"]
        assert hits[0]["_score"] == 2.0
        assert hits[0]["_index"] == "items"

    def test_match_on_unknown_field_is_empty(self, title_index: InMemoryTitleIndex) -> None:
        title_index.index_document(TitleDocument(text="buy milk"))

        assert title_index.match_query("title", "milk") == []
