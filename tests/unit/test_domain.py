"""Unit tests for domain entities and errors."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from item_tracker.domain import (
    CreateFailed,
    InvalidTitle,
    Item,
    ItemTitle,
    ItemTrackerError,
    StoreUnavailable,
    TitleDocument,
)


@pytest.mark.unit
class TestEntities:

    def test_item_is_immutable(self) -> None:
        item = Item(id=7, title="buy milk")

        with pytest.raises(FrozenInstanceError):
            item.title = "walk dog"  # type: ignore[misc]

    def test_item_title_equality(self) -> None:
        assert ItemTitle(title="buy milk") == ItemTitle("buy milk")

    def test_title_document_source_has_only_text(self) -> None:
        document = TitleDocument(text="buy milk")

        assert document.to_source() == {"text": "buy milk"}

    def test_title_document_mapping(self) -> None:
        assert TitleDocument.mapping() == {"properties": {"text": {"type": "text"}}}


@pytest.mark.unit
class TestErrors:

    def test_store_unavailable_names_store(self) -> None:
        error = StoreUnavailable("cache")

        assert error.store == "cache"
        assert "cache" in str(error)
        assert isinstance(error, ItemTrackerError)

    def test_create_failed_flags_duplicates(self) -> None:
        error = CreateFailed("buy milk", duplicate=True)

        assert error.duplicate is True
        assert error.title == "buy milk"

    def test_invalid_title(self) -> None:
        error = InvalidTitle("")

        assert isinstance(error, CreateFailed)
        assert error.duplicate is False
