"""Errors surfaced by the item coordinator.

Only the mandatory path (durable reads and writes, plus the cache read
that gates the list path) produces these. Failures on the accelerator
path never reach the caller.
"""

from __future__ import annotations


class ItemTrackerError(Exception):
    """Base class for item tracker operation failures."""


class StoreUnavailable(ItemTrackerError):
    """Raised when a store needed by a read cannot be reached."""

    def __init__(self, store: str, message: str = "") -> None:
        self.store = store
        super().__init__(message or f"{store} store unavailable")


class CreateFailed(ItemTrackerError):
    """Raised when an item could not be committed to the durable store."""

    def __init__(self, title: str, message: str = "", duplicate: bool = False) -> None:
        self.title = title
        self.duplicate = duplicate
        super().__init__(message or f"failed to create item {title!r}")


class InvalidTitle(CreateFailed):
    """Raised when a create is attempted with an empty title."""

    def __init__(self, title: str) -> None:
        super().__init__(title, "item title must be a non-empty string")
