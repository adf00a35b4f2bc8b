"""Errors raised by outbound adapters.

Adapters translate their client library's exceptions into these so the
coordinator never imports a driver.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base class for adapter failures."""

    def __init__(self, store: str, message: str) -> None:
        self.store = store
        super().__init__(f"{store}: {message}")


class StoreConnectionError(StoreError):
    """Raised on a transport-level failure (refused, reset, timed out)."""


class DuplicateTitleError(StoreError):
    """Raised by the durable store when a title already exists."""

    def __init__(self, store: str, title: str) -> None:
        self.title = title
        super().__init__(store, f"title {title!r} already exists")
