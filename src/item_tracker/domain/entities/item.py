"""Item entity and its title projection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item as recorded by the durable store.

    The id is assigned by the durable store on insert. Titles are unique,
    but only the durable store enforces that.
    """

    id: int
    title: str


@dataclass(frozen=True)
class ItemTitle:
    """Title-only projection returned by list reads."""

    title: str
