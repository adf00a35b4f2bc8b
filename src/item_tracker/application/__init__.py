"""Application layer for the item tracker.

Exports:
    - ItemCoordinator: Multi-store consistency coordinator for list,
      create and search
    - SecondaryWriter: Runs best-effort writes to the accelerators
"""

from item_tracker.application.coordinator import DEFAULT_CACHE_SET_KEY, ItemCoordinator
from item_tracker.application.secondary_writes import SecondaryWriter

__all__ = [
    "ItemCoordinator",
    "SecondaryWriter",
    "DEFAULT_CACHE_SET_KEY",
]
