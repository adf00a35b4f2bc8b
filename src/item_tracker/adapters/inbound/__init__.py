"""Inbound adapters - HTTP surface for the item coordinator."""

from item_tracker.adapters.inbound.rest_api import create_app, run_server

__all__ = ["create_app", "run_server"]
