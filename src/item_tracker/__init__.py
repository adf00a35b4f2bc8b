"""
Item Tracker - multi-store item tracking service

A small item-tracking service backed by a durable relational store,
an in-memory title cache and a full-text search index, coordinated by
a read-through / best-effort write-through policy.
"""

__version__ = "0.1.0"
