"""Redis-backed title cache.

Titles live in a single Redis set. SADD makes writes idempotent, so a
list backfill racing a create on the same title is harmless.
"""

from __future__ import annotations

import redis

from item_tracker.infrastructure.config import CacheConfig
from item_tracker.infrastructure.logging import get_logger
from item_tracker.ports.outbound.errors import StoreConnectionError, StoreError

STORE_NAME = "cache"

logger = get_logger(__name__)


def build_redis_client(config: CacheConfig) -> redis.Redis:
    """Create the pooled Redis client shared by every request."""
    return redis.Redis(
        host=config.host,
        port=config.port,
        db=config.db,
        decode_responses=True,
        socket_timeout=config.socket_timeout_seconds,
        socket_connect_timeout=config.socket_timeout_seconds,
        retry_on_timeout=config.retry_on_timeout,
    )


class RedisTitleCache:
    """Title cache implementing TitleCachePort on a Redis set."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    def add_member(self, set_key: str, title: str) -> None:
        try:
            self._client.sadd(set_key, title)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise StoreConnectionError(STORE_NAME, str(e)) from e
        except redis.RedisError as e:
            raise StoreError(STORE_NAME, str(e)) from e

    def list_members(self, set_key: str) -> set[str]:
        try:
            members = self._client.smembers(set_key)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            raise StoreConnectionError(STORE_NAME, str(e)) from e
        except (redis.RedisError, UnicodeDecodeError) as e:
            # Anything short of a lost connection reads as a cold cache.
            logger.warning("cache_read_failed", set_key=set_key, error=str(e))
            return set()

        return set(members)
