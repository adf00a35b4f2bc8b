"""Unit tests for the Redis title cache."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import redis

from item_tracker.adapters.outbound import RedisTitleCache, build_redis_client
from item_tracker.infrastructure.config import CacheConfig
from item_tracker.ports.outbound import StoreConnectionError, StoreError, TitleCachePort


@pytest.fixture
def client() -> MagicMock:
    return MagicMock(spec=redis.Redis)


@pytest.mark.unit
class TestRedisTitleCache:
    """Tests for RedisTitleCache with a mocked client."""

    def test_implements_port(self, client: MagicMock) -> None:
        assert isinstance(RedisTitleCache(client), TitleCachePort)

    def test_add_member_uses_sadd(self, client: MagicMock) -> None:
        RedisTitleCache(client).add_member("items", "buy milk")

        client.sadd.assert_called_once_with("items", "buy milk")

    def test_list_members_returns_set(self, client: MagicMock) -> None:
        client.smembers.return_value = {"buy milk", "walk dog"}

        assert RedisTitleCache(client).list_members("items") == {"buy milk", "walk dog"}
        client.smembers.assert_called_once_with("items")

    @pytest.mark.parametrize(
        "error", [redis.ConnectionError("refused"), redis.TimeoutError("timed out")]
    )
    def test_hard_failure_on_read_raises(self, client: MagicMock, error: Exception) -> None:
        client.smembers.side_effect = error

        with pytest.raises(StoreConnectionError):
            RedisTitleCache(client).list_members("items")

    def test_soft_failure_on_read_is_empty(self, client: MagicMock) -> None:
        client.smembers.side_effect = redis.ResponseError(
            "WRONGTYPE Operation against a key holding the wrong kind of value"
        )

        assert RedisTitleCache(client).list_members("items") == set()

    def test_undecodable_member_reads_as_empty(self, client: MagicMock) -> None:
        client.smembers.side_effect = UnicodeDecodeError(
            "utf-8", b"\xff", 0, 1, "invalid start byte"
        )

        assert RedisTitleCache(client).list_members("items") == set()

    def test_hard_failure_on_write_raises(self, client: MagicMock) -> None:
        client.sadd.side_effect = redis.ConnectionError("connection reset")

        with pytest.raises(StoreConnectionError) as exc_info:
            RedisTitleCache(client).add_member("items", "buy milk")

        assert exc_info.value.store == "cache"

    def test_soft_failure_on_write_raises_store_error(self, client: MagicMock) -> None:
        client.sadd.side_effect = redis.ResponseError("OOM command not allowed")

        with pytest.raises(StoreError) as exc_info:
            RedisTitleCache(client).add_member("items", "buy milk")

        assert not isinstance(exc_info.value, StoreConnectionError)


@pytest.mark.unit
def test_build_redis_client_applies_timeouts() -> None:
    client = build_redis_client(
        CacheConfig(host="cache.example", port=6380, socket_timeout_seconds=0.5)
    )

    kwargs = client.connection_pool.connection_kwargs
    assert kwargs["host"] == "cache.example"
    assert kwargs["port"] == 6380
    assert kwargs["socket_timeout"] == 0.5
    assert kwargs["decode_responses"] is True
