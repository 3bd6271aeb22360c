"""
Unit tests for the Redis cache backend.
"""

import json
from unittest.mock import Mock

import pytest
import redis

from headless_admin.cache.redis import RedisCache
from headless_admin.exceptions import CacheError


@pytest.fixture
def redis_client():
    """Mocked Redis client."""
    return Mock()


@pytest.fixture
def cache(redis_client):
    """RedisCache bound to the mocked client."""
    return RedisCache(key_prefix="headless", client=redis_client)


class TestRedisCache:
    """Test RedisCache operations."""

    def test_set_encodes_json_with_ttl(self, cache, redis_client):
        """Test that values are stored as JSON with an expiry."""
        cache.set("headless:k", {"body": "[]", "status_code": 200}, 60)
        redis_client.set.assert_called_once_with(
            "headless:k", json.dumps({"body": "[]", "status_code": 200}), ex=60
        )

    def test_get_decodes_json(self, cache, redis_client):
        """Test that stored JSON is decoded."""
        redis_client.get.return_value = '{"a": 1}'
        assert cache.get("headless:k") == {"a": 1}

    def test_get_missing(self, cache, redis_client):
        """Test that a missing key returns None."""
        redis_client.get.return_value = None
        assert cache.get("headless:k") is None

    def test_get_invalid_json(self, cache, redis_client):
        """Test that corrupt values raise CacheError."""
        redis_client.get.return_value = "not json"
        with pytest.raises(CacheError):
            cache.get("headless:k")

    def test_set_unserializable(self, cache):
        """Test that non-JSON values raise CacheError."""
        with pytest.raises(CacheError):
            cache.set("headless:k", object(), 60)

    def test_has(self, cache, redis_client):
        """Test existence check."""
        redis_client.exists.return_value = 1
        assert cache.has("headless:k") is True
        redis_client.exists.return_value = 0
        assert cache.has("headless:k") is False

    def test_delete(self, cache, redis_client):
        """Test delete result."""
        redis_client.delete.return_value = 1
        assert cache.delete("headless:k") is True

    def test_clear_scans_prefix(self, cache, redis_client):
        """Test that clear only removes keys under the prefix."""
        redis_client.scan_iter.return_value = iter(["headless:a", "headless:b"])
        cache.clear()
        redis_client.scan_iter.assert_called_once_with(match="headless:*")
        redis_client.delete.assert_called_once_with("headless:a", "headless:b")

    def test_redis_errors_wrapped(self, cache, redis_client):
        """Test that Redis failures raise CacheError."""
        redis_client.get.side_effect = redis.ConnectionError("down")
        with pytest.raises(CacheError):
            cache.get("headless:k")

    def test_ping(self, cache, redis_client):
        """Test ping success and failure."""
        redis_client.ping.return_value = True
        assert cache.ping() is True
        redis_client.ping.side_effect = redis.ConnectionError("down")
        assert cache.ping() is False
