"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Redis response cache.

Stores JSON-encoded values with a Redis-enforced TTL so several processes
can share cached API responses.
"""

import json
from typing import Any, Optional

import redis

from headless_admin.cache.base import CacheBackend
from headless_admin.exceptions import CacheError
from headless_admin.logging_config import get_logger

logger = get_logger(__name__)


class RedisCache(CacheBackend):
    """
    Redis-backed cache.

    Values must be JSON-serializable. Keys are expected to carry the
    configured key prefix; clear() only removes keys under that prefix.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        password: Optional[str] = None,
        db: int = 0,
        ssl: bool = False,
        key_prefix: str = "headless",
        socket_timeout: int = 5,
        client: Optional[redis.Redis] = None,
    ):
        """
        Initialize Redis cache.

        Args:
            host: Redis server host
            port: Redis server port
            password: Redis password (optional)
            db: Redis database number
            ssl: Enable SSL/TLS
            key_prefix: Namespace owned by this cache
            socket_timeout: Socket timeout in seconds
            client: Pre-built Redis client, used instead of creating one
        """
        self.key_prefix = key_prefix
        if client is None:
            client = redis.Redis(
                host=host,
                port=port,
                db=db,
                password=password or None,
                ssl=ssl,
                socket_timeout=socket_timeout,
                socket_connect_timeout=socket_timeout,
                decode_responses=True,
            )
            logger.info(
                f"Redis cache initialized: host={host}, port={port}, "
                f"db={db}, ssl={ssl}"
            )
        self._client = client

    def has(self, key: str) -> bool:
        try:
            return bool(self._client.exists(key))
        except redis.RedisError as e:
            logger.error(f"Redis EXISTS failed for key {key}: {e}")
            raise CacheError(f"Failed to check key {key}: {e}") from e

    def get(self, key: str) -> Any:
        try:
            raw = self._client.get(key)
        except redis.RedisError as e:
            logger.error(f"Redis GET failed for key {key}: {e}")
            raise CacheError(f"Failed to get key {key}: {e}") from e
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise CacheError(f"Cached value for key {key} is not valid JSON: {e}") from e

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise CacheError(f"Value for key {key} is not JSON-serializable: {e}") from e
        try:
            self._client.set(key, payload, ex=ttl)
        except redis.RedisError as e:
            logger.error(f"Redis SET failed for key {key}: {e}")
            raise CacheError(f"Failed to set key {key}: {e}") from e

    def delete(self, key: str) -> bool:
        try:
            return self._client.delete(key) > 0
        except redis.RedisError as e:
            logger.error(f"Redis DELETE failed for key {key}: {e}")
            raise CacheError(f"Failed to delete key {key}: {e}") from e

    def clear(self) -> None:
        try:
            keys = list(self._client.scan_iter(match=f"{self.key_prefix}:*"))
            if keys:
                self._client.delete(*keys)
        except redis.RedisError as e:
            logger.error(f"Redis cache clear failed: {e}")
            raise CacheError(f"Failed to clear cache: {e}") from e
        logger.debug(f"Cleared {len(keys)} cached entries under {self.key_prefix}")

    def ping(self) -> bool:
        """
        Ping Redis server to check connectivity.

        Returns:
            True if connected, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.error(f"Redis ping failed: {e}")
            return False
