"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Response cache backends.
"""

from typing import Optional

from headless_admin.cache.base import (
    CacheBackend,
    canonical_args,
    generate_cache_key,
    get_or_set_cache,
)
from headless_admin.cache.memory import MemoryCache
from headless_admin.config.settings import CacheConfig


def create_cache(config: CacheConfig) -> Optional[CacheBackend]:
    """Build the backend named by ``config.backend``, or None for ``none``."""
    if config.backend == "memory":
        return MemoryCache(max_entries=config.max_entries)
    if config.backend == "redis":
        from headless_admin.cache.redis import RedisCache

        return RedisCache(
            host=config.redis.host,
            port=config.redis.port,
            password=config.redis.password or None,
            db=config.redis.db,
            ssl=config.redis.ssl,
            key_prefix=config.key_prefix,
        )
    return None


__all__ = [
    "CacheBackend",
    "MemoryCache",
    "canonical_args",
    "create_cache",
    "generate_cache_key",
    "get_or_set_cache",
]
