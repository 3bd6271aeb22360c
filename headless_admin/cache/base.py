"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Headless Admin SDK, a product of Garudex Labs

Response cache contract and the get-or-set wrapper used by endpoint requests.
"""

from __future__ import annotations

import hashlib
import json
from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Optional

from headless_admin.logging_config import get_logger, log_cache_lookup

logger = get_logger(__name__)


class CacheBackend(ABC):
    """Abstract key/value cache with per-entry TTL.

    Callers treat every operation as an atomic black-box call; any locking
    is the backend's own concern.
    """

    @abstractmethod
    def has(self, key: str) -> bool:
        """Whether a non-expired entry exists for ``key``."""
        ...

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the cached value for ``key`` or ``None``."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Store ``value`` under ``key``, expiring after ``ttl`` seconds."""
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove ``key``. Returns True if an entry was removed."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry owned by this backend."""
        ...


def canonical_args(args: Mapping[str, Any]) -> str:
    """Serialize an argument mapping so equal mappings give equal strings."""
    return json.dumps(args, sort_keys=True, separators=(",", ":"), default=str)


def generate_cache_key(
    request_type: type,
    endpoint: str,
    args: Mapping[str, Any],
    prefix: str = "headless",
) -> str:
    """
    Build a deterministic cache key for a rendered request.

    Args:
        request_type: Concrete request class
        endpoint: Rendered endpoint path
        args: Argument mapping sent with the request
        prefix: Namespace prepended to the digest

    Returns:
        ``<prefix>:<sha256 hex>``
    """
    identity = f"{request_type.__module__}.{request_type.__qualname__}"
    material = "\n".join([identity, endpoint, canonical_args(args)])
    digest = hashlib.sha256(material.encode("utf-8")).hexdigest()
    return f"{prefix}:{digest}"


def get_or_set_cache(
    cache: Optional[CacheBackend],
    key: str,
    ttl: Optional[int],
    fn: Callable[[], Any],
) -> Any:
    """
    Return the cached value for ``key`` or compute, store and return it.

    Without a cache backend ``fn`` is invoked on every call. The backend is
    read with a single ``get``; ``None`` counts as a miss, so an entry that
    expires between calls is recomputed.

    Args:
        cache: Cache backend, or None when caching is disabled
        key: Cache key
        ttl: Time-to-live in seconds for a newly stored value
        fn: Computation invoked on a miss

    Returns:
        The cached or freshly computed value
    """
    if cache is None:
        return fn()

    cached = cache.get(key)
    if cached is not None:
        log_cache_lookup(logger, key, hit=True)
        return cached

    log_cache_lookup(logger, key, hit=False, ttl=ttl)
    content = fn()
    cache.set(key, content, ttl)
    return content
