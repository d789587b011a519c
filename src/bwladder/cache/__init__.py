"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/__init__.py.
"""

from .base import CacheEntry, ResponseCache
from .bounded import BoundedTTLCache
from .config import DEFAULT_CACHE_CONFIG, CacheConfig, CacheSpec
from .facade import CachedSCApi
from .keys import cache_key, size_of_json
from .metrics import (
    CacheMetrics,
    InMemoryCacheMetrics,
    NullCacheMetrics,
    PrometheusCacheMetrics,
)

__all__ = [
    "CacheEntry",
    "ResponseCache",
    "BoundedTTLCache",
    "CacheSpec",
    "CacheConfig",
    "DEFAULT_CACHE_CONFIG",
    "CachedSCApi",
    "cache_key",
    "size_of_json",
    "CacheMetrics",
    "NullCacheMetrics",
    "InMemoryCacheMetrics",
    "PrometheusCacheMetrics",
]
