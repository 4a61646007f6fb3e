"""Cache adapters: concrete cache store implementations."""

from tagcache.cache.adapters.memory import InMemoryCacheStore
from tagcache.cache.adapters.redis import RedisCacheStore

__all__ = ["InMemoryCacheStore", "RedisCacheStore"]
