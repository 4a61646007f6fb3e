"""tagcache cache: tagged get/set/delete over a key-value store."""

from tagcache.cache.adapters.memory import InMemoryCacheStore
from tagcache.cache.adapters.redis import RedisCacheStore
from tagcache.cache.factory import create_cache_store
from tagcache.cache.ports.outbound import CacheStore
from tagcache.cache.properties import ConnectionProperties, StoreProperties
from tagcache.cache.types import TypeTag

__all__ = [
    "CacheStore",
    "ConnectionProperties",
    "InMemoryCacheStore",
    "RedisCacheStore",
    "StoreProperties",
    "TypeTag",
    "create_cache_store",
]
