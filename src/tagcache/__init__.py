"""tagcache: tagged get/set/delete over Redis with JSON, XML, or raw payloads."""

from tagcache.cache import (
    CacheStore,
    ConnectionProperties,
    InMemoryCacheStore,
    RedisCacheStore,
    StoreProperties,
    TypeTag,
    create_cache_store,
)
from tagcache.core.config import Config
from tagcache.kernel.exceptions import (
    CacheConnectionError,
    CacheMissError,
    DeserializationError,
    InvalidTagError,
    SerializationError,
    StoreError,
    TagCacheException,
)

__version__ = "0.1.0"

__all__ = [
    "CacheConnectionError",
    "CacheMissError",
    "CacheStore",
    "Config",
    "ConnectionProperties",
    "DeserializationError",
    "InMemoryCacheStore",
    "InvalidTagError",
    "RedisCacheStore",
    "SerializationError",
    "StoreError",
    "StoreProperties",
    "TagCacheException",
    "TypeTag",
    "__version__",
    "create_cache_store",
]
