"""tagcache kernel: exception hierarchy shared by every subsystem."""

from tagcache.kernel.exceptions import (
    CacheConnectionError,
    CacheMissError,
    DeserializationError,
    InvalidTagError,
    SerializationError,
    StoreError,
    TagCacheException,
)

__all__ = [
    "CacheConnectionError",
    "CacheMissError",
    "DeserializationError",
    "InvalidTagError",
    "SerializationError",
    "StoreError",
    "TagCacheException",
]
