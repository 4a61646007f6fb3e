# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Unified exception hierarchy for tagcache.

All errors raised by the library inherit from TagCacheException, so callers
can catch the base class or target a specific failure.

Categories:
- InvalidTagError: the type tag is not recognized for the operation
- SerializationError / DeserializationError: codec failures
- CacheMissError: the key is absent (or expired) in the store
- StoreError: the remote store failed; CacheConnectionError when the
  connection itself could not be established
"""

from __future__ import annotations


class TagCacheException(Exception):
    """Base exception for all tagcache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_MISS").
        context: Arbitrary key-value pairs describing the failed operation.
    """

    default_code: str | None = None

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code if code is not None else self.default_code
        self.context: dict = context if context is not None else {}


class InvalidTagError(TagCacheException):
    """Tag is not one of the recognized type tags, or not usable for the read."""

    default_code = "INVALID_TAG"


class SerializationError(TagCacheException):
    """A value could not be encoded under the selected tag."""

    default_code = "SERIALIZATION_FAILED"


class DeserializationError(TagCacheException):
    """A stored payload could not be decoded under the selected tag."""

    default_code = "DESERIALIZATION_FAILED"


class CacheMissError(TagCacheException):
    """The requested key does not exist in the store."""

    default_code = "CACHE_MISS"


class StoreError(TagCacheException):
    """The remote store reported a failure."""

    default_code = "STORE_ERROR"


class CacheConnectionError(StoreError):
    """The store is unreachable, rejected authentication, or failed the ping."""

    default_code = "CONNECTION_FAILED"
