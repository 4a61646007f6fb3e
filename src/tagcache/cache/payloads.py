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
"""Tag handling shared by every CacheStore implementation."""

from __future__ import annotations

from typing import Any

from tagcache.cache.codecs import codec_for
from tagcache.cache.types import TypeTag
from tagcache.kernel.exceptions import InvalidTagError, TagCacheException


def encode_payload(key: str, tag: TypeTag | str, value: Any) -> bytes:
    """Encode *value* for storage under *key*, before any connection is made."""
    codec = codec_for(tag)
    try:
        return codec.encode(value)
    except TagCacheException as exc:
        exc.context.setdefault("key", key)
        raise


def decode_payload(key: str, tag: TypeTag | str, payload: bytes, legacy_get: bool = False) -> Any:
    """Decode a stored payload read back under *tag*.

    With *legacy_get* only RAW reads return a value: JSON and XML payloads
    are still decoded (so a corrupt payload reports DeserializationError) but
    the result is dropped and InvalidTagError raised.
    """
    codec = codec_for(tag)
    try:
        value = codec.decode(payload)
    except TagCacheException as exc:
        exc.context.setdefault("key", key)
        raise

    if legacy_get and codec.tag is not TypeTag.RAW:
        raise InvalidTagError(
            f"invalid cache type tag for read: {codec.tag.name}",
            context={"key": key, "tag": codec.tag.name},
        )
    return value


def expiry_seconds(ttl_seconds: int | None, default_seconds: int) -> int | None:
    """Expiry to send with SET, or None for a key that never expires."""
    ttl = default_seconds if ttl_seconds is None else ttl_seconds
    return ttl if ttl > 0 else None
