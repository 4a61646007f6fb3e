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
"""In-process cache store."""

from __future__ import annotations

import time
from typing import Any

from tagcache.cache.payloads import decode_payload, encode_payload, expiry_seconds
from tagcache.cache.types import TypeTag
from tagcache.kernel.exceptions import CacheMissError


class InMemoryCacheStore:
    """In-memory cache store with TTL support.

    Stores the same encoded payloads as the Redis store, so it can stand in
    for it in tests and single-process development setups.
    """

    def __init__(self, default_expiry_seconds: int = 0, legacy_get: bool = False) -> None:
        self._store: dict[str, tuple[bytes, float | None]] = {}
        self._default_expiry_seconds = default_expiry_seconds
        self._legacy_get = legacy_get

    async def open(self) -> None:
        """Always reachable."""

    async def set(self, key: str, tag: TypeTag | str, value: Any, ttl_seconds: int | None = None) -> None:
        payload = encode_payload(key, tag, value)
        ttl = expiry_seconds(ttl_seconds, self._default_expiry_seconds)
        expires_at = time.monotonic() + ttl if ttl is not None else None
        self._store[key] = (payload, expires_at)

    async def get(self, key: str, tag: TypeTag | str) -> Any:
        tag = TypeTag.parse(tag)
        payload = self._live_payload(key)
        if payload is None:
            raise CacheMissError(f"key '{key}' not found", context={"key": key})
        return decode_payload(key, tag, payload, legacy_get=self._legacy_get)

    async def delete(self, key: str) -> bool:
        """Remove a key. Returns True if the key existed."""
        existed = self._live_payload(key) is not None
        self._store.pop(key, None)
        return existed

    def _live_payload(self, key: str) -> bytes | None:
        entry = self._store.get(key)
        if entry is None:
            return None

        payload, expires_at = entry
        if expires_at is not None and time.monotonic() > expires_at:
            del self._store[key]
            return None
        return payload
