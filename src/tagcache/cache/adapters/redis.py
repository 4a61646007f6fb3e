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
"""Redis-backed cache store."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from tagcache.cache.payloads import decode_payload, encode_payload, expiry_seconds
from tagcache.cache.properties import ConnectionProperties
from tagcache.cache.types import TypeTag
from tagcache.kernel.exceptions import CacheConnectionError, CacheMissError, StoreError

_logger = logging.getLogger(__name__)

ClientFactory = Callable[[ConnectionProperties], Any]


def redis_client_factory(properties: ConnectionProperties) -> aioredis.Redis:
    """Build a ``redis.asyncio.Redis`` client for database 0."""
    return aioredis.Redis(
        host=properties.host,
        port=int(properties.port),
        password=properties.password or None,
        db=0,
    )


class RedisCacheStore:
    """Cache store that opens a fresh Redis connection for every operation.

    Each call builds a client, pings it, runs exactly one command and closes
    the client again, so concurrent calls never share a connection. The
    client is built by *client_factory*, which receives the connection
    properties and must return a ``redis.asyncio.Redis``-like object.
    """

    def __init__(
        self,
        properties: ConnectionProperties,
        client_factory: ClientFactory | None = None,
        legacy_get: bool = False,
    ) -> None:
        self._properties = properties
        self._client_factory = client_factory or redis_client_factory
        self._legacy_get = legacy_get

    @property
    def properties(self) -> ConnectionProperties:
        return self._properties

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[Any]:
        """Yield a pinged client and close it on every exit path."""
        address = self._properties.address
        client = self._client_factory(self._properties)
        try:
            try:
                await client.ping()
            except RedisError as exc:
                raise CacheConnectionError(
                    f"cannot connect to redis at {address}: {exc}",
                    context={"address": address},
                ) from exc
            yield client
        finally:
            await client.aclose()

    async def open(self) -> None:
        """Check that the store is reachable and accepts our credentials."""
        async with self._connection():
            _logger.debug("Redis at %s is reachable", self._properties.address)

    async def set(self, key: str, tag: TypeTag | str, value: Any, ttl_seconds: int | None = None) -> None:
        """Encode *value* under *tag* and store it with an optional expiry."""
        payload = encode_payload(key, tag, value)
        ex = expiry_seconds(ttl_seconds, self._properties.default_expiry_seconds)

        async with self._connection() as client:
            try:
                await client.set(key, payload, ex=ex)
            except RedisError as exc:
                raise StoreError(f"redis SET failed for key '{key}': {exc}", context={"key": key}) from exc
        _logger.debug("Stored key '%s' (%d bytes, ex=%s)", key, len(payload), ex)

    async def get(self, key: str, tag: TypeTag | str) -> Any:
        """Read *key* and decode it under *tag*."""
        tag = TypeTag.parse(tag)

        async with self._connection() as client:
            try:
                payload = await client.get(key)
            except RedisError as exc:
                raise StoreError(f"redis GET failed for key '{key}': {exc}", context={"key": key}) from exc

        if payload is None:
            raise CacheMissError(f"key '{key}' not found", context={"key": key})
        return decode_payload(key, tag, payload, legacy_get=self._legacy_get)

    async def delete(self, key: str) -> bool:
        """Remove *key*. Returns True if the key existed."""
        async with self._connection() as client:
            try:
                count = await client.delete(key)
            except RedisError as exc:
                raise StoreError(f"redis DEL failed for key '{key}': {exc}", context={"key": key}) from exc
        return bool(count)
