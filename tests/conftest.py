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
"""Shared fixtures: an in-memory stand-in for a Redis server and its clients."""

from __future__ import annotations

import time
from typing import Any

import pytest
from redis.exceptions import AuthenticationError, ConnectionError, DataError, ResponseError

from tagcache.cache.properties import ConnectionProperties


def _encode(value: Any) -> bytes:
    """Encode a command argument the way redis-py's Encoder does."""
    if isinstance(value, (bytes, memoryview)):
        return bytes(value)
    if isinstance(value, bool):
        raise DataError("Invalid input of type: 'bool'.")
    if isinstance(value, (int, float)):
        return repr(value).encode()
    if isinstance(value, str):
        return value.encode()
    raise DataError(f"Invalid input of type: '{type(value).__name__}'.")


class FakeRedisServer:
    """Holds the keyspace shared by every FakeRedis client it hands out."""

    def __init__(self, password: str = "") -> None:
        self.password = password
        self.reachable = True
        self.failing_commands: set[str] = set()
        self.data: dict[str, tuple[bytes, float | None]] = {}
        self.clients: list[FakeRedis] = []
        self.commands: list[tuple[str, tuple[Any, ...]]] = []

    def client_factory(self, properties: ConnectionProperties) -> FakeRedis:
        client = FakeRedis(self, properties.password or None)
        self.clients.append(client)
        return client

    @property
    def open_clients(self) -> list[FakeRedis]:
        return [c for c in self.clients if not c.closed]

    def raw(self, key: str) -> bytes | None:
        entry = self.data.get(key)
        if entry is None:
            return None
        payload, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self.data[key]
            return None
        return payload

    def ttl(self, key: str) -> float | None:
        _, expires_at = self.data[key]
        return None if expires_at is None else expires_at - time.monotonic()

    def expire_now(self, key: str) -> None:
        payload, _ = self.data[key]
        self.data[key] = (payload, time.monotonic() - 1)


class FakeRedis:
    """Minimal stub matching the slice of redis.asyncio.Redis the store uses."""

    def __init__(self, server: FakeRedisServer, password: str | None) -> None:
        self._server = server
        self._password = password
        self.closed = False

    def _command(self, name: str, *args: Any) -> None:
        if self.closed:
            raise ConnectionError("client is closed")
        self._server.commands.append((name, args))
        if name in self._server.failing_commands:
            raise ResponseError(f"ERR simulated {name} failure")

    async def ping(self) -> bool:
        if not self._server.reachable:
            raise ConnectionError("Error 111 connecting to localhost:6379. Connection refused.")
        if self._server.password and self._password != self._server.password:
            raise AuthenticationError("invalid username-password pair or user is disabled.")
        self._command("ping")
        return True

    async def set(self, key: str, value: Any, ex: int | None = None) -> bool:
        self._command("set", key, value, ex)
        expires_at = time.monotonic() + ex if ex is not None else None
        self._server.data[key] = (_encode(value), expires_at)
        return True

    async def get(self, key: str) -> bytes | None:
        self._command("get", key)
        return self._server.raw(key)

    async def delete(self, *keys: str) -> int:
        self._command("delete", *keys)
        count = 0
        for key in keys:
            if self._server.raw(key) is not None:
                del self._server.data[key]
                count += 1
        return count

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def redis_server() -> FakeRedisServer:
    return FakeRedisServer()


@pytest.fixture
def connection_properties() -> ConnectionProperties:
    return ConnectionProperties(host="cache.internal", port="6380")
