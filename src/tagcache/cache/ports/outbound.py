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
"""Cache store protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from tagcache.cache.types import TypeTag


@runtime_checkable
class CacheStore(Protocol):
    """Tagged key-value cache interface.

    Implemented by the Redis-backed store and by the in-memory store used
    in tests and local development. Failures are raised as
    ``TagCacheException`` subclasses.
    """

    async def open(self) -> None: ...

    async def set(self, key: str, tag: TypeTag | str, value: Any, ttl_seconds: int | None = None) -> None: ...

    async def get(self, key: str, tag: TypeTag | str) -> Any: ...

    async def delete(self, key: str) -> bool: ...
