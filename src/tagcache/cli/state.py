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
"""Per-invocation CLI state carried on the click context."""

from __future__ import annotations

from dataclasses import dataclass

import click

from tagcache.cache.adapters.redis import ClientFactory
from tagcache.cache.factory import create_cache_store
from tagcache.cache.ports.outbound import CacheStore
from tagcache.core.config import Config


@dataclass
class CliState:
    """Objects shared by every command of one invocation.

    ``client_factory`` is left as None outside tests, so the Redis store
    builds real ``redis.asyncio`` clients.
    """

    config: Config | None = None
    client_factory: ClientFactory | None = None

    def require_config(self) -> Config:
        if self.config is None:
            raise click.UsageError("configuration was not loaded")
        return self.config

    def create_store(self) -> CacheStore:
        try:
            return create_cache_store(self.require_config(), client_factory=self.client_factory)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
