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
"""Builds the configured cache store.

The store is created once at startup and passed to whatever needs cache
access; there is no module-level instance.
"""

from __future__ import annotations

import importlib
import logging

from tagcache.cache.adapters.memory import InMemoryCacheStore
from tagcache.cache.adapters.redis import ClientFactory, RedisCacheStore
from tagcache.cache.ports.outbound import CacheStore
from tagcache.cache.properties import ConnectionProperties, StoreProperties
from tagcache.core.config import Config

_logger = logging.getLogger(__name__)

PROVIDERS = ("auto", "redis", "memory")


def is_available(module_name: str) -> bool:
    """Check if a Python package is importable."""
    try:
        importlib.import_module(module_name)
        return True
    except ImportError:
        return False


def detect_provider() -> str:
    """Detect the best available store provider."""
    if is_available("redis.asyncio"):
        return "redis"
    return "memory"


def create_cache_store(config: Config, client_factory: ClientFactory | None = None) -> CacheStore:
    """Create the store selected by ``tagcache.store.provider``.

    Raises:
        ValueError: for an unknown provider or invalid connection settings.
    """
    store_props = config.bind(StoreProperties)
    connection = config.bind(ConnectionProperties)

    configured = store_props.provider.lower()
    if configured not in PROVIDERS:
        raise ValueError(f"Unknown cache store provider '{store_props.provider}' (expected one of {PROVIDERS})")
    provider = configured if configured != "auto" else detect_provider()
    _logger.debug("Using '%s' cache store (configured: '%s')", provider, configured)

    if provider == "redis":
        return RedisCacheStore(connection, client_factory=client_factory, legacy_get=store_props.legacy_get)

    return InMemoryCacheStore(
        default_expiry_seconds=connection.default_expiry_seconds,
        legacy_get=store_props.legacy_get,
    )
