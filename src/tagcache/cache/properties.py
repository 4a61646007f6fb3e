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
"""Cache configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from tagcache.core.config import config_properties


@config_properties(prefix="tagcache.redis")
class ConnectionProperties(BaseModel):
    """Connection settings for the Redis store (tagcache.redis.*).

    ``default_expiry_seconds`` applies only when ``set`` is called without
    an explicit TTL; zero means no expiry.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    host: str = "localhost"
    port: str = Field(default="6379", pattern=r"^\d+$")
    password: str = ""
    default_expiry_seconds: int = 0

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@config_properties(prefix="tagcache.store")
@dataclass(frozen=True)
class StoreProperties:
    """Store selection and read behaviour (tagcache.store.*).

    ``legacy_get`` makes JSON/XML reads raise InvalidTagError after decoding,
    matching older clients that only ever returned RAW values.
    """

    provider: str = "auto"
    legacy_get: bool = False
