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
"""Type tags selecting how a cached value is serialized."""

from __future__ import annotations

from enum import Enum
from typing import Any

from tagcache.kernel.exceptions import InvalidTagError

_ALIASES = {
    "json": "1",
    "structured": "1",
    "xml": "2",
    "markup": "2",
    "raw": "3",
}


class TypeTag(str, Enum):
    """Serialization strategy for a stored value.

    Values match the wire constants used by existing writers ("1", "2", "3"),
    so payloads written by other clients stay readable.
    """

    JSON = "1"
    XML = "2"
    RAW = "3"

    @classmethod
    def parse(cls, value: Any) -> TypeTag:
        """Resolve a tag from a member, wire value, or case-insensitive name.

        Raises:
            InvalidTagError: if *value* names no known tag.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            try:
                return cls(_ALIASES.get(text, text))
            except ValueError:
                pass
        raise InvalidTagError(f"invalid cache type tag: {value!r}", context={"tag": repr(value)})

    @classmethod
    def names(cls) -> list[str]:
        return [t.name.lower() for t in cls]
