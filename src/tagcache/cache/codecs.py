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
"""Payload codecs, one per type tag.

JSON: ``json`` with Pydantic models dumped via ``model_dump(mode="json")``.

XML: values are wrapped in a ``<value>`` root element using the stdlib
``xml.etree.ElementTree``. Dict keys become child elements, lists become
repeated siblings, ``None`` an empty element and scalars text content.
Decoding returns the root's content, so scalars come back as text, and a root
holding only ``<item>`` children comes back as a list. Text must consist of
XML 1.0 characters.

RAW: no encoding. The value must already be something the store accepts
(text, bytes, or a number). Reads return text when the payload is valid
UTF-8 and the stored bytes otherwise.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from typing import Any, Protocol

from pydantic import BaseModel

from tagcache.cache.types import TypeTag
from tagcache.kernel.exceptions import DeserializationError, SerializationError

XML_ROOT_TAG = "value"
XML_LIST_TAG = "item"

_XML_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_.\-]*$")
# Anything outside the XML 1.0 Char production
_XML_INVALID_CHAR_RE = re.compile("[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class Codec(Protocol):
    """Turns a Python value into a store payload and back."""

    tag: TypeTag

    def encode(self, value: Any) -> bytes: ...

    def decode(self, payload: bytes) -> Any: ...


def _json_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JsonCodec:
    tag = TypeTag.JSON

    def encode(self, value: Any) -> bytes:
        try:
            return json.dumps(value, default=_json_default, allow_nan=False).encode()
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationError(
                f"cannot encode {type(value).__name__} as JSON: {exc}",
                context={"tag": self.tag.name},
            ) from exc

    def decode(self, payload: bytes) -> Any:
        try:
            return json.loads(payload)
        except (ValueError, RecursionError) as exc:
            raise DeserializationError(
                f"stored payload is not valid JSON: {exc}",
                context={"tag": self.tag.name},
            ) from exc


def _xml_text(value: str | int | float) -> str:
    text = str(value)
    match = _XML_INVALID_CHAR_RE.search(text)
    if match:
        raise SerializationError(
            f"character {match.group()!r} at position {match.start()} is not allowed in XML",
            context={"tag": TypeTag.XML.name},
        )
    return text


def _build_element(parent: ET.Element, key: Any, value: Any) -> None:
    """Recursively attach *value* to *parent* as child element(s) named *key*."""
    if not isinstance(key, str) or not _XML_NAME_RE.match(key):
        raise SerializationError(f"{key!r} is not a valid XML element name", context={"tag": TypeTag.XML.name})

    if isinstance(value, BaseModel):
        _build_element(parent, key, value.model_dump(mode="json"))
    elif isinstance(value, dict):
        child = ET.SubElement(parent, key)
        for k, v in value.items():
            _build_element(child, k, v)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _build_element(parent, key, item)
    elif value is None:
        ET.SubElement(parent, key)
    elif isinstance(value, (str, int, float)):
        child = ET.SubElement(parent, key)
        child.text = _xml_text(value)
    else:
        raise SerializationError(
            f"cannot encode {type(value).__name__} as XML",
            context={"tag": TypeTag.XML.name},
        )


def _element_to_value(element: ET.Element) -> dict[str, Any] | str | None:
    """Convert an element to a dict (has children), text, or None (empty)."""
    children = list(element)
    if not children:
        return element.text

    result: dict[str, Any] = {}
    for child in children:
        child_value = _element_to_value(child)
        if child.tag in result:
            existing = result[child.tag]
            if isinstance(existing, list):
                existing.append(child_value)
            else:
                result[child.tag] = [existing, child_value]
        else:
            result[child.tag] = child_value
    return result


class XmlCodec:
    tag = TypeTag.XML

    def encode(self, value: Any) -> bytes:
        if isinstance(value, BaseModel):
            value = value.model_dump(mode="json")

        root = ET.Element(XML_ROOT_TAG)
        try:
            if isinstance(value, dict):
                for key, item in value.items():
                    _build_element(root, key, item)
            elif isinstance(value, (list, tuple)):
                for item in value:
                    _build_element(root, XML_LIST_TAG, item)
            elif value is None:
                pass
            elif isinstance(value, (str, int, float)):
                root.text = _xml_text(value)
            else:
                raise SerializationError(
                    f"cannot encode {type(value).__name__} as XML",
                    context={"tag": self.tag.name},
                )
            return ET.tostring(root, encoding="utf-8", xml_declaration=True)
        except RecursionError as exc:
            raise SerializationError("value is nested too deeply to encode as XML", context={"tag": self.tag.name}) from exc

    def decode(self, payload: bytes) -> Any:
        try:
            root = ET.fromstring(payload)
            children = list(root)
            # a root of <item> elements only was written from a list
            if children and all(child.tag == XML_LIST_TAG for child in children):
                return [_element_to_value(child) for child in children]
            return _element_to_value(root)
        except (ET.ParseError, RecursionError) as exc:
            raise DeserializationError(
                f"stored payload is not valid XML: {exc}",
                context={"tag": self.tag.name},
            ) from exc


class RawCodec:
    """Pass-through codec mirroring the redis client's own argument encoding.

    Reads return ``str`` for UTF-8 payloads, so text round-trips; numbers
    come back in their text form and other byte strings unchanged.
    """

    tag = TypeTag.RAW

    def encode(self, value: Any) -> bytes:
        if isinstance(value, bytes):
            return value
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        if isinstance(value, str):
            return value.encode()
        # bool is an int subclass but the store has no boolean type
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return repr(value).encode()
        raise SerializationError(
            f"raw values must be text, bytes or a number, got {type(value).__name__}",
            context={"tag": self.tag.name},
        )

    def decode(self, payload: bytes) -> str | bytes:
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError:
            return payload


_CODECS: dict[TypeTag, Codec] = {
    TypeTag.JSON: JsonCodec(),
    TypeTag.XML: XmlCodec(),
    TypeTag.RAW: RawCodec(),
}


def codec_for(tag: Any) -> Codec:
    """Return the codec for *tag*, raising InvalidTagError for unknown tags."""
    return _CODECS[TypeTag.parse(tag)]
