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
"""Tests for type tags and payload codecs."""

from __future__ import annotations

import json
import math

import pytest
from pydantic import BaseModel

from tagcache.cache.codecs import JsonCodec, RawCodec, XmlCodec, codec_for
from tagcache.cache.payloads import decode_payload, encode_payload, expiry_seconds
from tagcache.cache.types import TypeTag
from tagcache.kernel.exceptions import DeserializationError, InvalidTagError, SerializationError


class Order(BaseModel):
    id: int
    items: list[str]


def _deeply_nested(depth: int = 100_000) -> dict:
    value: dict = {}
    for _ in range(depth):
        value = {"a": value}
    return value


class TestTypeTag:
    def test_wire_values(self):
        assert TypeTag.JSON.value == "1"
        assert TypeTag.XML.value == "2"
        assert TypeTag.RAW.value == "3"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1", TypeTag.JSON),
            ("json", TypeTag.JSON),
            ("Structured", TypeTag.JSON),
            ("2", TypeTag.XML),
            ("XML", TypeTag.XML),
            ("markup", TypeTag.XML),
            ("3", TypeTag.RAW),
            (" raw ", TypeTag.RAW),
        ],
    )
    def test_parse_accepts_values_and_names(self, text, expected):
        assert TypeTag.parse(text) is expected

    def test_parse_passes_members_through(self):
        assert TypeTag.parse(TypeTag.XML) is TypeTag.XML

    @pytest.mark.parametrize("bad", ["", "4", "yaml", None, 1, b"1"])
    def test_parse_rejects_unknown(self, bad):
        with pytest.raises(InvalidTagError) as exc_info:
            TypeTag.parse(bad)
        assert exc_info.value.code == "INVALID_TAG"

    def test_names(self):
        assert TypeTag.names() == ["json", "xml", "raw"]


class TestJsonCodec:
    def test_encode_nested_value(self):
        value = {"a": [1, 2.5, None, True], "b": {"c": "d"}}
        assert json.loads(JsonCodec().encode(value)) == value

    def test_encode_pydantic_model(self):
        payload = JsonCodec().encode({"order": Order(id=7, items=["x"])})
        assert json.loads(payload) == {"order": {"id": 7, "items": ["x"]}}

    @pytest.mark.parametrize("bad", [{1, 2}, object(), math.nan, {"b": b"bytes"}])
    def test_encode_unsupported_raises(self, bad):
        with pytest.raises(SerializationError) as exc_info:
            JsonCodec().encode(bad)
        assert exc_info.value.context["tag"] == "JSON"

    def test_decode_invalid_raises(self):
        with pytest.raises(DeserializationError):
            JsonCodec().decode(b"{broken")

    def test_decode_invalid_utf8_raises(self):
        with pytest.raises(DeserializationError):
            JsonCodec().decode(b"\x80abc")

    def test_encode_too_deep_raises(self):
        with pytest.raises(SerializationError):
            JsonCodec().encode(_deeply_nested())

    def test_decode_too_deep_raises(self):
        with pytest.raises(DeserializationError):
            JsonCodec().decode(b"[" * 100_000 + b"]" * 100_000)


class TestXmlCodec:
    def test_dict_round_trip(self):
        codec = XmlCodec()
        payload = codec.encode({"name": "Alice", "address": {"city": "Oslo"}, "empty": None})
        assert codec.decode(payload) == {"name": "Alice", "address": {"city": "Oslo"}, "empty": None}

    def test_scalars_come_back_as_text(self):
        codec = XmlCodec()
        assert codec.decode(codec.encode({"n": 3, "f": 1.5, "b": True})) == {"n": "3", "f": "1.5", "b": "True"}

    def test_top_level_scalar(self):
        codec = XmlCodec()
        assert codec.decode(codec.encode("hello")) == "hello"

    def test_top_level_list_round_trip(self):
        codec = XmlCodec()
        payload = codec.encode(["a", "b"])
        assert b"<item>a</item><item>b</item>" in payload
        assert codec.decode(payload) == ["a", "b"]

    def test_single_item_list_stays_a_list(self):
        codec = XmlCodec()
        assert codec.decode(codec.encode([{"id": 1}])) == [{"id": "1"}]

    def test_mixed_children_decode_to_dict(self):
        assert XmlCodec().decode(b"<value><item>a</item><other>b</other></value>") == {"item": "a", "other": "b"}

    def test_nested_list_becomes_repeated_elements(self):
        codec = XmlCodec()
        payload = codec.encode({"tag": ["x", "y", "z"]})
        assert payload.count(b"<tag>") == 3
        assert codec.decode(payload) == {"tag": ["x", "y", "z"]}

    def test_payload_has_declaration_and_root(self):
        payload = XmlCodec().encode({"a": "1"})
        assert payload.startswith(b"<?xml")
        assert b"<value><a>1</a></value>" in payload

    def test_text_is_escaped(self):
        codec = XmlCodec()
        assert codec.decode(codec.encode({"expr": "a < b & c"})) == {"expr": "a < b & c"}

    def test_non_ascii_round_trip(self):
        codec = XmlCodec()
        assert codec.decode(codec.encode({"city": "Zürich"})) == {"city": "Zürich"}

    def test_pydantic_model(self):
        codec = XmlCodec()
        assert codec.decode(codec.encode(Order(id=1, items=["a", "b"]))) == {"id": "1", "items": ["a", "b"]}

    @pytest.mark.parametrize("bad", [{"has space": 1}, {"1abc": 1}, {3: "x"}])
    def test_invalid_element_names_raise(self, bad):
        with pytest.raises(SerializationError):
            XmlCodec().encode(bad)

    @pytest.mark.parametrize("bad", [b"bytes", {1, 2}, {"a": object()}])
    def test_unsupported_values_raise(self, bad):
        with pytest.raises(SerializationError):
            XmlCodec().encode(bad)

    @pytest.mark.parametrize("bad", ["x\x01y", {"a": "x\x01y"}, {"a": ["ok", "\x1f"]}, "\ufffe"])
    def test_characters_outside_xml_range_raise(self, bad):
        with pytest.raises(SerializationError) as exc_info:
            XmlCodec().encode(bad)
        assert exc_info.value.context["tag"] == "XML"

    def test_tab_newline_and_astral_text_allowed(self):
        codec = XmlCodec()
        assert codec.decode(codec.encode({"a": "x\ty\nz \U0001f600"})) == {"a": "x\ty\nz \U0001f600"}

    def test_encode_too_deep_raises(self):
        with pytest.raises(SerializationError):
            XmlCodec().encode(_deeply_nested())

    def test_decode_invalid_raises(self):
        with pytest.raises(DeserializationError):
            XmlCodec().decode(b"<value><a></value>")

    def test_decode_too_deep_raises(self):
        payload = b"<value>" + b"<a>" * 100_000 + b"</a>" * 100_000 + b"</value>"
        with pytest.raises(DeserializationError):
            XmlCodec().decode(payload)


class TestRawCodec:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (b"\x00bin", b"\x00bin"),
            (bytearray(b"ab"), b"ab"),
            (memoryview(b"mv"), b"mv"),
            ("text", b"text"),
            ("ünï", "ünï".encode()),
            (42, b"42"),
            (-7, b"-7"),
            (2.5, b"2.5"),
        ],
    )
    def test_encode_store_native_scalars(self, value, expected):
        assert RawCodec().encode(value) == expected

    @pytest.mark.parametrize("bad", [True, None, {"a": 1}, [1], 1 + 2j])
    def test_encode_rejects_other_values(self, bad):
        with pytest.raises(SerializationError):
            RawCodec().encode(bad)

    @pytest.mark.parametrize("value", ["text", "ünï", ""])
    def test_text_round_trip(self, value):
        codec = RawCodec()
        assert codec.decode(codec.encode(value)) == value

    def test_numbers_decode_to_their_text(self):
        codec = RawCodec()
        assert codec.decode(codec.encode(42)) == "42"
        assert codec.decode(codec.encode(2.5)) == "2.5"

    def test_non_utf8_payload_returned_as_bytes(self):
        assert RawCodec().decode(b"\x00\xff\xfe") == b"\x00\xff\xfe"


class TestCodecLookup:
    def test_codec_for_each_tag(self):
        assert isinstance(codec_for(TypeTag.JSON), JsonCodec)
        assert isinstance(codec_for("2"), XmlCodec)
        assert isinstance(codec_for("raw"), RawCodec)

    def test_codec_for_unknown_tag(self):
        with pytest.raises(InvalidTagError):
            codec_for("protobuf")


class TestPayloadHelpers:
    def test_encode_errors_carry_key(self):
        with pytest.raises(SerializationError) as exc_info:
            encode_payload("user:1", TypeTag.RAW, None)
        assert exc_info.value.context == {"tag": "RAW", "key": "user:1"}

    def test_decode_returns_value_by_default(self):
        assert decode_payload("k", TypeTag.JSON, b'{"a": 1}') == {"a": 1}

    def test_legacy_decode_raises_invalid_tag(self):
        with pytest.raises(InvalidTagError) as exc_info:
            decode_payload("k", TypeTag.JSON, b'{"a": 1}', legacy_get=True)
        assert exc_info.value.context == {"key": "k", "tag": "JSON"}

    def test_legacy_decode_raw_returns_payload(self):
        assert decode_payload("k", TypeTag.RAW, b"v", legacy_get=True) == "v"

    @pytest.mark.parametrize(
        ("ttl", "default", "expected"),
        [(60, 0, 60), (0, 300, None), (-1, 300, None), (None, 300, 300), (None, 0, None)],
    )
    def test_expiry_seconds(self, ttl, default, expected):
        assert expiry_seconds(ttl, default) == expected
