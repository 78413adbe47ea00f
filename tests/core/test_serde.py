"""Tests for the JSON text codec in `refgraph.core.serde`."""

from __future__ import annotations

import math

import pytest

from refgraph.core.encoder import encode
from refgraph.core.errors import MalformedTable
from refgraph.core.serde import JsonTextCodec, dumps, loads
from refgraph.core.table import Table


def test_dumps_compact_and_key_order_preserved() -> None:
    text = dumps({"b": 1, "a": "hello", "c": True})

    assert text == '{"root":0,"obj":[{"b":1,"a":2,"c":3},1,"hello",true]}'


def test_loads_nested_objects() -> None:
    text = dumps({"a": {"b": {"c": 1}}})

    assert loads(text) == {"a": {"b": {"c": 1}}}


def test_loads_accepts_bytes_and_self_cycle() -> None:
    value = loads(b'{"root":0,"obj":[{"a":1,"b":0},1]}')

    assert value["b"] is value


def test_json_codec_indent_and_unicode() -> None:
    codec = JsonTextCodec(indent=2)
    text = codec.encode(encode({"emoji": "🙂"}))

    assert "🙂" in text
    assert '\n  "root": 0' in text
    assert codec.decode(text).entries == [{"emoji": 1}, "🙂"]


def test_json_codec_ensure_ascii() -> None:
    text = JsonTextCodec(ensure_ascii=True).encode(Table(root=0, entries=["é"]))

    assert "\\u00e9" in text


def test_json_codec_nan_policy() -> None:
    table = encode([math.inf])

    with pytest.raises(ValueError):
        JsonTextCodec().encode(table)
    text = JsonTextCodec(allow_nan=True).encode(table)
    assert "Infinity" in text

    with pytest.raises(MalformedTable, match="non-finite"):
        JsonTextCodec().decode(text)
    assert JsonTextCodec(allow_nan=True).decode(text).entries == [[1], math.inf]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "{",
        "[1, 2]",
        '{"root": 0}extra',
        '"table"',
        b'{"root":0,"obj":["\xff"]}',
        "[" * 100000 + "]" * 100000,
    ],
)
def test_json_codec_rejects_non_tables(text: str | bytes) -> None:
    with pytest.raises(MalformedTable):
        JsonTextCodec().decode(text)


def test_loads_invalid_utf8_bytes_is_malformed_table() -> None:
    with pytest.raises(MalformedTable, match="not valid utf-8"):
        loads(b'{"root":0,"obj":["\xff"]}')
