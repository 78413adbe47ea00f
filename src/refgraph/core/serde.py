"""
Textual codec for Tables, built on the stdlib json module.

Provides the TextCodec protocol consumed by the convenience entry points and a
JSON implementation of it, plus `dumps`/`loads` that combine graph encoding
with text encoding. This module is zero-IO.

Notes:
    - Keys are never sorted: record key order inside entries is part of the
      contract, so the canonical "sort_keys" policy does not apply here.
    - Compact separators by default; NaN/Infinity rejected unless allow_nan.
    - Any text that does not parse to a table mapping raises MalformedTable.
"""

from __future__ import annotations

import json
from typing import Any, Protocol

from .decoder import decode
from .encoder import encode
from .errors import MalformedTable
from .table import Table, coerce_table
from .typing import Value

__all__ = [
    "TextCodec",
    "JsonTextCodec",
    "dumps",
    "loads",
]


class TextCodec(Protocol):
    """Anything that losslessly turns a Table into text and back."""

    def encode(self, table: Table) -> str: ...

    def decode(self, text: str) -> Table: ...


class JsonTextCodec:
    """
    JSON rendition of the Table wire form.

    Args:
        indent (int | None): Pretty-print indentation; None for compact output.
        ensure_ascii (bool): Escape non-ASCII characters when True.
        allow_nan (bool): Permit NaN/Infinity literals in both directions.

    Examples:
        >>> from refgraph.core.serde import JsonTextCodec
        >>> from refgraph.core.table import Table
        >>> JsonTextCodec().encode(Table(root=0, entries=[[0]]))
        '{"root":0,"obj":[[0]]}'
    """

    def __init__(
        self, *, indent: int | None = None, ensure_ascii: bool = False, allow_nan: bool = False
    ) -> None:
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.allow_nan = allow_nan

    def encode(self, table: Table) -> str:
        """
        Serialize a table to JSON text.

        Raises:
            ValueError: If a float entry is NaN/Infinity and allow_nan is False.
        """
        separators = (",", ":") if self.indent is None else (",", ": ")
        return json.dumps(
            table.to_wire(),
            indent=self.indent,
            separators=separators,
            ensure_ascii=self.ensure_ascii,
            allow_nan=self.allow_nan,
            sort_keys=False,
        )

    def decode(self, text: str | bytes) -> Table:
        """
        Parse JSON text into a Table.

        Raises:
            MalformedTable: On invalid JSON or undecodable bytes, nesting beyond the
                parser recursion limit, non-finite numbers when not allowed,
                or a document that is not table-shaped.
        """
        try:
            data = json.loads(text, parse_constant=self._parse_constant)
        except json.JSONDecodeError as exc:
            raise MalformedTable(f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
        except UnicodeDecodeError as exc:
            raise MalformedTable(f"table text is not valid {exc.encoding}: {exc.reason}") from exc
        except RecursionError as exc:
            raise MalformedTable("table text is nested too deeply to parse") from exc
        return coerce_table(data)

    def _parse_constant(self, name: str) -> Any:
        if not self.allow_nan:
            raise MalformedTable(f"non-finite number {name} is not allowed")
        return float(name)


def dumps(value: Value, codec: TextCodec | None = None) -> str:
    """
    Encode a graph and render the resulting table as text.

    Args:
        value (Value): Graph to encode.
        codec (TextCodec | None): Text codec; JsonTextCodec() when None.

    Returns:
        str: Text form of ``encode(value)``.
    """
    return (codec or JsonTextCodec()).encode(encode(value))


def loads(text: str | bytes, codec: TextCodec | None = None) -> Value:
    """
    Parse a text table and rebuild its graph.

    Examples:
        >>> from refgraph.core.serde import loads
        >>> loads('{"root":0,"obj":[{"a":1,"b":2},1,"hello"]}')
        {'a': 1, 'b': 'hello'}
    """
    return decode((codec or JsonTextCodec()).decode(text))
