"""
Core package for the refgraph codec (table contract, encoder, decoder, text codec).

## Contracts
- Table — pydantic model of the flat form; wire keys "root" and "obj".
- Encoder — identity-deduplicating, cycle-safe walk producing entries in
  first-encounter pre-order.
- Decoder — allocate-then-populate rebuild that returns one instance per index.
- Serde — JSON text codec that preserves record key order.
- Errors — IndexOutOfRange, MalformedEntry, MalformedTable, UnsupportedValueKind.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file access.
- Reduction of host objects (dataclasses, models, instances) lives in refgraph.io.

## Examples
```python
from refgraph.core import decode, encode

a = [1]
shared = {"left": a, "right": a}
table = encode(shared)
table.entries  # [{'left': 1, 'right': 1}, [2], 1]
back = decode(table)
back["left"] is back["right"]  # True
```
"""

from __future__ import annotations

from .decoder import Decoder, decode
from .encoder import Encoder, encode
from .errors import (
    CodecError,
    IndexOutOfRange,
    MalformedEntry,
    MalformedTable,
    UnsupportedValueKind,
)
from .serde import JsonTextCodec, TextCodec, dumps, loads
from .table import Table, coerce_table, validate_table

__all__ = [
    "Encoder",
    "Decoder",
    "encode",
    "decode",
    "Table",
    "coerce_table",
    "validate_table",
    "TextCodec",
    "JsonTextCodec",
    "dumps",
    "loads",
    "CodecError",
    "IndexOutOfRange",
    "MalformedEntry",
    "MalformedTable",
    "UnsupportedValueKind",
]
