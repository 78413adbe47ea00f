"""
refgraph — reference-preserving object-graph codec.

## Responsibilities
- Flatten a graph of scalars, lists and dicts (cycles and shared sub-objects
  included) into an index-addressed Table, and rebuild the graph from it.
- Keep sharing topology intact: two positions that pointed at the same
  container before encoding point at the same container after decoding.

## Public API
- encode / decode — graph ↔ Table (refgraph.core).
- dumps / loads — graph ↔ JSON text via the Table wire form.
- Table — the wire contract (`{"root": int, "obj": [...]}`).
- GraphCodec / CodecSettings — configured facade with file IO (refgraph.io).

## Examples
```python
from refgraph import decode, encode

x = {"a": 1}
x["b"] = x
table = encode(x)
table.to_wire()  # {'root': 0, 'obj': [{'a': 1, 'b': 0}, 1]}
y = decode(table)
y["b"] is y  # True
```
"""

from __future__ import annotations

from .core.decoder import Decoder, decode
from .core.encoder import Encoder, encode
from .core.errors import (
    CodecError,
    IndexOutOfRange,
    MalformedEntry,
    MalformedTable,
    UnsupportedValueKind,
)
from .core.serde import JsonTextCodec, dumps, loads
from .core.table import Table, validate_table
from .io.codec import GraphCodec
from .io.config import CodecSettings

__version__ = "0.1.0"

__all__ = [
    "encode",
    "decode",
    "dumps",
    "loads",
    "Encoder",
    "Decoder",
    "Table",
    "validate_table",
    "JsonTextCodec",
    "GraphCodec",
    "CodecSettings",
    "CodecError",
    "IndexOutOfRange",
    "MalformedEntry",
    "MalformedTable",
    "UnsupportedValueKind",
]
