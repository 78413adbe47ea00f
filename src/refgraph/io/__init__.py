"""
refgraph.io — boundary layer around the refgraph core codec.

## Responsibilities
- Reduce host objects (dataclasses, pydantic models, plain instances) to the
  Value union while keeping sharing and cycles.
- Load codec configuration from env/TOML.
- Read and atomically write table files.
- Offer GraphCodec, a settings-bound facade over all of the above.

## Public API
- CodecSettings — configuration (env > TOML > defaults).
- GraphCodec — encode/decode/dumps/loads/dump/load.
- reduce_value, read_table, write_table.

## Import DAG discipline
- Depends on stdlib, pydantic and refgraph.core; core never imports io.
"""

from __future__ import annotations

from .codec import GraphCodec
from .config import CodecSettings
from .read import read_table
from .reduce import reduce_value
from .write import write_table

__all__ = [
    "CodecSettings",
    "GraphCodec",
    "reduce_value",
    "read_table",
    "write_table",
]
