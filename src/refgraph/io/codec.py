"""
GraphCodec facade for refgraph.io.

Binds CodecSettings to the full pipeline: boundary reduction → encode → text,
and text → table → decode, with file variants that go through the atomic writer.

Source of truth
- Table contract, encoder and decoder: refgraph.core
- Host object reduction: refgraph.io.reduce
- Text rendition: refgraph.core.serde.JsonTextCodec configured from settings
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from refgraph.core.decoder import Decoder
from refgraph.core.encoder import Encoder
from refgraph.core.table import Table, coerce_table
from refgraph.core.typing import Value

from .config import CodecSettings
from .read import check_size, read_table
from .reduce import reduce_value
from .write import write_table


class GraphCodec:
    """
    Facade bound to a specific CodecSettings.

    Examples:
        >>> from refgraph.io import GraphCodec
        >>> codec = GraphCodec()
        >>> codec.dumps({"a": 1, "b": "hello", "c": True})
        '{"root":0,"obj":[{"a":1,"b":2,"c":3},1,"hello",true]}'
    """

    def __init__(self, settings: CodecSettings | None = None) -> None:
        """
        Initialize the facade.

        Args:
            settings (CodecSettings | None): Codec configuration; CodecSettings()
                when None. Use CodecSettings.load() for env/TOML configuration.

        Notes:
            This does not perform any I/O at construction time.
        """
        self.settings = (settings or CodecSettings()).validate()
        self._encoder = Encoder()
        self._decoder = Decoder()

    # ---------------------------------------------------------------------
    # Graph <-> Table
    # ---------------------------------------------------------------------
    def encode(self, obj: Any) -> Table:
        """Reduce (when enabled) and encode a graph."""
        value = reduce_value(obj) if self.settings.reduce_objects else obj
        return self._encoder.encode(value)

    def decode(self, table: Table | Mapping[str, Any]) -> Value:
        """Decode a table, enforcing max_entries."""
        return self._decoder.decode(check_size(coerce_table(table), self.settings))

    # ---------------------------------------------------------------------
    # Graph <-> Text
    # ---------------------------------------------------------------------
    def dumps(self, obj: Any) -> str:
        """Encode a graph and render it as JSON text."""
        return self.settings.text_codec().encode(self.encode(obj))

    def loads(self, text: str | bytes) -> Value:
        """Parse JSON text and rebuild the graph."""
        return self.decode(self.settings.text_codec().decode(text))

    # ---------------------------------------------------------------------
    # Graph <-> File
    # ---------------------------------------------------------------------
    def dump(self, obj: Any, path: str | os.PathLike[str]) -> str:
        """Encode a graph and write it atomically to path. Returns the final path."""
        return write_table(path, self.encode(obj), self.settings)

    def load(self, path: str | os.PathLike[str]) -> Value:
        """Read a table file and rebuild the graph."""
        return self._decoder.decode(read_table(path, self.settings))
