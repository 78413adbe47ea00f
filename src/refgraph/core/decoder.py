"""
Decoder: flat Table → object graph.

Algorithm
- A per-call index map holds every value already rebuilt. An index seen again
  returns the same instance, which restores sharing and cycles.
- Sequence and record entries allocate an empty list/dict and store it in the
  index map before any child is resolved; children are then filled in stored
  order (record keys are never reordered).
- Scalar entries are stored as-is.

Errors
- Empty table → MalformedTable.
- Root or child index outside ``entries`` (negative included) → IndexOutOfRange.
- Entry of unsupported shape, or a non-int child reference → MalformedEntry.
- Nothing is returned on failure; the partial graph is discarded.

Notes
- Explicit-stack walk; containers are attached to their parent as soon as they
  are allocated and populated afterwards, which yields the same final graph as
  the recursive formulation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import IndexOutOfRange, MalformedTable
from .table import Table, check_index, coerce_table, entry_kind
from .typing import Index, Value

__all__ = [
    "Decoder",
    "decode",
]

logger = logging.getLogger(__name__)

_DONE = object()


@dataclass(slots=True)
class _Frame:
    index: Index
    items: Iterator[Any]
    out: Any
    keyed: bool


class Decoder:
    """Stateless table decoder."""

    def decode(self, table: Table | Mapping[str, Any]) -> Value:
        """
        Rebuild the graph described by a table.

        Args:
            table (Table | Mapping[str, Any]): Table or its wire mapping
                (``{"root": ..., "obj": [...]}``).

        Returns:
            Value: The value at ``table.root``.

        Raises:
            MalformedTable: If the table is empty or not table-shaped.
            IndexOutOfRange: If the root or any reached child index is out of bounds.
            MalformedEntry: If a reached entry has an unsupported shape.

        Examples:
            >>> from refgraph.core.decoder import decode
            >>> ring = decode({"root": 0, "obj": [[1], [0]]})
            >>> ring[0][0] is ring
            True
        """
        table = coerce_table(table)
        entries = table.entries
        size = len(entries)
        if size == 0:
            raise MalformedTable("table has no entries")
        if table.root < 0 or table.root >= size:
            raise IndexOutOfRange(table.root, size)

        resolved: dict[Index, Any] = {}
        stack: list[_Frame] = []

        def resolve(index: Index) -> Any:
            if index in resolved:
                return resolved[index]
            entry = entries[index]
            kind = entry_kind(index, entry)
            if kind == "sequence":
                out: Any = []
                stack.append(_Frame(index, iter(entry), out, keyed=False))
            elif kind == "record":
                out = {}
                stack.append(_Frame(index, iter(entry.items()), out, keyed=True))
            else:
                out = entry
            resolved[index] = out
            return out

        result = resolve(table.root)
        while stack:
            frame = stack[-1]
            item = next(frame.items, _DONE)
            if item is _DONE:
                stack.pop()
            elif frame.keyed:
                key, child = item
                frame.out[key] = resolve(check_index(child, size, frame.index))
            else:
                frame.out.append(resolve(check_index(item, size, frame.index)))

        logger.debug("decoded %d of %d entries", len(resolved), size)
        return result


def decode(table: Table | Mapping[str, Any]) -> Value:
    """Decode a table using a fresh Decoder."""
    return Decoder().decode(table)
