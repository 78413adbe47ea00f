"""
Encoder: object graph → flat Table.

Algorithm
- Containers (list, dict) are keyed by identity (``id``) in a per-call map.
  A container reached again returns its existing index without revisiting
  children; this terminates cycles and collapses shared references.
- A new container gets its index reserved (placeholder appended) and its
  identity registered before any child is visited, so a cycle back to it
  resolves to the reserved index.
- Scalars are appended at the position they are first reached and are never
  registered, so equal scalars at different positions occupy separate entries.
- Children are visited depth-first, left to right (record keys in insertion
  order), giving first-encounter pre-order.

Notes
- The walk uses an explicit stack instead of recursion; order and indices are
  identical to the recursive formulation, and deep graphs do not hit the
  interpreter recursion limit.
- Zero-IO; every call owns its own working state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .errors import UnsupportedValueKind
from .table import Table
from .typing import SCALAR_TYPES, Index, Value

__all__ = [
    "Encoder",
    "encode",
]

logger = logging.getLogger(__name__)

_DONE = object()


@dataclass(slots=True)
class _Frame:
    index: Index
    items: Iterator[Any]
    out: Any
    keyed: bool


class Encoder:
    """
    Stateless graph encoder.

    Examples:
        >>> from refgraph.core.encoder import Encoder
        >>> Encoder().encode({"a": {"b": {"c": 1}}}).entries
        [{'a': 1}, {'b': 2}, {'c': 3}, 1]
    """

    def encode(self, value: Value) -> Table:
        """
        Encode a graph into a Table.

        Args:
            value (Value): None, bool, int, float, str, list or dict (str keys),
                nested arbitrarily, cycles and shared containers allowed.

        Returns:
            Table: ``root`` is 0; entries in first-encounter pre-order.

        Raises:
            UnsupportedValueKind: If a value or record key outside the union is
                reached. Host objects must go through refgraph.io.reduce first.
        """
        entries: list[Any] = []
        seen: dict[int, Index] = {}
        stack: list[_Frame] = []

        def visit(v: Any) -> Index:
            if isinstance(v, (list, dict)):
                known = seen.get(id(v))
                if known is not None:
                    return known
                index = len(entries)
                entries.append(None)
                seen[id(v)] = index
                if isinstance(v, list):
                    stack.append(_Frame(index, iter(v), [], keyed=False))
                else:
                    stack.append(_Frame(index, iter(v.items()), {}, keyed=True))
                return index
            if isinstance(v, SCALAR_TYPES):
                entries.append(v)
                return len(entries) - 1
            raise UnsupportedValueKind(v)

        root = visit(value)
        while stack:
            frame = stack[-1]
            item = next(frame.items, _DONE)
            if item is _DONE:
                entries[frame.index] = frame.out
                stack.pop()
            elif frame.keyed:
                key, child = item
                if not isinstance(key, str):
                    raise UnsupportedValueKind(key, where="record key")
                frame.out[key] = visit(child)
            else:
                frame.out.append(visit(item))

        logger.debug("encoded graph into %d entries (%d containers)", len(entries), len(seen))
        return Table(root=root, entries=entries)


def encode(value: Value) -> Table:
    """
    Encode a graph into a Table using a fresh Encoder.

    Examples:
        >>> from refgraph.core.encoder import encode
        >>> x = {"a": 1}
        >>> x["b"] = x
        >>> encode(x).entries
        [{'a': 1, 'b': 0}, 1]
    """
    return Encoder().encode(value)
