"""
Boundary reduction of host objects into the codec's Value union.

Responsibilities
- Turn richer Python objects into plain lists and str-keyed dicts before they
  reach refgraph.core.encoder, which only understands the Value union.
- Preserve sharing and cycles: every source object maps to exactly one reduced
  container, allocated and memoised before its members are reduced.

Reduction rules
- None/bool/int/float/str pass through; Enum members reduce to their value.
- list and tuple → list. dict and other Mappings → dict (keys must be str).
- dataclass instances → dict of their fields, in declaration order.
- pydantic models → dict of their declared fields, in declaration order.
- Other objects with ``__dict__`` → dict of public (non-underscore) attributes.
- Callables, classes, modules, sets, bytes and anything else → UnsupportedValueKind.

Notes
- Only the container kind survives (sequence vs record); the original class is
  not recorded.
- Explicit stack; no recursion limit on deep graphs.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping
from enum import Enum
from types import ModuleType
from typing import Any

from pydantic import BaseModel

from refgraph.core.errors import UnsupportedValueKind
from refgraph.core.typing import SCALAR_TYPES, Value

__all__ = [
    "reduce_value",
]

_DONE = object()

_REJECTED: tuple[type, ...] = (type, ModuleType, set, frozenset, bytes, bytearray, memoryview)


def _record_items(obj: Any) -> Iterator[tuple[Any, Any]] | None:
    """Return (key, value) pairs for record-like objects, or None if obj is not one."""
    if isinstance(obj, Mapping):
        return iter(list(obj.items()))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return iter([(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)])
    if isinstance(obj, BaseModel):
        return iter([(name, getattr(obj, name)) for name in type(obj).model_fields])
    if callable(obj) or isinstance(obj, _REJECTED):
        return None
    attrs = getattr(obj, "__dict__", None)
    if isinstance(attrs, dict):
        return iter([(k, v) for k, v in attrs.items() if not k.startswith("_")])
    return None


def reduce_value(obj: Any) -> Value:
    """
    Reduce a host object graph to lists, dicts and scalars.

    Args:
        obj (Any): Root of the host graph.

    Returns:
        Value: A fresh plain graph with the same sharing topology.

    Raises:
        UnsupportedValueKind: For values that have no record or sequence reading,
            or mappings with non-str keys.

    Examples:
        >>> from dataclasses import dataclass
        >>> from refgraph.io.reduce import reduce_value
        >>> @dataclass
        ... class Point:
        ...     x: int
        ...     y: int
        >>> reduce_value([Point(1, 2)])
        [{'x': 1, 'y': 2}]
    """
    memo: dict[int, Any] = {}
    # Source objects are held so their ids stay unique for the whole call.
    sources: list[Any] = []
    stack: list[tuple[Iterator[Any], Any, bool]] = []

    def convert(v: Any) -> Any:
        if isinstance(v, Enum):
            v = v.value
        if isinstance(v, SCALAR_TYPES):
            return v
        known = memo.get(id(v))
        if known is not None:
            return known
        if isinstance(v, (list, tuple)):
            out: Any = []
            stack.append((iter(v), out, False))
        else:
            items = _record_items(v)
            if items is None:
                raise UnsupportedValueKind(v)
            out = {}
            stack.append((items, out, True))
        memo[id(v)] = out
        sources.append(v)
        return out

    result = convert(obj)
    while stack:
        items, out, keyed = stack[-1]
        item = next(items, _DONE)
        if item is _DONE:
            stack.pop()
        elif keyed:
            key, child = item
            if not isinstance(key, str):
                raise UnsupportedValueKind(key, where="record key")
            out[key] = convert(child)
        else:
            out.append(convert(item))
    return result
