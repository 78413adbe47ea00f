"""
Pydantic v2 model and structural checks for the flat Table contract.

Responsibilities
- Define Table, the only interchange artifact between encoder, decoder and the
  textual codec.
- Classify a single entry as scalar, sequence (list of indices) or record
  (str-keyed mapping of indices), raising MalformedEntry otherwise.
- Validate a whole table without rebuilding the graph (validate_table).

Wire form
- ``{"root": <index>, "obj": [<entry>, ...]}``. The model also accepts
  ``entries`` as the input name for the entry list.

Notes
- Entry order is first-encounter pre-order and record key order is semantic;
  nothing here sorts or rewrites entries.
- Booleans are scalars, never indices, even though bool is an int subclass.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import ENTRIES_KEY, ROOT_KEY
from .errors import IndexOutOfRange, MalformedEntry, MalformedTable
from .typing import SCALAR_TYPES, Index, JsonDict

__all__ = [
    "Table",
    "EntryKind",
    "entry_kind",
    "check_index",
    "coerce_table",
    "validate_table",
]

EntryKind = Literal["scalar", "sequence", "record"]


class Table(BaseModel):
    """
    Flat, index-addressed form of an object graph.

    Attributes:
        root (int): Index of the top-level value; 0 for tables produced by encode().
        entries (list[Any]): Slots holding a scalar, a list of indices, or a
            str-keyed mapping of indices. Serialized under the "obj" key.

    Raises:
        pydantic.ValidationError: If root is negative or not an int, or unknown
            keys are present.

    Examples:
        >>> from refgraph.core.table import Table
        >>> t = Table(root=0, entries=[{"a": 1}, 1])
        >>> t.to_wire()
        {'root': 0, 'obj': [{'a': 1}, 1]}
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, validate_assignment=True)

    root: int = Field(0, ge=0, strict=True)
    entries: list[Any] = Field(default_factory=list, alias=ENTRIES_KEY)

    def __len__(self) -> int:
        return len(self.entries)

    def to_wire(self) -> JsonDict:
        """Return the plain ``{"root": ..., "obj": [...]}`` mapping."""
        return {ROOT_KEY: self.root, ENTRIES_KEY: list(self.entries)}


def entry_kind(position: int, entry: Any) -> EntryKind:
    """
    Classify an entry by shape.

    Args:
        position (int): Position of the entry, used in error messages.
        entry (Any): The entry value.

    Returns:
        EntryKind: "sequence" for lists, "record" for dicts, "scalar" for
        None/bool/int/float/str.

    Raises:
        MalformedEntry: For any other shape, or a record with a non-str key.
    """
    if isinstance(entry, list):
        return "sequence"
    if isinstance(entry, dict):
        for key in entry:
            if not isinstance(key, str):
                raise MalformedEntry(position, f"record key {key!r} is not a string")
        return "record"
    if isinstance(entry, SCALAR_TYPES):
        return "scalar"
    raise MalformedEntry(position, f"unsupported entry shape {type(entry).__name__}")


def check_index(index: Any, size: int, position: int) -> Index:
    """
    Validate a child index found inside entry ``position``.

    Raises:
        MalformedEntry: If index is not an int (bools rejected).
        IndexOutOfRange: If index is negative or >= size.
    """
    if not isinstance(index, int) or isinstance(index, bool):
        raise MalformedEntry(position, f"child reference {index!r} is not an integer index")
    if index < 0 or index >= size:
        raise IndexOutOfRange(index, size)
    return index


def coerce_table(obj: Table | Mapping[str, Any]) -> Table:
    """
    Accept a Table or its wire mapping and return a Table.

    Raises:
        MalformedTable: If obj is neither, or the mapping fails model validation.
    """
    if isinstance(obj, Table):
        return obj
    if not isinstance(obj, Mapping):
        raise MalformedTable(f"expected a table mapping, got {type(obj).__name__}")
    try:
        return Table.model_validate(dict(obj))
    except ValidationError as exc:
        raise MalformedTable(f"invalid table: {exc.error_count()} validation error(s)") from exc


def validate_table(obj: Table | Mapping[str, Any]) -> Table:
    """
    Check every entry and every index of a table without decoding it.

    Unlike decode(), entries unreachable from root are checked too.

    Args:
        obj (Table | Mapping[str, Any]): Table or wire mapping.

    Returns:
        Table: The validated table.

    Raises:
        MalformedTable: Empty table or invalid top-level shape.
        IndexOutOfRange: Root or a child index outside the entries.
        MalformedEntry: An entry of unsupported shape.
    """
    table = coerce_table(obj)
    size = len(table.entries)
    if size == 0:
        raise MalformedTable("table has no entries")
    if table.root < 0 or table.root >= size:
        raise IndexOutOfRange(table.root, size)
    for position, entry in enumerate(table.entries):
        kind = entry_kind(position, entry)
        if kind == "sequence":
            for child in entry:
                check_index(child, size, position)
        elif kind == "record":
            for child in entry.values():
                check_index(child, size, position)
    return table
