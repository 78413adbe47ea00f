"""
Core exception types raised by the encoder, decoder and table validation.

Provides typed exceptions for codec failures:
- IndexOutOfRange when a root or child index has no corresponding entry.
- MalformedEntry when an entry is not a scalar, a list of indices, or a
  str-keyed mapping of indices.
- MalformedTable when the table as a whole cannot be used (empty, wrong
  top-level shape, unparsable text).
- UnsupportedValueKind when a value outside the Value union reaches the
  encoder or the boundary reducer.

Notes:
    - All errors are fatal for the current encode/decode call. Working state is
      discarded; no partial result is returned.
    - Each error also derives from the closest builtin so callers catching
      IndexError/ValueError/TypeError keep working.

Examples:
    >>> from refgraph.core.errors import CodecError, IndexOutOfRange
    >>> issubclass(IndexOutOfRange, CodecError) and issubclass(IndexOutOfRange, IndexError)
    True
"""

from __future__ import annotations

__all__ = [
    "CodecError",
    "IndexOutOfRange",
    "MalformedEntry",
    "MalformedTable",
    "UnsupportedValueKind",
]


class CodecError(Exception):
    """Base class for refgraph codec failures."""


class IndexOutOfRange(CodecError, IndexError):
    """
    A referenced index has no corresponding entry.

    Attributes:
        index (object): The offending index as found in the table.
        size (int): Number of entries in the table.
    """

    def __init__(self, index: object, size: int) -> None:
        super().__init__(f"index {index!r} out of range for table with {size} entries")
        self.index = index
        self.size = size


class MalformedEntry(CodecError, ValueError):
    """
    An entry's shape is not scalar, list-of-index, or record-of-index.

    Attributes:
        position (int): Position of the entry within the table.
    """

    def __init__(self, position: int, reason: str) -> None:
        super().__init__(f"entry {position}: {reason}")
        self.position = position


class MalformedTable(CodecError, ValueError):
    """The table itself is unusable (empty, wrong shape, unparsable text)."""


class UnsupportedValueKind(CodecError, TypeError):
    """A value outside the None/bool/int/float/str/list/dict union was encountered."""

    def __init__(self, value: object, where: str = "value") -> None:
        super().__init__(f"unsupported {where} kind: {type(value).__name__}")
        self.kind = type(value)
