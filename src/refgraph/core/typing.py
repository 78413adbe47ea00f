"""
Typing aliases for graph values and table entries.

This module contains no runtime logic.

Notes:
    - Value is the union accepted by the encoder and produced by the decoder.
    - Entry is what a single table slot may hold.
"""

from __future__ import annotations

from typing import Any, Union

__all__ = [
    "Index",
    "Scalar",
    "Value",
    "Entry",
    "SCALAR_TYPES",
    "JsonDict",
]

Index = int

Scalar = Union[None, bool, int, float, str]

# Recursive structure; kept loose for runtime use.
Value = Union[Scalar, list[Any], dict[str, Any]]

Entry = Union[Scalar, list[Index], dict[str, Index]]

# isinstance() targets for scalars. bool is covered by int.
SCALAR_TYPES: tuple[type, ...] = (type(None), int, float, str)

JsonDict = dict[str, Any]
