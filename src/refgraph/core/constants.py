"""
Wire-format constants for the Table contract.

Notes:
    - ROOT_KEY and ENTRIES_KEY are the two keys of a serialized table. The
      entries key is "obj" for compatibility with tables written by the
      JavaScript implementation of this format.
"""

from __future__ import annotations

__all__ = [
    "ROOT_KEY",
    "ENTRIES_KEY",
    "DEFAULT_ENCODING",
]

ROOT_KEY: str = "root"

ENTRIES_KEY: str = "obj"

DEFAULT_ENCODING: str = "utf-8"
