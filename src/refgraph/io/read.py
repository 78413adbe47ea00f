"""
Table file reader.

Reads a table file written by refgraph.io.write (or any tool producing the same
JSON wire form) and returns a validated-shape Table. Entry-level checks happen
when the table is decoded or passed to refgraph.core.validate_table.
"""

from __future__ import annotations

import logging
import os

from refgraph.core.errors import MalformedTable
from refgraph.core.table import Table

from .config import CodecSettings
from .errors import IoReadError

__all__ = [
    "read_table",
    "check_size",
]

logger = logging.getLogger(__name__)


def check_size(table: Table, settings: CodecSettings) -> Table:
    """
    Enforce settings.max_entries on a parsed table.

    Raises:
        MalformedTable: If the table has more entries than allowed.
    """
    if settings.max_entries and len(table) > settings.max_entries:
        raise MalformedTable(
            f"table has {len(table)} entries, more than max_entries={settings.max_entries}"
        )
    return table


def read_table(path: str | os.PathLike[str], settings: CodecSettings | None = None) -> Table:
    """
    Load a table from a text file.

    Args:
        path: Source file path.
        settings (CodecSettings | None): Text/encoding options; defaults when None.

    Returns:
        Table: Parsed table.

    Raises:
        IoReadError: If the file is missing, unreadable, or not decodable text.
        MalformedTable: If the content is not a table or exceeds max_entries.
    """
    s = settings or CodecSettings()
    src = os.fspath(path)
    try:
        with open(src, encoding=s.encoding) as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise IoReadError(f"failed to read table from {src!r}: {exc}") from exc

    table = check_size(s.text_codec().decode(text), s)
    logger.debug("read %d entries from %s", len(table), src)
    return table
