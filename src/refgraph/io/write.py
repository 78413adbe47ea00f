"""
Atomic table file writer.

Write path
- Serialize the table with the configured text codec.
- Hand the bytes to refgraph.io.fs.replace_atomic (tmp → fsync → os.replace).

Any failure raises IoWriteError; the final path is either untouched or fully
replaced.
"""

from __future__ import annotations

import logging
import os

from refgraph.core.table import Table

from .config import CodecSettings
from .errors import IoWriteError
from .fs import replace_atomic

__all__ = [
    "write_table",
    "write_text",
]

logger = logging.getLogger(__name__)


def write_text(
    path: str | os.PathLike[str], text: str, settings: CodecSettings | None = None
) -> str:
    """
    Encode text with settings.encoding and write it atomically.

    Raises:
        IoWriteError: If the text cannot be encoded or the write fails.
    """
    s = settings or CodecSettings()
    try:
        payload = text.encode(s.encoding)
    except (ValueError, LookupError) as exc:
        raise IoWriteError(f"failed to encode text for {os.fspath(path)!r}: {exc}") from exc
    return replace_atomic(path, payload)


def write_table(
    path: str | os.PathLike[str], table: Table, settings: CodecSettings | None = None
) -> str:
    """
    Persist a table as text, atomically.

    Args:
        path: Destination file path. Parent directories are created.
        table (Table): Table to write.
        settings (CodecSettings | None): Text/encoding options; defaults when None.

    Returns:
        str: The final path written.

    Raises:
        IoWriteError: If serialization or any filesystem step fails.
    """
    s = settings or CodecSettings()
    try:
        text = s.text_codec().encode(table)
    except ValueError as exc:
        raise IoWriteError(f"failed to serialize table for {os.fspath(path)!r}: {exc}") from exc

    final_path = write_text(path, text, s)
    logger.debug("wrote %d entries to %s", len(table), final_path)
    return final_path
