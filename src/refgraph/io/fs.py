"""
Atomic file replacement for refgraph.io.

Every file refgraph writes (table files, decoded JSON documents from the CLI)
goes through replace_atomic:
- create the parent directory,
- write the payload to "<final>.tmp", flush and fsync,
- os.replace(tmp, final).

Notes
- os.replace is atomic only when tmp and final share a filesystem, which holds
  because the tmp file sits next to the final path.
- On failure the tmp file is removed and the final path is left untouched.
"""

from __future__ import annotations

import os

from .errors import IoWriteError

__all__ = [
    "tmp_path_for",
    "replace_atomic",
]


def tmp_path_for(path: str) -> str:
    """Sibling temporary path used while ``path`` is being written."""
    return path + ".tmp"


def replace_atomic(path: str | os.PathLike[str], payload: bytes) -> str:
    """
    Write payload to path so readers see either the old file or the new one.

    Args:
        path: Final destination. Missing parent directories are created.
        payload (bytes): Complete file contents.

    Returns:
        str: The final path as a string.

    Raises:
        IoWriteError: If any filesystem step fails.
    """
    final_path = os.fspath(path)
    tmp_path = tmp_path_for(final_path)
    try:
        parent = os.path.dirname(final_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(tmp_path, "wb") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, final_path)
    except OSError as exc:
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            pass
        raise IoWriteError(f"failed to write {final_path!r}: {exc}") from exc
    return final_path
