"""
Custom exceptions for the refgraph.io module.

Purpose
- Provide IO-layer error types that map cleanly to responsibilities in refgraph.io.
- Keep refgraph.core as the source of truth for table/entry errors (see
  refgraph.core.errors).

Source of truth and boundaries
- refgraph.core.errors.MalformedTable / MalformedEntry / IndexOutOfRange /
  UnsupportedValueKind are raised by core and by the boundary reducer.
- refgraph.io raises Io* errors for filesystem and configuration concerns:
  - IoConfigError: invalid configuration values.
  - IoReadError: table file missing or unreadable.
  - IoWriteError: atomic write path failed (tmp write/fsync/rename).
"""

from __future__ import annotations


class IoError(Exception):
    """Base class for IO-related errors in refgraph.io."""


class IoConfigError(IoError):
    """
    Raised when codec configuration is invalid.

    Examples:
        - Negative indent
        - Negative max_entries
    """


class IoReadError(IoError):
    """Raised when a table file cannot be opened or read."""


class IoWriteError(IoError):
    """
    Raised when a write fails to complete atomically.

    Notes:
        The write path is tmp file → fsync → os.replace(tmp, final). Failures at
        any step surface as IoWriteError, with best-effort cleanup of the tmp file.
    """
