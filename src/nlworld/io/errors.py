"""
Custom exceptions for the nlworld.io module.

Purpose
- Provide IO-layer error types for file and table-export concerns.
- Keep nlworld.core.errors as the source of truth for parse failures (WorldParseError and
  subclasses propagate through this layer unchanged).

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in nlworld.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from parse errors.
    """


class IoReadError(IoError):
    """Raised when a world export cannot be opened or read from disk."""


class IoConfigError(IoError):
    """
    Raised when an IO option is invalid or unsupported.

    Examples:
        - Unknown table name passed to to_frame()
        - Unsupported output format
    """


class IoWriteError(IoError):
    """
    Raised when a table export fails to complete atomically.

    Notes:
        The write path is tmp file -> os.replace(tmp, final); failures at any step surface
        as IoWriteError (with best-effort cleanup of tmp files).
    """
