"""
Numeric bounds and wire-format defaults shared by the core and parser layers.

This module is zero-IO and uses only the Python standard library.

Notes:
    - Integer bounds mirror the 64-bit scalar kinds a world export can carry.
    - OUTPUT_LINE_BREAK is the two-character escape (backslash, letter n), not a newline.
"""

from __future__ import annotations

__all__ = [
    "U64_MAX",
    "I64_MIN",
    "I64_MAX",
    "OUTPUT_LINE_BREAK",
    "DEFAULT_ENCODING",
]

U64_MAX: int = 2**64 - 1
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1

# Marker embedded in exported console output for additional logical lines.
OUTPUT_LINE_BREAK: str = "\\n"

# Encoding used when a binary stream is handed to the parser.
DEFAULT_ENCODING: str = "utf-8"
