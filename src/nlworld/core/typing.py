"""
Lightweight typing aliases used across the core and parser layers.

This module contains no runtime logic and is zero-IO.

Examples:
    >>> from nlworld.core.typing import Header
    >>> def arity(header: Header) -> int:
    ...     return len(header)
    >>> arity(("who", "color"))
    2
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

__all__ = [
    "Row",
    "Header",
    "ScalarType",
]

# One tokenized line: an ordered sequence of cell strings of any width.
Row = Sequence[str]

# The cached header of the active section; names are kept verbatim (e.g., "min-pxcor").
Header = tuple[str, ...]

# Declared types for fixed record fields.
ScalarType = Literal["u64", "i64"]
