"""
Core exception types raised by value coercion, schema binding, and the section parser.

Provides typed exceptions for core-domain failures:
- SchemaError for model-level constraints (e.g., a Value whose payload disagrees with its kind).
- ValueTypeError when a custom Value is read back as the wrong scalar kind.
- WorldParseError and its subclasses for structural failures while reading a world export:
    - RowSyntaxError: the row tokenizer could not segment a line into cells.
    - SchemaMismatch: a row does not conform to the cached header or declared field types.
    - MissingHeader: a header-bearing section received data with no header captured.
    - UnknownSection: an unrecognized section token under the "error" policy.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Parse errors carry ``section`` (wire token or None) and ``row_index`` (1-based)
      so callers can point at the offending row.

Examples:
    Catch any parse failure.

    >>> from nlworld.core.errors import SchemaMismatch, WorldParseError
    >>> try:
    ...     raise SchemaMismatch("expected 5 cells, got 4", section="GLOBALS", row_index=3)
    ... except WorldParseError as e:
    ...     msg = str(e)
    >>> msg
    'GLOBALS row 3: expected 5 cells, got 4'
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "ValueTypeError",
    "WorldParseError",
    "RowSyntaxError",
    "SchemaMismatch",
    "MissingHeader",
    "UnknownSection",
]


class SchemaError(ValueError):
    """Model-level validation failure (kind/payload agreement, ranges)."""


class ValueTypeError(TypeError):
    """A custom Value was requested as a scalar kind it does not hold."""


class WorldParseError(ValueError):
    """
    Base class for structural failures while parsing a world export.

    Attributes:
        reason (str): Human-readable description without location.
        section (str | None): Wire token of the active section, if known.
        row_index (int | None): 1-based row position in the input, if known.
    """

    def __init__(
        self, reason: str, *, section: str | None = None, row_index: int | None = None
    ) -> None:
        self.reason = reason
        self.section = section
        self.row_index = row_index
        super().__init__(self._format())

    def _format(self) -> str:
        where = []
        if self.section is not None:
            where.append(self.section)
        if self.row_index is not None:
            where.append(f"row {self.row_index}")
        if not where:
            return self.reason
        return f"{' '.join(where)}: {self.reason}"


class RowSyntaxError(WorldParseError):
    """The row tokenizer could not split a line into cells (e.g., malformed quoting)."""


class SchemaMismatch(WorldParseError):
    """A row failed to bind against the cached header or a declared field type."""


class MissingHeader(WorldParseError):
    """A header-bearing section received a data row before any header was captured."""


class UnknownSection(WorldParseError):
    """An unrecognized section token was found while unknown sections are rejected."""
