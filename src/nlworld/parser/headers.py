"""
Header cache scoped to the active section.

The cache is cleared on every boundary and filled by the first row of a header-bearing
section. Arity checks of data rows are made only against the cached header, so sections
of different widths never interfere with each other.
"""

from __future__ import annotations

from nlworld.core.errors import SchemaMismatch
from nlworld.core.grammar import Section
from nlworld.core.typing import Header, Row

__all__ = ["HeaderCache"]


class HeaderCache:
    """Ordered column names of the active section, or nothing."""

    __slots__ = ("_columns",)

    def __init__(self) -> None:
        self._columns: Header | None = None

    @property
    def columns(self) -> Header | None:
        return self._columns

    @property
    def is_empty(self) -> bool:
        return self._columns is None

    def clear(self) -> None:
        self._columns = None

    def capture(self, row: Row, *, section: Section, row_index: int) -> Header:
        """
        Cache a row as the header of `section`.

        Raises:
            SchemaMismatch: If the row names a column more than once.
        """
        columns = tuple(row)
        seen: set[str] = set()
        for name in columns:
            if name in seen:
                raise SchemaMismatch(
                    f"duplicate column {name!r} in header",
                    section=section.value,
                    row_index=row_index,
                )
            seen.add(name)
        self._columns = columns
        return columns
