"""
Section-aware state machine driving a row stream into a WorldSnapshot.

Overview
- States are nlworld.core.grammar.Section members; the initial state is HEADER.
- For every row the classifier is consulted first. A match switches state and clears the
  header cache unconditionally, even when the new section equals the current one.
- A non-matching row is the header when the active section expects one and none is
  cached yet; otherwise it is bound as data and stored in the accumulator.
- The only terminal condition is exhaustion of the row stream. Any section may be
  missing, repeated, or empty.

Failure model
- The first error aborts the parse; no snapshot is returned on failure.
- Under the default "fall_through" policy, an unknown section token is ordinary data for
  the section that is currently active (it typically fails the next arity check in a
  schema-bound section, and is silently ignored in PLOTS/EXTENSIONS).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nlworld.core.errors import UnknownSection
from nlworld.core.grammar import Section
from nlworld.core.schema import (
    GlobalsRecord,
    LinkRecord,
    PatchRecord,
    TurtleRecord,
    WorldSnapshot,
)
from nlworld.core.typing import Row

from .accumulator import WorldAccumulator
from .binder import BoundRow, bind_row
from .classify import classify_row, looks_like_section_row
from .config import ParserSettings
from .headers import HeaderCache

logger = logging.getLogger(__name__)

__all__ = ["SectionParser", "parse_rows"]


class SectionParser:
    """
    Single-use parser state for one row stream.

    Attributes:
        settings (ParserSettings): Parser options.
        section (Section): Active section.
        headers (HeaderCache): Header of the active section.
        world (WorldAccumulator): Rows accepted so far.

    Examples:
        >>> from nlworld.parser.driver import SectionParser
        >>> p = SectionParser()
        >>> for i, row in enumerate([["OUTPUT"], ["hello"]], start=1):
        ...     p.feed(row, i)
        >>> p.finish().output
        ['hello']
    """

    def __init__(self, settings: ParserSettings | None = None) -> None:
        self.settings = settings or ParserSettings()
        self.section = Section.HEADER
        self.headers = HeaderCache()
        self.world = WorldAccumulator()
        self._rows = 0

    def feed(self, row: Row, row_index: int) -> None:
        """
        Consume one tokenized row.

        Args:
            row (Row): Cells of the row.
            row_index (int): 1-based position of the row, used in error messages.

        Raises:
            nlworld.core.errors.WorldParseError: On the first structural failure.
        """
        if not row and self.settings.skip_blank_rows:
            return
        self._rows += 1

        new_section = classify_row(row)
        if new_section is not None:
            logger.debug("row %d: section %s -> %s", row_index, self.section.value, new_section.value)
            self.section = new_section
            self.headers.clear()
            return

        if (
            self.settings.unknown_sections == "error"
            and self.section is not Section.OUTPUT
            and looks_like_section_row(row)
        ):
            raise UnknownSection(
                f"unrecognized section token {row[0]!r}",
                section=self.section.value,
                row_index=row_index,
            )

        if self.section.has_header and self.headers.is_empty:
            columns = self.headers.capture(row, section=self.section, row_index=row_index)
            logger.debug("row %d: %s header with %d columns", row_index, self.section.value, len(columns))
            return

        self._store(bind_row(self.section, self.headers.columns, row, row_index))

    def _store(self, bound: BoundRow) -> None:
        world = self.world
        if bound is None:
            # HEADER, PLOTS and EXTENSIONS rows are not interpreted.
            return
        if isinstance(bound, GlobalsRecord):
            world.set_globals(bound)
        elif isinstance(bound, TurtleRecord):
            world.push_turtle(bound)
        elif isinstance(bound, PatchRecord):
            world.push_patch(bound)
        elif isinstance(bound, LinkRecord):
            world.push_link(bound)
        elif self.section is Section.RANDOM_STATE:
            world.set_random_state(bound)  # type: ignore[arg-type]
        else:
            world.extend_output(bound)  # type: ignore[arg-type]

    def finish(self) -> WorldSnapshot:
        """Return the accumulated snapshot once the row stream is exhausted."""
        snapshot = self.world.finish()
        logger.debug("parsed %d rows: %s", self._rows, snapshot.counts())
        return snapshot


def parse_rows(
    rows: Iterable[Row], settings: ParserSettings | None = None
) -> WorldSnapshot:
    """
    Parse already-tokenized rows.

    Args:
        rows (Iterable[Row]): Rows in file order; positions are numbered from 1.
        settings (ParserSettings | None): Parser options (defaults when None).

    Returns:
        WorldSnapshot: The completed snapshot.

    Raises:
        nlworld.core.errors.WorldParseError: On the first structural failure.
    """
    parser = SectionParser(settings)
    for row_index, row in enumerate(rows, start=1):
        parser.feed(row, row_index)
    return parser.finish()
