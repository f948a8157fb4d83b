"""
Section-boundary recognition.

A row is a boundary only when it has exactly one cell whose text equals a wire token
(case-sensitive, untrimmed). Every other row, including unknown future markers, is a
classification miss and falls through to header/data handling; a miss is never an error.

Known gap: a single-cell data row whose text equals a wire token is indistinguishable
from a boundary and is classified as one. The classifier always runs first.
"""

from __future__ import annotations

from nlworld.core.grammar import Section, is_section_like_token, section_from_token
from nlworld.core.typing import Row

__all__ = ["classify_row", "looks_like_section_row"]


def classify_row(row: Row) -> Section | None:
    """
    Interpret a row as a bare section-boundary token.

    Args:
        row (Row): Tokenized cells.

    Returns:
        Section | None: The matched section, or None when the row is not a known marker.

    Examples:
        >>> from nlworld.parser.classify import classify_row
        >>> classify_row(["GLOBALS"])
        <Section.GLOBALS: 'GLOBALS'>
        >>> classify_row(["GLOBALS", ""]) is None
        True
    """
    if len(row) != 1:
        return None
    return section_from_token(row[0])


def looks_like_section_row(row: Row) -> bool:
    """True for a single-cell UPPER_SNAKE row, known or not."""
    return len(row) == 1 and is_section_like_token(row[0])
