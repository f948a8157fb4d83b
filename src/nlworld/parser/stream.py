"""
Public entry points: tokenize a text or byte stream and run the section parser over it.

Tokenizer
- The stdlib ``csv`` reader splits lines into cells with RFC 4180 quoting. Rows are
  flexible: no width is enforced here, only against the cached header by the binder.
- ``strict_quoting`` maps to ``csv.reader(strict=...)``; a tokenizer failure surfaces as
  RowSyntaxError carrying the physical line number.
- Cells have no length limit; the csv module field limit is raised process-wide.
- Binary streams are decoded with ``ParserSettings.encoding``; the caller's stream is left
  open (the text wrapper is detached afterwards).

Row numbering
- ``row_index`` in errors is the physical line number on which the row ends.
"""

from __future__ import annotations

import csv
import io
import sys
from collections.abc import Iterable, Iterator
from typing import IO, Any

from nlworld.core.errors import RowSyntaxError
from nlworld.core.schema import WorldSnapshot

from .config import ParserSettings
from .driver import SectionParser

__all__ = ["iter_rows", "parse", "parse_str"]


def _lift_field_limit() -> None:
    # Console output cells can exceed the csv module default of 128 KiB.
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            limit //= 2


def iter_rows(
    lines: Iterable[str], settings: ParserSettings | None = None
) -> Iterator[tuple[int, list[str]]]:
    """
    Tokenize text lines into (row_index, cells) pairs.

    Args:
        lines (Iterable[str]): Text lines, as produced by iterating a text stream.
        settings (ParserSettings | None): Tokenizer options (defaults when None).

    Yields:
        tuple[int, list[str]]: Physical line number on which the row ends, and its cells.

    Raises:
        RowSyntaxError: If a line cannot be segmented (malformed quoting) or decoded.
    """
    settings = settings or ParserSettings()
    _lift_field_limit()
    reader = csv.reader(lines, strict=settings.strict_quoting)
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise RowSyntaxError(str(exc), row_index=reader.line_num) from exc
        except UnicodeDecodeError as exc:
            raise RowSyntaxError(
                f"cannot decode input as {settings.encoding}: {exc.reason}",
                row_index=reader.line_num + 1,
            ) from exc
        yield reader.line_num, row


def _parse_lines(lines: Iterable[str], settings: ParserSettings) -> WorldSnapshot:
    parser = SectionParser(settings)
    for row_index, row in iter_rows(lines, settings):
        parser.feed(row, row_index)
    return parser.finish()


def parse(stream: IO[Any], settings: ParserSettings | None = None) -> WorldSnapshot:
    """
    Parse a world export from a binary or text stream.

    Args:
        stream (IO[Any]): Open file-like object. Binary streams are decoded with
            ``settings.encoding``; text streams should be opened with ``newline=""``.
        settings (ParserSettings | None): Parser options (defaults when None).

    Returns:
        WorldSnapshot: The completed snapshot.

    Raises:
        nlworld.core.errors.WorldParseError: On the first structural failure.

    Examples:
        >>> import io
        >>> from nlworld import parse
        >>> parse(io.BytesIO(b"OUTPUT\\nhello\\n")).output
        ['hello']
    """
    settings = settings or ParserSettings()
    if isinstance(stream, io.TextIOBase):
        return _parse_lines(stream, settings)
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        text = io.TextIOWrapper(stream, encoding=settings.encoding, newline="")
        try:
            return _parse_lines(text, settings)
        finally:
            # Leave closing the caller's stream to the caller.
            text.detach()
    # Any other iterable of str lines (e.g., a list, a generator).
    return _parse_lines(stream, settings)


def parse_str(data: str, settings: ParserSettings | None = None) -> WorldSnapshot:
    """
    Parse a world export held in memory.

    Examples:
        >>> from nlworld import parse_str
        >>> parse_str("GLOBALS\\nmin-pxcor,max-pxcor,min-pycor,max-pycor,ticks\\n-5,5,-5,5,0\\n").globals.max_pxcor
        5
    """
    return parse(io.StringIO(data, newline=""), settings)
