"""
Record binding: one data row + the cached header -> a section-specific result.

Responsibilities
- Bind schema-bound rows (GLOBALS, TURTLES, PATCHES, LINKS) through a single generic
  "known fields + overflow" routine parameterized by nlworld.core.tables descriptors.
- Bind RANDOM_STATE rows to an ordered list of i64 values.
- Split OUTPUT rows into console lines.

Binding rules
-------------
- The row must have exactly as many cells as the cached header (per-section arity).
- Header columns named in the descriptor are parsed into their declared type (u64/i64);
  a cell that does not parse is a SchemaMismatch.
- Every other column becomes a custom Value (see nlworld.core.value.coerce_value), in
  header order.
- A header that lacks a required fixed column is a SchemaMismatch on the first data row.
- An OUTPUT row must be exactly one cell. An unquoted console line containing a comma
  tokenizes into several cells and is a SchemaMismatch; the cells are not rejoined.

Nothing here mutates shared state; failures raise before any record is produced.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Union

from nlworld.core.constants import OUTPUT_LINE_BREAK
from nlworld.core.errors import MissingHeader, SchemaMismatch
from nlworld.core.grammar import RecordDescriptor, Section, kebab_to_snake
from nlworld.core.schema import GlobalsRecord, LinkRecord, PatchRecord, TurtleRecord
from nlworld.core.tables import get_descriptor
from nlworld.core.typing import Header, Row, ScalarType
from nlworld.core.value import Value, coerce_value, parse_i64, parse_u64

__all__ = [
    "BoundRow",
    "bind_row",
    "bind_record",
    "bind_random_state",
    "split_output",
]

Record = Union[GlobalsRecord, TurtleRecord, PatchRecord, LinkRecord]

# Result of binding one row: a record, random-state values (list[int]),
# output lines (list[str]), or None for ignored sections.
BoundRow = Union[Record, list[int], list[str], None]

_RECORD_TYPES: dict[Section, type[Record]] = {
    Section.GLOBALS: GlobalsRecord,
    Section.TURTLES: TurtleRecord,
    Section.PATCHES: PatchRecord,
    Section.LINKS: LinkRecord,
}

_SCALAR_PARSERS: dict[ScalarType, Callable[[str], int | None]] = {
    "u64": parse_u64,
    "i64": parse_i64,
}


def _require_header(section: Section, header: Header | None, row_index: int) -> Header:
    if header is None:
        raise MissingHeader(
            "data row before any header row", section=section.value, row_index=row_index
        )
    return header


def _check_arity(section: Section, header: Header, row: Row, row_index: int) -> None:
    if len(row) != len(header):
        raise SchemaMismatch(
            f"expected {len(header)} cells to match the header, got {len(row)}",
            section=section.value,
            row_index=row_index,
        )


def bind_record(
    desc: RecordDescriptor, header: Header | None, row: Row, row_index: int
) -> Record:
    """
    Bind a data row to the record type of `desc.section`.

    Args:
        desc (RecordDescriptor): Fixed fields and required columns of the section.
        header (Header | None): Cached header of the section.
        row (Row): Data cells.
        row_index (int): 1-based row position, for error context.

    Returns:
        Record: GlobalsRecord, TurtleRecord, PatchRecord, or LinkRecord.

    Raises:
        MissingHeader: If no header is cached.
        SchemaMismatch: On arity mismatch, a missing required column, or an unparseable
            fixed-field value.
    """
    section = desc.section
    header = _require_header(section, header, row_index)
    _check_arity(section, header, row, row_index)

    missing = [c for c in desc.required if c not in header]
    if missing:
        raise SchemaMismatch(
            f"header lacks required columns {missing!r}",
            section=section.value,
            row_index=row_index,
        )

    fixed: dict[str, int] = {}
    custom: dict[str, Value] = {}
    for name, text in zip(header, row):
        if desc.is_known(name):
            declared = desc.fields[name]
            parsed = _SCALAR_PARSERS[declared](text)
            if parsed is None:
                raise SchemaMismatch(
                    f"column {name!r}: {text!r} is not a valid {declared}",
                    section=section.value,
                    row_index=row_index,
                )
            fixed[kebab_to_snake(name)] = parsed
        else:
            custom[name] = coerce_value(text)

    return _RECORD_TYPES[section](**fixed, custom=custom)


def bind_random_state(header: Header | None, row: Row, row_index: int) -> list[int]:
    """Bind a RANDOM_STATE row to i64 values in header column order."""
    section = Section.RANDOM_STATE
    header = _require_header(section, header, row_index)
    _check_arity(section, header, row, row_index)
    values: list[int] = []
    for name, text in zip(header, row):
        n = parse_i64(text)
        if n is None:
            raise SchemaMismatch(
                f"column {name!r}: {text!r} is not a valid i64",
                section=section.value,
                row_index=row_index,
            )
        values.append(n)
    return values


def split_output(cell: str) -> list[str]:
    """
    Split one exported console cell into lines.

    Strips a single surrounding pair of double quotes, if present, then splits on the
    two-character escape backslash-n (not a real newline).

    Examples:
        >>> from nlworld.parser.binder import split_output
        >>> split_output('"Setup complete\\\\ngo"')
        ['Setup complete', 'go']
    """
    if len(cell) >= 2 and cell.startswith('"') and cell.endswith('"'):
        cell = cell[1:-1]
    return cell.split(OUTPUT_LINE_BREAK)


def bind_row(section: Section, header: Header | None, row: Row, row_index: int) -> BoundRow:
    """
    Bind one data row of the active section.

    Args:
        section (Section): Active section.
        header (Header | None): Cached header (None for headerless sections).
        row (Row): Data cells.
        row_index (int): 1-based row position, for error context.

    Returns:
        BoundRow: Record, random-state values, output lines, or None for sections whose
        rows are not interpreted (HEADER, PLOTS, EXTENSIONS).
    """
    if section in _RECORD_TYPES:
        return bind_record(get_descriptor(section), header, row, row_index)
    if section is Section.RANDOM_STATE:
        return bind_random_state(header, row, row_index)
    if section is Section.OUTPUT:
        if len(row) != 1:
            raise SchemaMismatch(
                f"expected a single cell, got {len(row)}",
                section=section.value,
                row_index=row_index,
            )
        return split_output(row[0])
    return None
