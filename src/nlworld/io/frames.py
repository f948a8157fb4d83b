"""
Polars views of a parsed WorldSnapshot.

Overview
- to_frame(): one DataFrame per world table ("globals", "turtles", "patches", "links",
  "output", "random_state").
- to_frames(): all tables keyed by name.

Column layout
- Fixed columns first, named and typed as declared by nlworld.core.tables
  (u64 -> pl.UInt64, i64 -> pl.Int64).
- Custom columns follow in first-seen order across rows; a row without a given column
  gets null.

Custom column dtypes
| Value kinds in the column        | Polars dtype
|----------------------------------|------------------------------------------
| bool only                        | pl.Boolean
| u64/i64 fitting in i64           | pl.Int64
| u64 beyond i64, none negative    | pl.UInt64
| integers mixed with float        | pl.Float64
| anything else (mixed with str)   | pl.Utf8 (bools rendered "true"/"false")

Import DAG discipline
- Depends on stdlib, polars, and nlworld.core.*; does not import the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

import polars as pl

from nlworld.core.constants import I64_MAX, I64_MIN
from nlworld.core.grammar import RecordDescriptor, kebab_to_snake
from nlworld.core.schema import WorldSnapshot
from nlworld.core.tables import GLOBALS_DESC, LINKS_DESC, PATCHES_DESC, TURTLES_DESC
from nlworld.core.value import Value, ValueKind

from .errors import IoConfigError

__all__ = ["TableName", "TABLES", "to_frame", "to_frames"]

TableName = Literal["globals", "turtles", "patches", "links", "output", "random_state"]

TABLES: tuple[str, ...] = ("globals", "turtles", "patches", "links", "output", "random_state")

_FIXED_DTYPES: dict[str, object] = {
    "u64": pl.UInt64,
    "i64": pl.Int64,
}

_INT_KINDS = frozenset({ValueKind.U64, ValueKind.I64})
_NUMERIC_KINDS = frozenset({ValueKind.U64, ValueKind.I64, ValueKind.FLOAT})


def _render(value: Value) -> str:
    if value.kind is ValueKind.BOOL:
        return "true" if value.data else "false"
    return str(value.data)


def _custom_series(name: str, values: Sequence[Value | None]) -> pl.Series:
    kinds = {v.kind for v in values if v is not None}
    raw = [None if v is None else v.data for v in values]

    if kinds == {ValueKind.BOOL}:
        return pl.Series(name, raw, dtype=pl.Boolean)
    if kinds and kinds <= _INT_KINDS:
        ints = [x for x in raw if x is not None]
        if all(I64_MIN <= x <= I64_MAX for x in ints):  # type: ignore[operator]
            return pl.Series(name, raw, dtype=pl.Int64)
        if all(x >= 0 for x in ints):  # type: ignore[operator]
            return pl.Series(name, raw, dtype=pl.UInt64)
    elif kinds and kinds <= _NUMERIC_KINDS:
        return pl.Series(name, [None if x is None else float(x) for x in raw], dtype=pl.Float64)

    return pl.Series(name, [None if v is None else _render(v) for v in values], dtype=pl.Utf8)


def _records_frame(desc: RecordDescriptor, records: Sequence[object]) -> pl.DataFrame:
    columns: list[pl.Series] = []
    for name, declared in desc.fields.items():
        attr = kebab_to_snake(name)
        columns.append(
            pl.Series(name, [getattr(r, attr) for r in records], dtype=_FIXED_DTYPES[declared])
        )

    custom_names: dict[str, None] = {}
    for r in records:
        for key in r.custom:  # type: ignore[attr-defined]
            custom_names.setdefault(key, None)
    for key in custom_names:
        columns.append(_custom_series(key, [r.custom.get(key) for r in records]))  # type: ignore[attr-defined]

    return pl.DataFrame(columns)


def to_frame(snapshot: WorldSnapshot, table: TableName | str) -> pl.DataFrame:
    """
    Materialize one world table as a Polars DataFrame.

    Args:
        snapshot (WorldSnapshot): Parsed world.
        table (TableName | str): One of TABLES.

    Returns:
        pl.DataFrame: Frame with fixed columns first, then custom columns.

    Raises:
        IoConfigError: If `table` is not a known table name.

    Examples:
        >>> from nlworld import parse_str
        >>> from nlworld.io.frames import to_frame
        >>> world = parse_str("OUTPUT\\nhello\\n")
        >>> to_frame(world, "output")["line"].to_list()
        ['hello']
    """
    if table == "globals":
        return _records_frame(GLOBALS_DESC, [snapshot.globals])
    if table == "turtles":
        return _records_frame(TURTLES_DESC, snapshot.turtles)
    if table == "patches":
        return _records_frame(PATCHES_DESC, snapshot.patches)
    if table == "links":
        return _records_frame(LINKS_DESC, snapshot.links)
    if table == "output":
        return pl.DataFrame({"line": pl.Series("line", snapshot.output, dtype=pl.Utf8)})
    if table == "random_state":
        return pl.DataFrame({"value": pl.Series("value", snapshot.random_state, dtype=pl.Int64)})
    raise IoConfigError(f"unknown table {table!r} (expected one of {list(TABLES)!r})")


def to_frames(snapshot: WorldSnapshot) -> dict[str, pl.DataFrame]:
    """Materialize every world table, keyed by table name."""
    return {name: to_frame(snapshot, name) for name in TABLES}
