"""
Pydantic v2 models for the records of a parsed world and the snapshot that holds them.

Responsibilities
- Define one record model per schema-bound section: fixed typed fields plus an
  insertion-ordered ``custom`` mapping of column name -> Value.
- Define ``WorldSnapshot``, the complete parse result handed to callers.

Style
- Zero-IO (stdlib + pydantic only).
- Fixed-field attribute names are ``kebab_to_snake`` of the wire column names declared in
  ``nlworld.core.tables``; custom keys are the wire names verbatim.
- ``custom`` relies on dict insertion order; binders insert in header column order, so
  equal inputs produce equal (and equally ordered) records.

References
- grammar: src/nlworld/core/grammar.py (Section, kebab_to_snake)
- tables: src/nlworld/core/tables/ (fixed field declarations)
- value: src/nlworld/core/value.py (Value, coercion)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .constants import I64_MAX, I64_MIN, U64_MAX
from .value import Value

__all__ = [
    "GlobalsRecord",
    "TurtleRecord",
    "PatchRecord",
    "LinkRecord",
    "WorldSnapshot",
]


class _Record(BaseModel):
    """Shared shape: an ordered bag of custom (unrecognized) columns."""

    model_config = ConfigDict(extra="forbid")

    custom: dict[str, Value] = Field(default_factory=dict)

    def get(self, key: str) -> Value | None:
        """
        Get a custom field if any.

        Examples:
            >>> from nlworld.core.schema import PatchRecord
            >>> from nlworld.core.value import Value
            >>> PatchRecord(custom={"pcolor": Value.u64(55)}).get("pcolor").as_u64()
            55
        """
        return self.custom.get(key)


class GlobalsRecord(_Record):
    """
    World-wide settings and user-declared globals.

    Attributes:
        min_pxcor (int): Left patch coordinate bound (i64).
        max_pxcor (int): Right patch coordinate bound (i64).
        min_pycor (int): Bottom patch coordinate bound (i64).
        max_pycor (int): Top patch coordinate bound (i64).
        ticks (int): Tick counter at export time (u64).
        custom (dict[str, Value]): Remaining columns (e.g., model globals like "population").

    Notes:
        Defaults to zeros so a world without a GLOBALS section still yields a record.
    """

    min_pxcor: int = Field(0, ge=I64_MIN, le=I64_MAX)
    max_pxcor: int = Field(0, ge=I64_MIN, le=I64_MAX)
    min_pycor: int = Field(0, ge=I64_MIN, le=I64_MAX)
    max_pycor: int = Field(0, ge=I64_MIN, le=I64_MAX)
    ticks: int = Field(0, ge=0, le=U64_MAX)


class TurtleRecord(_Record):
    """
    One turtle (agent) row.

    Attributes:
        who (int): Turtle id (u64).
        color (int): Color number (u64).
        xcor (int): X coordinate (i64).
        ycor (int): Y coordinate (i64).
        custom (dict[str, Value]): Remaining columns (heading, breed, turtles-own variables, ...).
    """

    who: int = Field(..., ge=0, le=U64_MAX)
    color: int = Field(..., ge=0, le=U64_MAX)
    xcor: int = Field(..., ge=I64_MIN, le=I64_MAX)
    ycor: int = Field(..., ge=I64_MIN, le=I64_MAX)


class PatchRecord(_Record):
    """One patch row; every column is custom."""


class LinkRecord(_Record):
    """One link row; every column is custom."""


class WorldSnapshot(BaseModel):
    """
    Complete parse result of one world export.

    Attributes:
        random_state (list[int]): RNG state values (i64) in header column order.
        globals (GlobalsRecord): Last GLOBALS row seen (defaults when absent).
        output (list[str]): Captured console lines in file order.
        turtles (list[TurtleRecord]): Turtle rows in file order.
        patches (list[PatchRecord]): Patch rows in file order.
        links (list[LinkRecord]): Link rows in file order.
        plots (None): Placeholder; plot sections are not interpreted.

    Examples:
        >>> from nlworld.core.schema import WorldSnapshot
        >>> WorldSnapshot().counts()["turtles"]
        0
    """

    model_config = ConfigDict(extra="forbid")

    random_state: list[int] = Field(default_factory=list)
    globals: GlobalsRecord = Field(default_factory=GlobalsRecord)
    output: list[str] = Field(default_factory=list)
    turtles: list[TurtleRecord] = Field(default_factory=list)
    patches: list[PatchRecord] = Field(default_factory=list)
    links: list[LinkRecord] = Field(default_factory=list)
    plots: None = None

    def counts(self) -> dict[str, int]:
        """Row counts per sequence-valued section."""
        return {
            "random_state": len(self.random_state),
            "output": len(self.output),
            "turtles": len(self.turtles),
            "patches": len(self.patches),
            "links": len(self.links),
        }
