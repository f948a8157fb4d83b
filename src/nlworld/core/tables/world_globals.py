"""
Record descriptor for the 'GLOBALS' section.

Purpose:
- World bounds and tick counter, followed by any model-declared globals.

Schema:
- fields:
    min-pxcor i64, max-pxcor i64, min-pycor i64, max-pycor i64, ticks u64
- required:
    all fixed fields
- custom:
    every other header column, coerced, in header order

Notes:
- Only one GLOBALS row is expected; the accumulator keeps the last one.
"""

from __future__ import annotations

from ..grammar import RecordDescriptor, Section

GLOBALS_DESC = RecordDescriptor(
    section=Section.GLOBALS,
    fields={
        "min-pxcor": "i64",
        "max-pxcor": "i64",
        "min-pycor": "i64",
        "max-pycor": "i64",
        "ticks": "u64",
    },
    required=[
        "min-pxcor",
        "max-pxcor",
        "min-pycor",
        "max-pycor",
        "ticks",
    ],
)
