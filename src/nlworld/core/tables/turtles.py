"""
Record descriptor for the 'TURTLES' section.

Schema:
- fields:
    who u64, color u64, xcor i64, ycor i64
- required:
    all fixed fields
- custom:
    every other header column (heading, breed, turtles-own variables, ...)
"""

from __future__ import annotations

from ..grammar import RecordDescriptor, Section

TURTLES_DESC = RecordDescriptor(
    section=Section.TURTLES,
    fields={
        "who": "u64",
        "color": "u64",
        "xcor": "i64",
        "ycor": "i64",
    },
    required=["who", "color", "xcor", "ycor"],
)
