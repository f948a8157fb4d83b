"""
nlworld — typed snapshots of NetLogo world exports.

```python
from nlworld import parse_str

world = parse_str(text)
world.turtles[0].who
world.globals.get("population").as_u64()
```
"""

from __future__ import annotations

from .core.errors import (
    MissingHeader,
    RowSyntaxError,
    SchemaMismatch,
    UnknownSection,
    WorldParseError,
)
from .core.schema import GlobalsRecord, LinkRecord, PatchRecord, TurtleRecord, WorldSnapshot
from .core.value import Value, ValueKind
from .parser import ParserSettings, parse, parse_str

__all__ = [
    "parse",
    "parse_str",
    "ParserSettings",
    "WorldSnapshot",
    "GlobalsRecord",
    "TurtleRecord",
    "PatchRecord",
    "LinkRecord",
    "Value",
    "ValueKind",
    "WorldParseError",
    "RowSyntaxError",
    "SchemaMismatch",
    "MissingHeader",
    "UnknownSection",
]

__version__ = "0.1.0"
