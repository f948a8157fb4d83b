"""
nlworld.io — File and tabular IO for parsed NetLogo worlds.

## Responsibilities
- Read world exports from disk into a WorldSnapshot (read_world).
- Provide Polars views of each world table (to_frame, to_frames).
- Export tables as Parquet or CSV with atomic tmp -> final renames (write_tables).

## Import DAG discipline
- Depends on stdlib, polars, nlworld.core.* and nlworld.parser; does not import the CLI.

## Examples
```python
from nlworld.io import read_world, to_frame, write_tables

world = read_world("ants.dat")  # doctest: +SKIP
to_frame(world, "turtles").filter(pl.col("color") == 15)  # doctest: +SKIP
write_tables(world, "out/ants", fmt="parquet")  # doctest: +SKIP
```
"""

from __future__ import annotations

from .errors import IoConfigError, IoError, IoReadError, IoWriteError
from .frames import TABLES, to_frame, to_frames
from .read import read_world
from .write import write_table, write_tables

__all__ = [
    "TABLES",
    "IoError",
    "IoReadError",
    "IoConfigError",
    "IoWriteError",
    "read_world",
    "to_frame",
    "to_frames",
    "write_table",
    "write_tables",
]
