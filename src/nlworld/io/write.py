"""
Export a parsed world as one file per table.

Overview
- write_tables() materializes each non-empty table with nlworld.io.frames.to_frame and
  writes it as Parquet or CSV via Polars.
- Write path: tmp file -> os.replace(tmp, final) on the same filesystem, so readers never
  observe a half-written table. Failures raise IoWriteError after removing the tmp file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal

import polars as pl

from nlworld.core.schema import WorldSnapshot

from .errors import IoConfigError, IoWriteError
from .frames import TABLES, to_frame

logger = logging.getLogger(__name__)

__all__ = ["OutputFormat", "write_table", "write_tables"]

OutputFormat = Literal["parquet", "csv"]

_FORMATS: frozenset[str] = frozenset({"parquet", "csv"})


def _write_frame(df: pl.DataFrame, path: Path, fmt: OutputFormat) -> None:
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        if fmt == "parquet":
            df.write_parquet(tmp)
        else:
            df.write_csv(tmp)
        os.replace(tmp, path)
    except Exception as exc:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            pass
        raise IoWriteError(f"failed to write {path}: {exc}") from exc


def write_table(
    snapshot: WorldSnapshot,
    table: str,
    out_dir: str | os.PathLike[str],
    fmt: OutputFormat = "parquet",
) -> Path:
    """
    Write one world table to ``out_dir/<table>.<fmt>``.

    Args:
        snapshot (WorldSnapshot): Parsed world.
        table (str): One of nlworld.io.frames.TABLES.
        out_dir (str | os.PathLike[str]): Destination directory (created if missing).
        fmt (Literal["parquet","csv"]): Output format.

    Returns:
        Path: Final path of the written file.

    Raises:
        IoConfigError: On an unknown table or format.
        IoWriteError: If the file cannot be written.
    """
    if fmt not in _FORMATS:
        raise IoConfigError(f"unsupported format {fmt!r} (expected one of {sorted(_FORMATS)!r})")
    df = to_frame(snapshot, table)
    out = Path(out_dir)
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IoWriteError(f"cannot create output directory {out}: {exc}") from exc
    path = out / f"{table}.{fmt}"
    _write_frame(df, path, fmt)
    logger.info("wrote %s (%d rows)", path, df.height)
    return path


def write_tables(
    snapshot: WorldSnapshot,
    out_dir: str | os.PathLike[str],
    fmt: OutputFormat = "parquet",
) -> list[Path]:
    """
    Write every non-empty world table; the globals table is always written.

    Returns:
        list[Path]: Written paths in nlworld.io.frames.TABLES order.
    """
    counts = snapshot.counts()
    written: list[Path] = []
    for table in TABLES:
        if table != "globals" and counts[table] == 0:
            continue
        written.append(write_table(snapshot, table, out_dir, fmt))
    return written
