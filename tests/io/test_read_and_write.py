from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest

from nlworld.core.errors import SchemaMismatch
from nlworld.io import IoConfigError, IoReadError, read_world, write_table, write_tables
from nlworld.parser import ParserSettings

ANTS = Path(__file__).resolve().parents[1] / "data" / "ants.dat"


def test_read_world_missing_file(tmp_path: Path) -> None:
    with pytest.raises(IoReadError):
        read_world(tmp_path / "nope.dat")


def test_read_world_propagates_parse_errors(tmp_path: Path) -> None:
    bad = tmp_path / "bad.dat"
    bad.write_text("GLOBALS\nmin-pxcor,max-pxcor,min-pycor,max-pycor,ticks\n1,2\n")
    with pytest.raises(SchemaMismatch):
        read_world(bad)


def test_read_world_with_settings(tmp_path: Path) -> None:
    p = tmp_path / "latin.dat"
    p.write_bytes("OUTPUT\ncafé\n".encode("latin-1"))
    assert read_world(p, ParserSettings(encoding="latin-1")).output == ["café"]


def test_write_tables_parquet(tmp_path: Path) -> None:
    world = read_world(ANTS)
    paths = write_tables(world, tmp_path / "out")
    names = [p.name for p in paths]
    assert names == [
        "globals.parquet",
        "turtles.parquet",
        "patches.parquet",
        "links.parquet",
        "output.parquet",
        "random_state.parquet",
    ]
    df = pl.read_parquet(tmp_path / "out" / "turtles.parquet")
    assert df.height == 6
    assert df["who"].to_list() == [0, 1, 2, 3, 4, 5]
    # no tmp files left behind
    assert not list((tmp_path / "out").glob(".*.tmp"))


def test_write_tables_skips_empty(tmp_path: Path) -> None:
    world = read_world(ANTS).model_copy(update={"links": [], "random_state": []})
    names = [p.name for p in write_tables(world, tmp_path, fmt="csv")]
    assert "links.csv" not in names
    assert "random_state.csv" not in names
    assert "globals.csv" in names
    out = pl.read_csv(tmp_path / "output.csv")
    assert out["line"].to_list() == world.output


def test_write_table_rejects_unknown_format(tmp_path: Path) -> None:
    world = read_world(ANTS)
    with pytest.raises(IoConfigError):
        write_table(world, "turtles", tmp_path, fmt="xlsx")  # type: ignore[arg-type]
