from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import polars as pl

from nlworld.core.errors import WorldParseError
from nlworld.core.schema import WorldSnapshot
from nlworld.io import TABLES, IoError, read_world, to_frame, write_tables
from nlworld.parser import ParserSettings

logger = logging.getLogger(__name__)


def _load(path: str, settings_path: str | None) -> WorldSnapshot:
    """Parse a world file with settings resolved from env > TOML > defaults.

    Args:
        path: World export to parse.
        settings_path: Optional explicit TOML file for ParserSettings.
    """
    settings = ParserSettings.load(settings_path)
    logger.debug("parser settings: %s", settings)
    return read_world(path, settings)


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("world", type=str, help="Path to a world export (.dat/.csv).")
    p.add_argument("--config", type=str, default=None, help="Explicit nlworld.toml path.")


def _cmd_summary(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="summary", description="Show row counts and globals.")
    _add_common(p)
    args = p.parse_args(argv)

    world = _load(args.world, args.config)
    for name, n in world.counts().items():
        print(f"{name:<13} {n}")
    g = world.globals
    print(
        f"world         x=[{g.min_pxcor}, {g.max_pxcor}] y=[{g.min_pycor}, {g.max_pycor}] "
        f"ticks={g.ticks}"
    )
    for key, value in g.custom.items():
        print(f"  {key} = {value.to_python()!r} ({value.kind.value})")
    return 0


def _cmd_show(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="show", description="Print the head of one world table.")
    _add_common(p)
    p.add_argument("--table", type=str, default="turtles", choices=TABLES, help="Table to show.")
    p.add_argument("--n", type=int, default=10, help="Rows to display.")
    args = p.parse_args(argv)

    world = _load(args.world, args.config)
    with pl.Config(tbl_cols=-1):
        print(to_frame(world, args.table).head(args.n))
    return 0


def _cmd_export(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="export", description="Write world tables to files.")
    _add_common(p)
    p.add_argument("--out-dir", type=str, required=True, help="Output directory.")
    p.add_argument("--format", type=str, default="parquet", choices=("parquet", "csv"))
    args = p.parse_args(argv)

    world = _load(args.world, args.config)
    for path in write_tables(world, Path(args.out_dir), fmt=args.format):
        print(f"[INFO] Wrote {path}")
    return 0


_COMMANDS = {
    "summary": _cmd_summary,
    "show": _cmd_show,
    "export": _cmd_export,
}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="nlworld", description="NetLogo world export utilities.")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...). Must precede the command.",
    )
    sub = p.add_subparsers(dest="cmd", required=True)
    for name in _COMMANDS:
        sub.add_parser(name)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    level = "WARNING"
    if len(argv) >= 2 and argv[0] == "--log-level":
        level, argv = argv[1], argv[2:]
    if level.upper() not in logging.getLevelNamesMapping():
        print(f"Unknown log level: {level}", file=sys.stderr)
        build_argparser().print_usage(sys.stderr)
        raise SystemExit(2)
    if not argv:
        build_argparser().print_help()
        return
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")

    cmd, rest = argv[0], argv[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = 2
    else:
        try:
            code = handler(rest)
        except (WorldParseError, IoError) as exc:
            print(f"[ERROR] {exc}", file=sys.stderr)
            code = 1
    raise SystemExit(code)


if __name__ == "__main__":
    main()
