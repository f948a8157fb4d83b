from __future__ import annotations

from pathlib import Path

import pytest

from nlworld import cli

ANTS = Path(__file__).resolve().parents[1] / "data" / "ants.dat"


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as ei:
        cli.main(argv)
    return int(ei.value.code)


def test_summary(capsys) -> None:
    assert _run(["summary", str(ANTS)]) == 0
    out = capsys.readouterr().out
    assert "turtles       6" in out
    assert "population = 6 (u64)" in out


def test_show_table(capsys) -> None:
    assert _run(["show", str(ANTS), "--table", "links"]) == 0
    assert "end1" in capsys.readouterr().out


def test_export_csv(tmp_path: Path, capsys) -> None:
    argv = ["--log-level", "INFO", "export", str(ANTS), "--out-dir", str(tmp_path), "--format", "csv"]
    assert _run(argv) == 0
    assert (tmp_path / "turtles.csv").exists()
    assert "[INFO] Wrote" in capsys.readouterr().out


def test_parse_error_exit_code(tmp_path: Path, capsys) -> None:
    bad = tmp_path / "bad.dat"
    bad.write_text("TURTLES\nwho,color,xcor,ycor\n0,1\n")
    assert _run(["summary", str(bad)]) == 1
    assert "[ERROR] TURTLES row 3" in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path: Path, capsys) -> None:
    assert _run(["summary", str(tmp_path / "missing.dat")]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_unknown_command(capsys) -> None:
    assert _run(["frobnicate"]) == 2


def test_no_args_prints_help(capsys) -> None:
    cli.main([])
    assert "nlworld" in capsys.readouterr().out


def test_unknown_log_level(capsys) -> None:
    assert _run(["--log-level", "bogus", "summary", str(ANTS)]) == 2
    assert "Unknown log level: bogus" in capsys.readouterr().err


def test_log_level_is_case_insensitive(capsys) -> None:
    assert _run(["--log-level", "debug", "summary", str(ANTS)]) == 0
