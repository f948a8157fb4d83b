from __future__ import annotations

import pytest

from nlworld.core.errors import MissingHeader, SchemaMismatch, WorldParseError
from nlworld.core.grammar import Section
from nlworld.core.value import Value
from nlworld.parser import ParserSettings, SectionParser, parse_rows, parse_str
from nlworld.parser.binder import bind_row


def test_empty_input() -> None:
    world = parse_str("")
    assert world.turtles == [] and world.output == []
    assert world.globals.ticks == 0


def test_initial_state_is_header() -> None:
    p = SectionParser()
    assert p.section is Section.HEADER
    # rows before any boundary belong to HEADER and are ignored
    p.feed(["export-world data"], 1)
    p.feed(["a", "b", "c"], 2)
    assert p.finish().counts()["turtles"] == 0


def test_header_resets_between_sections() -> None:
    world = parse_rows(
        [
            ["TURTLES"],
            ["who", "color", "xcor", "ycor"],
            ["0", "15", "1", "-1"],
            ["PATCHES"],
            ["a", "b"],
            ["1", "2"],
        ]
    )
    assert len(world.turtles) == 1
    assert world.patches[0].custom == {"a": Value.u64(1), "b": Value.u64(2)}


def test_repeated_boundary_clears_header() -> None:
    world = parse_rows(
        [
            ["PATCHES"],
            ["a", "b", "c"],
            ["1", "2", "3"],
            ["PATCHES"],
            ["x"],
            ["9"],
        ]
    )
    assert [list(p.custom) for p in world.patches] == [["a", "b", "c"], ["x"]]


def test_section_with_header_and_no_rows() -> None:
    world = parse_rows([["TURTLES"], ["who", "color", "xcor", "ycor"], ["LINKS"]])
    assert world.turtles == []
    assert world.links == []


def test_globals_last_write_wins() -> None:
    header = ["min-pxcor", "max-pxcor", "min-pycor", "max-pycor", "ticks"]
    world = parse_rows(
        [
            ["GLOBALS"],
            header,
            ["-1", "1", "-1", "1", "5"],
            ["GLOBALS"],
            header,
            ["-2", "2", "-2", "2", "7"],
        ]
    )
    assert world.globals.ticks == 7
    assert world.globals.max_pxcor == 2


def test_output_appends_across_rows() -> None:
    world = parse_rows([["OUTPUT"], ["a\\nb"], ["c"], ["OUTPUT"], ["d"]])
    assert world.output == ["a", "b", "c", "d"]


def test_order_preservation() -> None:
    rows = [["LINKS"], ["end1", "end2"]]
    rows += [[str(i), str(i + 1)] for i in range(20)]
    world = parse_rows(rows)
    assert [link.custom["end1"].as_u64() for link in world.links] == list(range(20))


def test_short_globals_row_aborts() -> None:
    text = (
        "GLOBALS\n"
        "min-pxcor,max-pxcor,min-pycor,max-pycor,ticks\n"
        "-5,5,-5,5\n"
        "TURTLES\n"
        "who,color,xcor,ycor\n"
        "0,15,0,0\n"
    )
    with pytest.raises(SchemaMismatch) as ei:
        parse_str(text)
    assert ei.value.section == "GLOBALS"
    assert ei.value.row_index == 3
    assert "GLOBALS row 3" in str(ei.value)


def test_errors_share_a_base_class() -> None:
    with pytest.raises(WorldParseError):
        parse_rows([["TURTLES"], ["who", "color", "xcor", "ycor"], ["x", "1", "2", "3"]])


def test_single_cell_data_equal_to_token_is_a_boundary() -> None:
    # Known grammar ambiguity: the classifier always runs first.
    world = parse_rows([["PATCHES"], ["name"], ["alpha"], ["LINKS"], ["beta"], ["1"]])
    assert [p.custom["name"] for p in world.patches] == [Value.string("alpha")]
    assert world.links[0].custom == {"beta": Value.u64(1)}


def test_blank_rows_are_skipped_by_default() -> None:
    world = parse_rows([["TURTLES"], [], ["who", "color", "xcor", "ycor"], [], ["0", "1", "2", "3"]])
    assert len(world.turtles) == 1


def test_blank_rows_kept_when_configured() -> None:
    settings = ParserSettings(skip_blank_rows=False)
    with pytest.raises(SchemaMismatch):
        parse_rows([["TURTLES"], ["who", "color", "xcor", "ycor"], []], settings)


def test_binding_before_header_capture_raises_missing_header() -> None:
    p = SectionParser()
    p.feed(["TURTLES"], 1)
    assert p.headers.is_empty
    with pytest.raises(MissingHeader):
        bind_row(p.section, p.headers.columns, ["0", "1", "2", "3"], 2)


def test_independent_parsers_do_not_share_state() -> None:
    a = SectionParser()
    b = SectionParser()
    a.feed(["OUTPUT"], 1)
    a.feed(["from a"], 2)
    b.feed(["OUTPUT"], 1)
    assert a.finish().output == ["from a"]
    assert b.finish().output == []


def test_unquoted_output_line_with_comma_is_rejected() -> None:
    assert parse_str('OUTPUT\n"a, b"\n').output == ["a, b"]
    with pytest.raises(SchemaMismatch) as ei:
        parse_str("OUTPUT\na, b\n")
    assert ei.value.section == "OUTPUT"
    assert ei.value.row_index == 2
