from nlworld.core.grammar import (
    HEADERLESS_SECTIONS,
    Section,
    is_section_like_token,
    kebab_to_snake,
    section_from_token,
)


def test_wire_tokens_verbatim() -> None:
    assert [s.value for s in Section] == [
        "HEADER",
        "RANDOM_STATE",
        "GLOBALS",
        "TURTLES",
        "PATCHES",
        "LINKS",
        "OUTPUT",
        "PLOTS",
        "EXTENSTIONS",
    ]


def test_extensions_token_keeps_historical_spelling() -> None:
    assert section_from_token("EXTENSTIONS") is Section.EXTENSIONS
    assert section_from_token("EXTENSIONS") is None


def test_tokens_are_case_sensitive_and_untrimmed() -> None:
    assert section_from_token("Globals") is None
    assert section_from_token(" GLOBALS") is None
    assert section_from_token("GLOBALS ") is None


def test_header_policy() -> None:
    assert HEADERLESS_SECTIONS == {
        Section.HEADER,
        Section.OUTPUT,
        Section.PLOTS,
        Section.EXTENSIONS,
    }
    for s in (
        Section.RANDOM_STATE,
        Section.GLOBALS,
        Section.TURTLES,
        Section.PATCHES,
        Section.LINKS,
    ):
        assert s.has_header
    assert not Section.OUTPUT.has_header


def test_section_like_tokens() -> None:
    assert is_section_like_token("DRAWING")
    assert is_section_like_token("EXTENSIONS")
    assert not is_section_like_token("drawing")
    assert not is_section_like_token("min-pxcor")
    assert not is_section_like_token("")


def test_kebab_to_snake() -> None:
    assert kebab_to_snake("min-pxcor") == "min_pxcor"
    assert kebab_to_snake("who") == "who"
