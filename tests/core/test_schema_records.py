import pytest
from pydantic import ValidationError

from nlworld.core.schema import GlobalsRecord, PatchRecord, TurtleRecord, WorldSnapshot
from nlworld.core.value import Value


def test_globals_defaults() -> None:
    g = GlobalsRecord()
    assert (g.min_pxcor, g.max_pxcor, g.min_pycor, g.max_pycor, g.ticks) == (0, 0, 0, 0, 0)
    assert g.custom == {}
    assert g.get("population") is None


def test_turtle_requires_fixed_fields() -> None:
    with pytest.raises(ValidationError):
        TurtleRecord(who=0, color=15, xcor=0)  # type: ignore[call-arg]


def test_unsigned_fields_reject_negatives() -> None:
    with pytest.raises(ValidationError):
        TurtleRecord(who=-1, color=15, xcor=0, ycor=0)
    with pytest.raises(ValidationError):
        GlobalsRecord(ticks=-1)


def test_custom_preserves_insertion_order() -> None:
    p = PatchRecord(custom={"pycor": Value.i64(-1), "pxcor": Value.u64(3)})
    assert list(p.custom) == ["pycor", "pxcor"]
    assert p.get("pxcor") == Value.u64(3)


def test_extra_attributes_forbidden() -> None:
    with pytest.raises(ValidationError):
        PatchRecord(pcolor=5)  # type: ignore[call-arg]


def test_empty_snapshot() -> None:
    w = WorldSnapshot()
    assert w.plots is None
    assert w.counts() == {
        "random_state": 0,
        "output": 0,
        "turtles": 0,
        "patches": 0,
        "links": 0,
    }
