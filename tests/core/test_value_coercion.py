import math

import pytest
from pydantic import ValidationError

from nlworld.core.errors import ValueTypeError
from nlworld.core.value import (
    Value,
    ValueKind,
    coerce_value,
    parse_f64,
    parse_i64,
    parse_u64,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("true", Value.bool_(True)),
        ("false", Value.bool_(False)),
        ("42", Value.u64(42)),
        ("+7", Value.u64(7)),
        ("-1", Value.i64(-1)),
        ("-0", Value.i64(0)),
        ("3.14", Value.float_(3.14)),
        ("1e3", Value.float_(1000.0)),
        (".5", Value.float_(0.5)),
        ("abc", Value.string("abc")),
        ("", Value.string("")),
    ],
)
def test_coercion_priority(text: str, expected: Value) -> None:
    assert coerce_value(text) == expected


def test_bool_literals_are_case_sensitive() -> None:
    assert coerce_value("True").kind is ValueKind.STRING
    assert coerce_value("FALSE").kind is ValueKind.STRING


def test_integer_overflow_falls_through() -> None:
    # one past u64::MAX is neither u64 nor i64
    big = str(2**64)
    assert coerce_value(big).kind is ValueKind.FLOAT
    assert coerce_value(str(2**64 - 1)) == Value.u64(2**64 - 1)
    # below i64::MIN
    assert coerce_value(str(-(2**63) - 1)).kind is ValueKind.FLOAT
    assert coerce_value(str(-(2**63))) == Value.i64(-(2**63))


def test_python_literal_extensions_stay_strings() -> None:
    # int()/float() would accept these; the wire grammar does not
    for text in [" 1", "1 ", "1_000", "0x10", "1.0f", "--1"]:
        assert coerce_value(text).kind is ValueKind.STRING, text


def test_special_floats() -> None:
    assert math.isinf(coerce_value("inf").as_float())
    assert coerce_value("-Infinity").as_float() == float("-inf")
    assert math.isnan(coerce_value("NaN").as_float())


def test_coercion_is_deterministic() -> None:
    for text in ["42", "-1", "3.14", "true", "abc", "{turtle 0}"]:
        assert coerce_value(text) == coerce_value(text)


def test_strict_parsers() -> None:
    assert parse_u64("18446744073709551615") == 2**64 - 1
    assert parse_u64("-1") is None
    assert parse_i64("9223372036854775808") is None
    assert parse_i64("-9223372036854775808") == -(2**63)
    assert parse_f64("1.") == 1.0
    assert parse_f64("e5") is None


def test_conversions_and_errors() -> None:
    v = Value.u64(6)
    assert v.as_u64() == 6
    assert v.to_python() == 6
    with pytest.raises(ValueTypeError):
        v.as_i64()
    with pytest.raises(ValueTypeError):
        Value.string("x").as_bool()


def test_signedness_is_part_of_equality() -> None:
    assert Value.u64(1) != Value.i64(1)


def test_payload_must_match_kind() -> None:
    with pytest.raises(ValidationError):
        Value(kind=ValueKind.U64, data=-1)
    with pytest.raises(ValidationError):
        Value(kind=ValueKind.BOOL, data=1)
    with pytest.raises(ValidationError):
        Value(kind=ValueKind.I64, data=2**63)
    with pytest.raises(ValidationError):
        Value(kind=ValueKind.STRING, data=3)


def test_value_is_immutable() -> None:
    v = Value.string("a")
    with pytest.raises(ValidationError):
        v.data = "b"  # type: ignore[misc]


def test_very_long_digit_runs_fall_through_to_float() -> None:
    assert parse_u64("1" * 5000) is None
    assert parse_i64("-" + "9" * 5000) is None
    v = coerce_value("1" * 5000)
    assert v.kind is ValueKind.FLOAT
    assert math.isinf(v.as_float())


def test_leading_zeros_do_not_count_against_width() -> None:
    assert parse_u64("0" * 5000 + "42") == 42
    assert parse_i64("-" + "0" * 30 + "7") == -7
