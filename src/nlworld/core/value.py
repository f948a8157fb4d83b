"""
Scalar Value type for custom fields and the coercion that infers it from cell text.

Responsibilities
- Define ``Value``, a tagged scalar over {bool, u64, i64, float, string}.
- Classify one untyped cell string into exactly one Value kind (``coerce_value``).
- Provide strict, full-match parsers for the numeric kinds, shared with fixed-field binding.

Coercion order
--------------
Candidates are tried in a fixed priority and the first one that consumes the whole string
wins:

1. ``true`` / ``false`` (case-sensitive) -> BOOL
2. unsigned 64-bit integer -> U64
3. signed 64-bit integer -> I64
4. IEEE-754 double -> FLOAT
5. anything else -> STRING (verbatim)

So ``"42"`` is always U64, ``"-1"`` is I64, ``"3.14"`` is FLOAT, and an integer that
overflows both 64-bit kinds falls through to FLOAT.

Numeric grammar
---------------
Python's ``int()``/``float()`` accept surrounding whitespace and digit separators ("1_000").
Cells are matched against explicit patterns first, so " 1" and "1_000" stay strings.

Examples
--------
>>> from nlworld.core.value import ValueKind, coerce_value
>>> coerce_value("42").kind is ValueKind.U64
True
>>> coerce_value("-1")
Value(kind=<ValueKind.I64: 'i64'>, data=-1)
>>> coerce_value("abc").as_str()
'abc'
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, model_validator

from .constants import I64_MAX, I64_MIN, U64_MAX
from .errors import SchemaError, ValueTypeError

__all__ = [
    "ValueKind",
    "Value",
    "coerce_value",
    "parse_bool",
    "parse_u64",
    "parse_i64",
    "parse_f64",
]


class ValueKind(Enum):
    """Scalar kinds a custom Value can hold."""

    BOOL = "bool"
    U64 = "u64"
    I64 = "i64"
    FLOAT = "float"
    STRING = "string"


class Value(BaseModel):
    """
    Tagged scalar used for custom (unrecognized) columns.

    Attributes:
        kind (ValueKind): Active variant.
        data (bool | int | float | str): Payload; its Python type must agree with ``kind``.

    Raises:
        pydantic.ValidationError: If the payload disagrees with the kind or an integer is
            out of range for its kind.

    Notes:
        Python ints do not distinguish signedness, so the kind tag is authoritative:
        ``Value.u64(1) != Value.i64(1)``.

    Examples:
        >>> from nlworld.core.value import Value
        >>> Value.u64(6).as_u64()
        6
        >>> Value.string("x") == Value.string("x")
        True
    """

    model_config = ConfigDict(frozen=True, strict=True)

    kind: ValueKind
    data: bool | int | float | str

    @model_validator(mode="after")
    def _validate_payload(self) -> Value:
        kind, data = self.kind, self.data
        if kind is ValueKind.BOOL:
            ok = isinstance(data, bool)
        elif kind is ValueKind.U64:
            ok = _is_int(data) and 0 <= data <= U64_MAX
        elif kind is ValueKind.I64:
            ok = _is_int(data) and I64_MIN <= data <= I64_MAX
        elif kind is ValueKind.FLOAT:
            ok = isinstance(data, float)
        else:
            ok = isinstance(data, str)
        if not ok:
            raise SchemaError(f"payload {data!r} is not a valid {kind.value}")
        return self

    # Constructors

    @classmethod
    def bool_(cls, data: bool) -> Value:
        return cls(kind=ValueKind.BOOL, data=data)

    @classmethod
    def u64(cls, data: int) -> Value:
        return cls(kind=ValueKind.U64, data=data)

    @classmethod
    def i64(cls, data: int) -> Value:
        return cls(kind=ValueKind.I64, data=data)

    @classmethod
    def float_(cls, data: float) -> Value:
        return cls(kind=ValueKind.FLOAT, data=float(data))

    @classmethod
    def string(cls, data: str) -> Value:
        return cls(kind=ValueKind.STRING, data=data)

    # Conversions

    def _expect(self, kind: ValueKind) -> Any:
        if self.kind is not kind:
            raise ValueTypeError(f"expected {kind.value!r} got {self.kind.value!r} ({self.data!r})")
        return self.data

    def as_bool(self) -> bool:
        return self._expect(ValueKind.BOOL)

    def as_u64(self) -> int:
        return self._expect(ValueKind.U64)

    def as_i64(self) -> int:
        return self._expect(ValueKind.I64)

    def as_float(self) -> float:
        return self._expect(ValueKind.FLOAT)

    def as_str(self) -> str:
        return self._expect(ValueKind.STRING)

    def to_python(self) -> bool | int | float | str:
        """Return the bare payload regardless of kind."""
        return self.data


def _is_int(data: object) -> bool:
    return isinstance(data, int) and not isinstance(data, bool)


# ============================================================================
# Strict scalar parsers (full match, None on miss)
# ============================================================================

_U64_RE: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]+")
_I64_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_F64_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)

# Significant digits of U64_MAX. Longer runs never fit, and int() rejects very long strings.
_MAX_INT_DIGITS: Final[int] = 20


def _to_int(text: str) -> int | None:
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_INT_DIGITS:
        return None
    n = int(digits)
    return -n if text.startswith("-") else n


def parse_bool(text: str) -> bool | None:
    if text == "true":
        return True
    if text == "false":
        return False
    return None


def parse_u64(text: str) -> int | None:
    """Parse an unsigned 64-bit integer literal; None if malformed or out of range."""
    n = _to_int(text) if _U64_RE.fullmatch(text) else None
    return n if n is not None and n <= U64_MAX else None


def parse_i64(text: str) -> int | None:
    """Parse a signed 64-bit integer literal; None if malformed or out of range."""
    n = _to_int(text) if _I64_RE.fullmatch(text) else None
    return n if n is not None and I64_MIN <= n <= I64_MAX else None


def parse_f64(text: str) -> float | None:
    """Parse a double literal (decimal, exponent, inf/infinity/nan); None if malformed."""
    if not _F64_RE.fullmatch(text):
        return None
    return float(text)


def coerce_value(text: str) -> Value:
    """
    Classify one cell string into exactly one Value kind.

    Args:
        text (str): Raw cell text, uninterpreted by the tokenizer beyond unquoting.

    Returns:
        Value: First match of bool, u64, i64, float; otherwise the string verbatim.

    Notes:
        Total and deterministic: every string maps to exactly one kind.
    """
    b = parse_bool(text)
    if b is not None:
        return Value.bool_(b)
    u = parse_u64(text)
    if u is not None:
        return Value.u64(u)
    i = parse_i64(text)
    if i is not None:
        return Value.i64(i)
    f = parse_f64(text)
    if f is not None:
        return Value.float_(f)
    return Value.string(text)
