"""
Wire vocabulary of a NetLogo world export and helpers around it.

Defines the Section enum (whose values are the exact boundary tokens found on the wire),
the per-section header policy, the RecordDescriptor used to bind schema-bound sections,
and small zero-IO helpers for token and column-name handling.

Design principles
-----------------
1) Wire tokens are matched verbatim and case-sensitively:
   - Enum member names: UPPER_SNAKE, spelled correctly (``Section.EXTENSIONS``).
   - Enum values: the exact token written by the exporter, including the historical
     misspelling ``"EXTENSTIONS"``. Do not "fix" it; files in the wild carry it.

2) Column names stay verbatim:
   - Fixed columns are declared with their hyphenated wire names (``min-pxcor``).
   - Record attributes use ``kebab_to_snake`` of the wire name (``min_pxcor``).
   - Custom columns are stored under their wire name, untouched.

Header policy
-------------
| Section       | Header row after boundary | Rows bound to
|---------------|---------------------------|-----------------------------
| HEADER        | no                        | ignored
| RANDOM_STATE  | yes                       | list of i64
| GLOBALS       | yes                       | GlobalsRecord (last wins)
| TURTLES       | yes                       | TurtleRecord
| PATCHES       | yes                       | PatchRecord (custom only)
| LINKS         | yes                       | LinkRecord (custom only)
| OUTPUT        | no                        | output lines
| PLOTS         | no                        | ignored
| EXTENSIONS    | no                        | ignored

Examples
--------
>>> from nlworld.core.grammar import Section, section_from_token, kebab_to_snake
>>> section_from_token("TURTLES") is Section.TURTLES
True
>>> section_from_token("turtles") is None
True
>>> Section.EXTENSIONS.value
'EXTENSTIONS'
>>> kebab_to_snake("min-pxcor")
'min_pxcor'
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from .typing import ScalarType

__all__ = [
    "Section",
    "HEADERLESS_SECTIONS",
    "RecordDescriptor",
    "section_from_token",
    "is_section_like_token",
    "kebab_to_snake",
]


class Section(Enum):
    """
    Named blocks of a world export. Values are the boundary tokens on the wire.
    """

    HEADER = "HEADER"
    RANDOM_STATE = "RANDOM_STATE"
    GLOBALS = "GLOBALS"
    TURTLES = "TURTLES"
    PATCHES = "PATCHES"
    LINKS = "LINKS"
    OUTPUT = "OUTPUT"
    PLOTS = "PLOTS"
    EXTENSIONS = "EXTENSTIONS"

    @property
    def has_header(self) -> bool:
        """Whether the first row after this section's boundary is a header row."""
        return self not in HEADERLESS_SECTIONS


HEADERLESS_SECTIONS: Final[frozenset[Section]] = frozenset(
    {Section.HEADER, Section.OUTPUT, Section.PLOTS, Section.EXTENSIONS}
)

_TOKENS: Final[dict[str, Section]] = {s.value: s for s in Section}

# Shape of a boundary-looking token; used only by the "error" unknown-section policy.
_SECTION_LIKE_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Z][A-Z0-9_]*$")


@dataclass(frozen=True)
class RecordDescriptor:
    """
    Binding contract for one schema-bound section.

    Attributes:
        section (Section): Section whose data rows this descriptor binds.
        fields (dict[str, ScalarType]): Fixed wire column name -> declared scalar type,
            in declaration order. Empty for sections without fixed fields.
        required (list[str]): Fixed columns that the section header must contain.

    Notes:
        Columns outside ``fields`` are kept as custom values in header order.
    """

    section: Section
    fields: dict[str, ScalarType] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)

    def is_known(self, column: str) -> bool:
        return column in self.fields


def section_from_token(token: str) -> Section | None:
    """
    Resolve a boundary token to its Section.

    Args:
      token (str): Cell text, compared verbatim (case-sensitive, no trimming).

    Returns:
      Section | None: Matching section, or None when the text is not a known token.
    """
    return _TOKENS.get(token)


def is_section_like_token(token: str) -> bool:
    """
    Check whether text has the shape of a boundary token (UPPER_SNAKE).

    Examples:
      >>> is_section_like_token("DRAWING")
      True
      >>> is_section_like_token("Setup complete")
      False
    """
    return bool(_SECTION_LIKE_RE.match(token or ""))


def kebab_to_snake(name: str) -> str:
    """Map a hyphenated wire column name to a Python attribute name."""
    return name.replace("-", "_")
