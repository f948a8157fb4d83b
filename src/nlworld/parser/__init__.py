"""
nlworld.parser — Section-aware streaming parser for NetLogo world exports.

## Responsibilities
- Tokenize a stream with the stdlib csv reader (flexible rows).
- Classify boundary rows, cache per-section headers, bind data rows through
  nlworld.core.tables descriptors, and accumulate a WorldSnapshot.

## Public API
- parse(stream, settings=None): binary or text stream.
- parse_str(text, settings=None): in-memory text.
- parse_rows(rows, settings=None): already-tokenized rows.
- ParserSettings: options (unknown-section policy, encoding, quoting, blank rows).
- SectionParser: the state machine, for incremental feeding.

## Import DAG discipline
- Depends only on stdlib and nlworld.core.*; MUST NOT import nlworld.io or the CLI.

## Notes
- Single pass, single thread, file order; each call owns its own state.
- The first structural error aborts the parse (see nlworld.core.errors).
"""

from __future__ import annotations

from .config import ParserSettings
from .driver import SectionParser, parse_rows
from .stream import iter_rows, parse, parse_str

__all__ = [
    "ParserSettings",
    "SectionParser",
    "iter_rows",
    "parse",
    "parse_rows",
    "parse_str",
]
