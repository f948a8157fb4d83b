"""
Core package aggregator for nlworld contracts (grammar, values, schemas, descriptors, errors).

## Contracts (single source of truth)
- Grammar: Section enum with the exact wire tokens, header policy, RecordDescriptor.
- Value: tagged scalar for custom columns and the coercion that infers it.
- Schemas: pydantic records (globals, turtles, patches, links) and WorldSnapshot.
- Tables: one RecordDescriptor per schema-bound section.
- Errors: SchemaError/ValueTypeError and the WorldParseError hierarchy.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/stream IO.
- Wire names are kept verbatim (hyphenated columns, the "EXTENSTIONS" token).

## Downstream usage
- nlworld.parser: classifies rows, binds them through `tables` descriptors into `schema` records.
- nlworld.io: materializes snapshots as polars frames and files.

## Examples
```python
from nlworld.core.grammar import Section, section_from_token
from nlworld.core.value import coerce_value, ValueKind

section_from_token("GLOBALS") is Section.GLOBALS  # True
coerce_value("6").kind is ValueKind.U64  # True
```
"""
