"""
Frozen record descriptors for the schema-bound sections of a world export.

Notes:
    - Descriptors declare fixed wire column names and their scalar types plus the
      fixed columns a header must carry.
    - The record binder is driven entirely by these descriptors; sections without
      fixed fields bind every column as a custom value.
    - RANDOM_STATE is header-bearing but not a record; it binds to a list of i64.
"""

from __future__ import annotations

from ..grammar import RecordDescriptor, Section
from .links import LINKS_DESC
from .patches import PATCHES_DESC
from .turtles import TURTLES_DESC
from .world_globals import GLOBALS_DESC

__all__ = [
    "RecordDescriptor",
    "GLOBALS_DESC",
    "TURTLES_DESC",
    "PATCHES_DESC",
    "LINKS_DESC",
    "get_descriptor",
    "list_descriptors",
]


# Registry
_DESCRIPTORS: dict[Section, RecordDescriptor] = {
    GLOBALS_DESC.section: GLOBALS_DESC,
    TURTLES_DESC.section: TURTLES_DESC,
    PATCHES_DESC.section: PATCHES_DESC,
    LINKS_DESC.section: LINKS_DESC,
}


def get_descriptor(section: Section) -> RecordDescriptor:
    """
    Look up the record descriptor for a section.

    Args:
        section (Section): A record-bearing section.

    Returns:
        RecordDescriptor: Descriptor for the requested section.

    Raises:
        KeyError: If the section does not bind to records.
    """
    return _DESCRIPTORS[section]


def list_descriptors() -> list[RecordDescriptor]:
    """Return all registered descriptors in registry order."""
    return list(_DESCRIPTORS.values())
