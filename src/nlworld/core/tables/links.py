"""Record descriptor for the 'LINKS' section (no fixed fields; all columns custom)."""

from __future__ import annotations

from ..grammar import RecordDescriptor, Section

LINKS_DESC = RecordDescriptor(section=Section.LINKS)
