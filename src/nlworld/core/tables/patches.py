"""Record descriptor for the 'PATCHES' section (no fixed fields; all columns custom)."""

from __future__ import annotations

from ..grammar import RecordDescriptor, Section

PATCHES_DESC = RecordDescriptor(section=Section.PATCHES)
