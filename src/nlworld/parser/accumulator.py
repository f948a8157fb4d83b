"""
Growing world state for a single parse.

Each parse owns one WorldAccumulator; nothing is shared across parses. The accumulator
does not check uniqueness or cross-section references, it only keeps rows in file order.
"""

from __future__ import annotations

from nlworld.core.schema import (
    GlobalsRecord,
    LinkRecord,
    PatchRecord,
    TurtleRecord,
    WorldSnapshot,
)

__all__ = ["WorldAccumulator"]


class WorldAccumulator:
    """Per-section sinks feeding a WorldSnapshot."""

    def __init__(self) -> None:
        self.random_state: list[int] = []
        self.globals = GlobalsRecord()
        self.output: list[str] = []
        self.turtles: list[TurtleRecord] = []
        self.patches: list[PatchRecord] = []
        self.links: list[LinkRecord] = []

    def set_globals(self, record: GlobalsRecord) -> None:
        # Last write wins when a file carries more than one GLOBALS row.
        self.globals = record

    def set_random_state(self, values: list[int]) -> None:
        self.random_state = list(values)

    def push_turtle(self, record: TurtleRecord) -> None:
        self.turtles.append(record)

    def push_patch(self, record: PatchRecord) -> None:
        self.patches.append(record)

    def push_link(self, record: LinkRecord) -> None:
        self.links.append(record)

    def extend_output(self, lines: list[str]) -> None:
        self.output.extend(lines)

    def finish(self) -> WorldSnapshot:
        """Hand the accumulated rows over as a snapshot owned by the caller."""
        return WorldSnapshot(
            random_state=self.random_state,
            globals=self.globals,
            output=self.output,
            turtles=self.turtles,
            patches=self.patches,
            links=self.links,
        )
