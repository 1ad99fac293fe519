"""Patrolling agent: position + heading state machine.

Each call to :meth:`Agent.step` evaluates at most one heading per
direction. The agent turns clockwise while the cell ahead is an obstacle,
leaves the grid when the cell ahead is outside it, and otherwise moves one
cell. An agent walled in on all four sides reports ``BLOCKED`` instead of
turning forever.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from guard_patrol.config.constants import NUM_HEADINGS
from guard_patrol.domain.grid import Grid, Position
from guard_patrol.domain.heading import Heading


class StepOutcome(Enum):
    """Result of one state-machine step."""

    MOVED = "moved"
    EXITED = "exited"
    BLOCKED = "blocked"


@dataclass
class Agent:
    """The single mutable entity of a run.

    ``start`` and ``start_heading`` never change; :meth:`fresh` uses them to
    hand each run its own copy.
    """

    position: Position
    heading: Heading
    start: Position
    start_heading: Heading

    @classmethod
    def spawn(cls, position: Position, heading: Heading = Heading.UP) -> Agent:
        """Create an agent whose start state is its current state."""
        return cls(position=position, heading=heading, start=position, start_heading=heading)

    def fresh(self) -> Agent:
        """Return an independent agent reset to the start state."""
        return Agent.spawn(self.start, self.start_heading)

    @property
    def state(self) -> tuple[Position, Heading]:
        return (self.position, self.heading)

    def step(self, grid: Grid) -> StepOutcome:
        """Advance one step on *grid*, turning clockwise past obstacles."""
        heading = self.heading
        for _ in range(NUM_HEADINGS):
            ahead = self.position.neighbor(heading)
            if ahead is None or not grid.contains(ahead):
                self.heading = heading
                return StepOutcome.EXITED
            if not grid.is_obstacle(ahead):
                self.heading = heading
                self.position = ahead
                return StepOutcome.MOVED
            heading = heading.turn_right()
        # four turns bring the heading back to where it started
        return StepOutcome.BLOCKED
