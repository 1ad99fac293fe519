"""Patrol tracer: drive one agent to exit, loop, or blockage.

Every run works on ``agent.fresh()`` and its own visited/seen records, so
repeated or concurrent runs over the same grid never share mutable state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from guard_patrol.domain.agent import Agent, StepOutcome
from guard_patrol.domain.errors import PatrolConfigError
from guard_patrol.domain.grid import Grid, Position
from guard_patrol.domain.heading import Heading

logger = logging.getLogger(__name__)


class PatrolOutcome(Enum):
    """Terminal verdict of one patrol run."""

    EXITED = "exited"
    LOOP = "loop"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class PatrolTrace:
    """Trail of one run.

    ``visited`` maps each occupied cell to the heading held on first
    arrival, in first-visit order. ``steps`` counts successful moves.
    """

    outcome: PatrolOutcome
    visited: dict[Position, Heading]
    steps: int

    @property
    def visited_count(self) -> int:
        return len(self.visited)

    @property
    def is_loop(self) -> bool:
        return self.outcome is PatrolOutcome.LOOP

    def path(self) -> tuple[Position, ...]:
        """Visited cells in first-visit order."""
        return tuple(self.visited)


def validate_setup(grid: Grid, agent: Agent) -> None:
    """Fail fast when the agent cannot start a patrol on *grid*."""
    if not grid.contains(agent.start):
        raise PatrolConfigError(
            f"agent start {agent.start} lies outside the {grid.width}x{grid.height} grid"
        )
    if grid.is_obstacle(agent.start):
        raise PatrolConfigError(f"agent start {agent.start} is an obstacle")


def trace_patrol(grid: Grid, agent: Agent) -> PatrolTrace:
    """Run a fresh copy of *agent* on *grid* until it exits, loops, or is blocked.

    A loop is declared as soon as the agent re-enters a (position, heading)
    state it has held before: the state machine is deterministic, so the
    rest of the trajectory would repeat forever.
    """
    validate_setup(grid, agent)
    runner = agent.fresh()
    visited: dict[Position, Heading] = {runner.position: runner.heading}
    seen: set[tuple[Position, Heading]] = {runner.state}
    steps = 0
    bound = grid.step_bound

    while True:
        step_outcome = runner.step(grid)
        if step_outcome is StepOutcome.EXITED:
            outcome = PatrolOutcome.EXITED
            break
        if step_outcome is StepOutcome.BLOCKED:
            outcome = PatrolOutcome.BLOCKED
            break
        steps += 1
        if steps > bound:
            raise RuntimeError(f"patrol exceeded {bound} moves without a verdict")
        state = runner.state
        if state in seen:
            outcome = PatrolOutcome.LOOP
            break
        seen.add(state)
        visited.setdefault(runner.position, runner.heading)

    logger.debug(
        "patrol from %s finished: outcome=%s steps=%d visited=%d",
        agent.start,
        outcome.value,
        steps,
        len(visited),
    )
    return PatrolTrace(outcome=outcome, visited=visited, steps=steps)
