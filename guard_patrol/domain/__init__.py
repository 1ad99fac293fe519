"""Domain layer: grid model, headings, and the agent state machine."""

from guard_patrol.domain.agent import Agent, StepOutcome
from guard_patrol.domain.errors import MapParseError, PatrolConfigError
from guard_patrol.domain.grid import Grid, Position
from guard_patrol.domain.heading import Heading

__all__ = [
    "Agent",
    "Grid",
    "Heading",
    "MapParseError",
    "PatrolConfigError",
    "Position",
    "StepOutcome",
]
