"""Map text parsing.

A map is a block of equal-width lines made of ``^`` (the agent, facing
up), ``.`` (empty) and ``#`` (obstacle). Exactly one agent marker is
required.
"""

from __future__ import annotations

from pathlib import Path

from guard_patrol.config.constants import AGENT_GLYPH, EMPTY_GLYPH, OBSTACLE_GLYPH
from guard_patrol.domain.agent import Agent
from guard_patrol.domain.errors import MapParseError
from guard_patrol.domain.grid import Grid, Position
from guard_patrol.domain.heading import Heading


def _map_lines(text: str) -> list[str]:
    """Split *text* into lines, dropping trailing blank lines."""
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def parse_map(text: str) -> tuple[Grid, Agent]:
    """Parse map text into a validated grid and the agent at its start."""
    lines = _map_lines(text)
    if not lines:
        raise MapParseError("map is empty")

    width = len(lines[0])
    if width == 0:
        raise MapParseError("map lines must not be empty")

    obstacles: set[Position] = set()
    agent_positions: list[Position] = []
    for y, line in enumerate(lines):
        if len(line) != width:
            raise MapParseError(
                f"line {y} has width {len(line)}, expected {width}", y=y
            )
        for x, char in enumerate(line):
            if char == OBSTACLE_GLYPH:
                obstacles.add(Position(x, y))
            elif char == AGENT_GLYPH:
                agent_positions.append(Position(x, y))
            elif char != EMPTY_GLYPH:
                raise MapParseError(
                    f"invalid map character {char!r} at x={x}, y={y}", char=char, x=x, y=y
                )

    if not agent_positions:
        raise MapParseError(f"map has no agent marker {AGENT_GLYPH!r}")
    if len(agent_positions) > 1:
        where = ", ".join(f"({p.x}, {p.y})" for p in agent_positions)
        raise MapParseError(f"map has {len(agent_positions)} agent markers: {where}")

    grid = Grid.create(width=width, height=len(lines), obstacles=obstacles)
    return grid, Agent.spawn(agent_positions[0], Heading.UP)


def load_map(path: Path) -> tuple[Grid, Agent]:
    """Read and parse a map file."""
    return parse_map(Path(path).read_text(encoding="utf-8"))
