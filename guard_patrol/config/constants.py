"""Centralized domain constants for patrol simulations.

Map glyphs and worker limits shared by parsing, rendering, and search
modules are defined here.
"""

from __future__ import annotations

AGENT_GLYPH = "^"
"""Map glyph marking the agent's start cell (agent faces up)."""

EMPTY_GLYPH = "."
"""Map glyph for an empty cell."""

OBSTACLE_GLYPH = "#"
"""Map glyph for an obstacle cell."""

VISITED_GLYPH = "X"
"""Render glyph for a cell on the patrol trail."""

LOOP_GLYPH = "O"
"""Render glyph for a cell where a new obstacle induces a loop."""

MAP_GLYPHS: tuple[str, ...] = (AGENT_GLYPH, EMPTY_GLYPH, OBSTACLE_GLYPH)
"""Every glyph accepted in map input."""

NUM_HEADINGS = 4
"""Number of agent headings (Up, Right, Down, Left)."""

DEFAULT_WORKERS = 1
"""Default worker count for the obstruction search (1 = in-process)."""

MAX_WORKERS = 64
"""Upper bound on obstruction-search worker processes."""
