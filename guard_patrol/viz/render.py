"""Text and matplotlib rendering of a patrol trail on its grid."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from guard_patrol.config.constants import (
    EMPTY_GLYPH,
    LOOP_GLYPH,
    OBSTACLE_GLYPH,
    VISITED_GLYPH,
)
from guard_patrol.domain.grid import Grid, Position
from guard_patrol.domain.heading import Heading
from guard_patrol.simulation.tracer import PatrolTrace

# Cell codes used in the numeric grid array
EMPTY_CELL = 0
OBSTACLE_CELL = 1
VISITED_CELL = 2
LOOP_CELL = 3
START_CELL = 4

CELL_COLORS: tuple[str, ...] = ("#F0F0F0", "#37474F", "#90CAF9", "#FF5722", "#4CAF50")
CELL_LABELS: tuple[str, ...] = ("Empty", "Obstacle", "Visited", "Loop obstruction", "Start")
GRID_LINE_COLOR = "#CCCCCC"


def render_text_map(
    grid: Grid,
    trace: PatrolTrace,
    start: tuple[Position, Heading] | None = None,
    loop_positions: Iterable[Position] = (),
) -> str:
    """Return the map as text with the trail and loop obstructions marked.

    Precedence per cell: obstacle, start glyph, loop obstruction, visited, empty.
    """
    loops = frozenset(loop_positions)
    lines: list[str] = []
    for y in range(grid.height):
        chars: list[str] = []
        for x in range(grid.width):
            position = Position(x, y)
            if grid.is_obstacle(position):
                chars.append(OBSTACLE_GLYPH)
            elif start is not None and position == start[0]:
                chars.append(start[1].value)
            elif position in loops:
                chars.append(LOOP_GLYPH)
            elif position in trace.visited:
                chars.append(VISITED_GLYPH)
            else:
                chars.append(EMPTY_GLYPH)
        lines.append("".join(chars))
    return "\n".join(lines)


def build_cell_array(
    grid: Grid,
    trace: PatrolTrace,
    start: Position | None = None,
    loop_positions: Iterable[Position] = (),
) -> np.ndarray:
    """Return (H, W) int array of cell codes, same precedence as the text map."""
    cells = np.full((grid.height, grid.width), EMPTY_CELL, dtype=int)
    for position in trace.visited:
        if grid.contains(position):
            cells[position.y, position.x] = VISITED_CELL
    for position in loop_positions:
        if grid.contains(position):
            cells[position.y, position.x] = LOOP_CELL
    if start is not None and grid.contains(start):
        cells[start.y, start.x] = START_CELL
    for position in grid.all_obstacles:
        cells[position.y, position.x] = OBSTACLE_CELL
    return cells


def _cell_cmap() -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap, one color per cell code."""
    cmap = ListedColormap(list(CELL_COLORS))
    bounds = [code - 0.5 for code in range(len(CELL_COLORS) + 1)]
    norm = BoundaryNorm(bounds, cmap.N)
    return cmap, norm


def render_patrol_figure(
    grid: Grid,
    trace: PatrolTrace,
    output_path: Path,
    start: Position | None = None,
    loop_positions: Iterable[Position] = (),
    title: str | None = None,
) -> Path:
    """Render the trail as a cell-fill image and save it to *output_path*."""
    cells = build_cell_array(grid, trace, start=start, loop_positions=loop_positions)
    cmap, norm = _cell_cmap()

    size = max(3.0, min(12.0, 0.3 * max(grid.width, grid.height)))
    fig, ax = plt.subplots(figsize=(size, size))
    try:
        ax.imshow(cells, cmap=cmap, norm=norm, origin="upper", aspect="equal")
        for x in range(grid.width + 1):
            ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
        for y in range(grid.height + 1):
            ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(title or f"{trace.outcome.value}: {trace.visited_count} cells visited")
        handles = [
            Patch(facecolor=color, edgecolor="gray", label=label)
            for color, label in zip(CELL_COLORS, CELL_LABELS, strict=True)
        ]
        ax.legend(handles=handles, loc="upper left", bbox_to_anchor=(1.01, 1.0), fontsize=8)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, bbox_inches="tight", dpi=120)
    finally:
        plt.close(fig)
    return output_path
