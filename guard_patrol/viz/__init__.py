"""Visualization layer: text map and matplotlib cell-fill rendering."""

from guard_patrol.viz.render import (
    build_cell_array,
    render_patrol_figure,
    render_text_map,
)

__all__ = [
    "build_cell_array",
    "render_patrol_figure",
    "render_text_map",
]
