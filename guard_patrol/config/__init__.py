"""Configuration layer: constants and typed config dataclasses."""

from guard_patrol.config.constants import (
    AGENT_GLYPH,
    DEFAULT_WORKERS,
    EMPTY_GLYPH,
    LOOP_GLYPH,
    MAP_GLYPHS,
    MAX_WORKERS,
    NUM_HEADINGS,
    OBSTACLE_GLYPH,
    VISITED_GLYPH,
)
from guard_patrol.config.types import CandidatePolicy, PatrolSummary, SearchConfig

__all__ = [
    "AGENT_GLYPH",
    "CandidatePolicy",
    "DEFAULT_WORKERS",
    "EMPTY_GLYPH",
    "LOOP_GLYPH",
    "MAP_GLYPHS",
    "MAX_WORKERS",
    "NUM_HEADINGS",
    "OBSTACLE_GLYPH",
    "PatrolSummary",
    "SearchConfig",
    "VISITED_GLYPH",
]
