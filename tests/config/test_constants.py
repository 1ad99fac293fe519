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
from guard_patrol.domain.heading import Heading


def test_map_glyphs_are_distinct_single_characters() -> None:
    assert len(set(MAP_GLYPHS)) == len(MAP_GLYPHS)
    assert all(len(glyph) == 1 for glyph in MAP_GLYPHS)


def test_render_glyphs_do_not_collide_with_map_glyphs() -> None:
    assert VISITED_GLYPH not in MAP_GLYPHS
    assert LOOP_GLYPH not in MAP_GLYPHS
    assert VISITED_GLYPH != LOOP_GLYPH


def test_agent_glyph_matches_up_heading() -> None:
    assert AGENT_GLYPH == Heading.UP.value
    assert {EMPTY_GLYPH, OBSTACLE_GLYPH} <= set(MAP_GLYPHS)


def test_num_headings_matches_enum() -> None:
    assert NUM_HEADINGS == len(Heading)


def test_worker_limits_are_consistent() -> None:
    assert 1 <= DEFAULT_WORKERS <= MAX_WORKERS
