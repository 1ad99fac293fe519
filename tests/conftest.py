from __future__ import annotations

from random import Random

import pytest

from guard_patrol.domain.agent import Agent
from guard_patrol.domain.grid import Grid, Position
from guard_patrol.io.parsing import parse_map

SAMPLE_MAP = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

SMALL_LOOP_MAP = """\
.#..
...#
#^..
..#.
"""

BOXED_MAP = """\
.#.
#^#
.#.
"""


@pytest.fixture
def sample_map() -> tuple[Grid, Agent]:
    return parse_map(SAMPLE_MAP)


@pytest.fixture
def small_loop_map() -> tuple[Grid, Agent]:
    return parse_map(SMALL_LOOP_MAP)


@pytest.fixture
def boxed_map() -> tuple[Grid, Agent]:
    return parse_map(BOXED_MAP)


def _random_map(
    seed: int, width: int = 8, height: int = 8, density: float = 0.2
) -> tuple[Grid, Agent]:
    """Seeded random grid with an agent on an empty cell."""
    rng = Random(seed)
    cells = [Position(x, y) for y in range(height) for x in range(width)]
    obstacles = {p for p in cells if rng.random() < density}
    free = [p for p in cells if p not in obstacles]
    if not free:
        free = [obstacles.pop()]
    start = rng.choice(free)
    return Grid.create(width, height, obstacles), Agent.spawn(start)


@pytest.fixture
def make_random_map():
    return _random_map
