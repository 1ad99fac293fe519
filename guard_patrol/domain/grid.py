"""Immutable rectangular grid with an obstacle set.

A grid with one extra obstacle is a new value that shares the base
obstacle frozenset and carries the extra cells in a small overlay, so the
obstruction search can build thousands of hypothetical grids without
copying the base set.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from guard_patrol.config.constants import NUM_HEADINGS
from guard_patrol.domain.heading import Heading


@dataclass(frozen=True, order=True)
class Position:
    """A cell coordinate; x is the column, y is the row."""

    x: int
    y: int

    def neighbor(self, heading: Heading) -> Position | None:
        """Return the adjacent cell in *heading*, or None below coordinate zero."""
        dx, dy = heading.delta
        nx_, ny_ = self.x + dx, self.y + dy
        if nx_ < 0 or ny_ < 0:
            return None
        return Position(nx_, ny_)


@dataclass(frozen=True, eq=False)
class Grid:
    """Bounded grid: width x height cells plus obstacles.

    ``obstacles`` is the shared base set, ``added`` the overlay produced by
    :meth:`with_obstacle`. Use :meth:`create` to build a validated grid.
    """

    width: int
    height: int
    obstacles: frozenset[Position]
    added: frozenset[Position] = frozenset()

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be >= 1")
        for position in self.added:
            if not self.contains(position):
                raise ValueError(f"obstacle {position} lies outside the grid")

    @classmethod
    def create(cls, width: int, height: int, obstacles: Iterable[Position] = ()) -> Grid:
        """Build a grid after checking every obstacle lies within bounds."""
        obstacle_set = frozenset(obstacles)
        grid = cls(width=width, height=height, obstacles=obstacle_set)
        for position in obstacle_set:
            if not grid.contains(position):
                raise ValueError(f"obstacle {position} lies outside the grid")
        return grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height, self.all_obstacles) == (
            other.width,
            other.height,
            other.all_obstacles,
        )

    def __hash__(self) -> int:
        return hash((self.width, self.height, self.all_obstacles))

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def is_obstacle(self, position: Position) -> bool:
        return position in self.obstacles or position in self.added

    def with_obstacle(self, position: Position) -> Grid:
        """Return a new grid equal to this one plus an obstacle at *position*."""
        if not self.contains(position):
            raise ValueError(f"obstacle {position} lies outside the grid")
        return Grid(
            width=self.width,
            height=self.height,
            obstacles=self.obstacles,
            added=self.added | {position},
        )

    @property
    def all_obstacles(self) -> frozenset[Position]:
        return self.obstacles | self.added

    @property
    def step_bound(self) -> int:
        """Number of distinct (position, heading) states; no run can move more often."""
        return NUM_HEADINGS * self.width * self.height

    def cells(self) -> Iterator[Position]:
        """Yield every cell in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)
