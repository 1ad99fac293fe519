"""Agent headings and the clockwise turn rule."""

from __future__ import annotations

from enum import Enum


class Heading(Enum):
    """Facing direction of the agent. Values are the display glyphs."""

    UP = "^"
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"

    @classmethod
    def from_glyph(cls, glyph: str) -> Heading:
        try:
            return cls(glyph)
        except ValueError as exc:
            valid = ", ".join(h.value for h in cls)
            raise ValueError(f"heading glyph must be one of {valid}") from exc

    def turn_right(self) -> Heading:
        """Return the next heading clockwise: Up -> Right -> Down -> Left -> Up."""
        return _CLOCKWISE[self]

    @property
    def delta(self) -> tuple[int, int]:
        """Return (dx, dy) for one step; y grows downward."""
        return _DELTAS[self]


_CLOCKWISE: dict[Heading, Heading] = {
    Heading.UP: Heading.RIGHT,
    Heading.RIGHT: Heading.DOWN,
    Heading.DOWN: Heading.LEFT,
    Heading.LEFT: Heading.UP,
}

_DELTAS: dict[Heading, tuple[int, int]] = {
    Heading.UP: (0, -1),
    Heading.RIGHT: (1, 0),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
}
