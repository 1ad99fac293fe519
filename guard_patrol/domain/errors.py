"""Exception types for invalid patrol setups and malformed map input."""

from __future__ import annotations


class PatrolConfigError(ValueError):
    """Raised when a map or agent setup cannot be simulated."""


class MapParseError(PatrolConfigError):
    """Raised for malformed map text.

    ``char``, ``x`` and ``y`` identify the offending character when the
    error is tied to a single cell; otherwise they are ``None``.
    """

    def __init__(
        self,
        message: str,
        char: str | None = None,
        x: int | None = None,
        y: int | None = None,
    ) -> None:
        super().__init__(message)
        self.char = char
        self.x = x
        self.y = y
