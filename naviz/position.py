"""Two-dimensional positions used by the animation timelines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point with an ``x`` and a ``y`` coordinate.

    Any real number (including :class:`fractions.Fraction`) is accepted
    and stored as a float.
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __mul__(self, factor: float) -> Position:
        return Position(self.x * factor, self.y * factor)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def as_tuple(self) -> tuple[float, float]:
        """Return the coordinates as an ``(x, y)`` pair."""
        return (self.x, self.y)