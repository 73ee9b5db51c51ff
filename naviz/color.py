"""RGBA colors with alpha compositing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def _to_channel(value: float) -> int:
    """Convert a float into a channel value, saturating at the bounds."""
    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(value)


@dataclass(frozen=True)
class Color:
    """A color made of ``r``, ``g``, ``b`` and ``a`` channels in ``0..=255``."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for channel in self:
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"color channel out of range: {channel!r}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))

    def __getitem__(self, index: int) -> int:
        return (self.r, self.g, self.b, self.a)[index]

    def __len__(self) -> int:
        return 4

    def over(self, base: Color) -> Color:
        """Composite this color over ``base``."""
        inverse = 255 - self.a
        alpha = self.a + base.a * inverse // 255
        if alpha == 0:
            return Color(0, 0, 0, 0)

        def mix(top: int, bottom: int) -> int:
            return ((top * self.a + bottom * base.a * inverse // 255) // alpha) & 0xFF

        return Color(
            mix(self.r, base.r),
            mix(self.g, base.g),
            mix(self.b, base.b),
            alpha & 0xFF,
        )

    def __mul__(self, factor: float) -> Color:
        return Color(*(_to_channel(channel * factor) for channel in self))

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(min(a + b, 255) for a, b in zip(self, other)))