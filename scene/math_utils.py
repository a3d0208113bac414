"""Small math helpers shared by the scene state, systems and renderers.

Kept free of pygame so the state and update logic can be tested without a
display.
"""

from __future__ import annotations

import math
from typing import Iterator, Tuple


class Vector2:
    """A mutable 2D vector for entity positions and velocities."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def add_inplace(self, other: "Vector2") -> "Vector2":
        """Add another vector to this one in-place."""
        self.x += other.x
        self.y += other.y
        return self

    def update(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> "Vector2":
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    def as_int_tuple(self) -> Tuple[int, int]:
        """Pixel coordinates for pygame draw calls."""
        return (int(round(self.x)), int(round(self.y)))

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return low if value < low else high if value > high else value


def arc_position(progress: float, width: float, height: float,
                 span: float, horizon: float, peak: float) -> Tuple[float, float]:
    """Position along a horizon-to-horizon arc.

    The horizontal position moves linearly across ``span`` of the width,
    centred on the surface; the vertical position rises from the horizon
    line following a sine arc that peaks at progress 0.5.

    Args:
        progress: 0.0 (rising) to 1.0 (setting)
        width: Surface width
        height: Surface height
        span: Fraction of the width covered by the arc
        horizon: Horizon line as a fraction of the height
        peak: Peak rise as a fraction of the height

    Returns:
        (x, y) in surface coordinates
    """
    x = width * 0.5 + (progress - 0.5) * width * span
    y = height * horizon - math.sin(progress * math.pi) * height * peak
    return x, y


__all__ = ["Vector2", "clamp", "arc_position"]
