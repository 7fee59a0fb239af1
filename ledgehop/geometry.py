"""ledgehop/geometry.py — Axis-aligned rectangles for proximity queries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in world units. Edges are inclusive."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )


def engagement_rect(
    x: float, y: float, half_width: float, half_height: float
) -> Rect:
    """Rectangle centred on (x, y) extending half_width/half_height each way."""
    return Rect(x - half_width, y - half_height, 2 * half_width, 2 * half_height)
