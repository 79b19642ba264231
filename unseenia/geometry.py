"""Plain 2D geometry: vectors, axis-aligned rectangles and positioned sprites."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Vector2:
    """A mutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def position(self) -> Vector2:
        return Vector2(self.left, self.top)

    @property
    def size(self) -> Vector2:
        return Vector2(self.width, self.height)

    def _span(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y), allowing negative sizes."""
        return (
            min(self.left, self.right),
            min(self.top, self.bottom),
            max(self.left, self.right),
            max(self.top, self.bottom),
        )

    def intersects(self, other: Rect) -> bool:
        """True if the two rectangles overlap with a non-empty area."""
        a_left, a_top, a_right, a_bottom = self._span()
        b_left, b_top, b_right, b_bottom = other._span()
        return max(a_left, b_left) < min(a_right, b_right) and max(
            a_top, b_top
        ) < min(a_bottom, b_bottom)

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        min_x, min_y, max_x, max_y = self._span()
        return min_x <= x < max_x and min_y <= y < max_y


@dataclass
class Sprite:
    """A textured rectangle placed in the world.

    The drawn area is the texture rectangle, shifted by the origin, rotated by
    ``rotation`` degrees and moved to ``position``.
    """

    position: Vector2 = field(default_factory=Vector2)
    texture_rect: Rect = field(default_factory=Rect)
    origin: Vector2 = field(default_factory=Vector2)
    rotation: float = 0.0
    texture: object = None

    def move(self, dx: float, dy: float) -> None:
        self.position = Vector2(self.position.x + dx, self.position.y + dy)

    def set_position(self, x: float, y: float) -> None:
        self.position = Vector2(x, y)

    def local_bounds(self) -> Rect:
        return Rect(0.0, 0.0, abs(self.texture_rect.width), abs(self.texture_rect.height))

    def global_bounds(self) -> Rect:
        """Bounding box of the sprite in world coordinates."""
        local = self.local_bounds()
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        corners = [
            (0.0, 0.0),
            (local.width, 0.0),
            (0.0, local.height),
            (local.width, local.height),
        ]
        xs, ys = [], []
        for cx, cy in corners:
            px, py = cx - self.origin.x, cy - self.origin.y
            xs.append(self.position.x + px * cos_a - py * sin_a)
            ys.append(self.position.y + px * sin_a + py * cos_a)
        left, top = min(xs), min(ys)
        return Rect(left, top, max(xs) - left, max(ys) - top)