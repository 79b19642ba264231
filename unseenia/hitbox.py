"""A collision box that follows a sprite at a fixed offset."""

from __future__ import annotations

from dataclasses import replace

from unseenia.geometry import Rect, Sprite, Vector2


class HitboxComponent:
    """Axis-aligned hitbox tied to a sprite's position plus an offset."""

    def __init__(
        self,
        sprite: Sprite,
        offset_x: float,
        offset_y: float,
        width: float,
        height: float,
    ) -> None:
        self.sprite = sprite
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.width = width
        self.height = height
        self._next_position = Rect(0.0, 0.0, width, height)
        self._position = Vector2(
            sprite.position.x + offset_x, sprite.position.y + offset_y
        )

    @property
    def position(self) -> Vector2:
        return Vector2(self._position.x, self._position.y)

    def global_bounds(self) -> Rect:
        return Rect(self._position.x, self._position.y, self.width, self.height)

    def next_position(self, velocity: Vector2) -> Rect:
        """Bounds the hitbox would have after moving by ``velocity``."""
        self._next_position.left = self._position.x + velocity.x
        self._next_position.top = self._position.y + velocity.y
        return replace(self._next_position)

    def set_position(self, x: float, y: float) -> None:
        """Place the hitbox and move the sprite to match."""
        self._position = Vector2(x, y)
        self.sprite.set_position(x - self.offset_x, y - self.offset_y)

    def intersects(self, rect: Rect) -> bool:
        return self.global_bounds().intersects(rect)

    def update(self) -> None:
        """Follow the sprite."""
        self._position = Vector2(
            self.sprite.position.x + self.offset_x,
            self.sprite.position.y + self.offset_y,
        )