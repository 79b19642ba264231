"""Hostile creatures."""

from __future__ import annotations

from abc import abstractmethod

from unseenia.entity import Entity
from unseenia.geometry import Vector2

_RAT_HITBOX = (13.0, 39.0, 30.0, 30.0)
_RAT_MOVEMENT = (50.0, 1600.0, 1000.0)
_RAT_FRAME_WIDTH = 60
_RAT_FRAME_HEIGHT = 64

_RAT_ANIMATIONS = {
    "IDLE": (25.0, 0, 0, 3, 0),
    "WALK_DOWN": (11.0, 0, 1, 3, 1),
    "WALK_LEFT": (11.0, 0, 2, 3, 2),
    "WALK_RIGHT": (11.0, 0, 3, 3, 3),
    "WALK_UP": (11.0, 0, 4, 3, 4),
    "ATTACK": (5.0, 0, 2, 1, 2),
}


class Enemy(Entity):
    """Base class of all enemies."""

    @abstractmethod
    def update_animation(self, dt: float) -> None:
        """Choose and advance the current animation."""


class Rat(Enemy):
    """A small, slow rat."""

    def __init__(self, x: float, y: float, texture_sheet: object) -> None:
        super().__init__()
        self.create_hitbox_component(*_RAT_HITBOX)
        self.create_movement_component(*_RAT_MOVEMENT)
        self.create_animation_component(texture_sheet)

        self.set_position(x, y)
        for key, (timer, sx, sy, fx, fy) in _RAT_ANIMATIONS.items():
            self.animation.add_animation(
                key, timer, sx, sy, fx, fy, _RAT_FRAME_WIDTH, _RAT_FRAME_HEIGHT
            )

    def update_animation(self, dt: float) -> None:
        self._animate_movement(dt)

    def update(self, dt: float, mouse_pos_view: Vector2) -> None:
        self.movement.update(dt)
        self.update_animation(dt)
        self.hitbox.update()