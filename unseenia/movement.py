"""Velocity-based movement with acceleration, deceleration and a speed cap."""

from __future__ import annotations

from enum import IntEnum

from unseenia.geometry import Sprite, Vector2


class MovementState(IntEnum):
    IDLE = 0
    MOVING = 1
    MOVING_LEFT = 2
    MOVING_RIGHT = 3
    MOVING_UP = 4
    MOVING_DOWN = 5


def _settle(value: float, limit: float, decel: float) -> float:
    """Clamp one velocity axis to the limit and slow it towards zero."""
    if value > 0.0:
        value = min(value, limit) - decel
        return max(value, 0.0)
    if value < 0.0:
        value = max(value, -limit) + decel
        return min(value, 0.0)
    return value


class MovementComponent:
    """Moves a sprite by a velocity that accelerates and decays over time."""

    def __init__(
        self,
        sprite: Sprite,
        velocity_max: float,
        acceleration: float,
        deceleration: float,
    ) -> None:
        self.sprite = sprite
        self.velocity_max = velocity_max
        self.acceleration = acceleration
        self.deceleration = deceleration
        self.velocity = Vector2()

    def get_state(self, state: int) -> bool:
        """True if the current velocity matches the given movement state."""
        try:
            state = MovementState(state)
        except ValueError:
            return False
        vx, vy = self.velocity.x, self.velocity.y
        checks = {
            MovementState.IDLE: vx == 0.0 and vy == 0.0,
            MovementState.MOVING: vx != 0.0 or vy != 0.0,
            MovementState.MOVING_LEFT: vx < 0.0,
            MovementState.MOVING_RIGHT: vx > 0.0,
            MovementState.MOVING_UP: vy < 0.0,
            MovementState.MOVING_DOWN: vy > 0.0,
        }
        return checks[state]

    def stop_velocity(self) -> None:
        self.velocity = Vector2()

    def stop_velocity_x(self) -> None:
        self.velocity.x = 0.0

    def stop_velocity_y(self) -> None:
        self.velocity.y = 0.0

    def move(self, dir_x: float, dir_y: float, dt: float) -> None:
        """Accelerate in the given direction."""
        self.velocity.x += self.acceleration * dir_x * dt
        self.velocity.y += self.acceleration * dir_y * dt

    def update(self, dt: float) -> None:
        """Cap and decay the velocity, then move the sprite by it."""
        decel = self.deceleration * dt
        self.velocity.x = _settle(self.velocity.x, self.velocity_max, decel)
        self.velocity.y = _settle(self.velocity.y, self.velocity_max, decel)
        self.sprite.move(self.velocity.x * dt, self.velocity.y * dt)