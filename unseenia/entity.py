"""Base game entity: a sprite with optional pluggable components."""

from __future__ import annotations

from abc import ABC, abstractmethod

from unseenia.animation import AnimationComponent
from unseenia.attributes import AttributeComponent
from unseenia.geometry import Rect, Sprite, Vector2
from unseenia.hitbox import HitboxComponent
from unseenia.movement import MovementComponent, MovementState
from unseenia.skills import SkillComponent, SkillType


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Entity(ABC):
    """Something in the world with a sprite and optional components."""

    def __init__(self) -> None:
        self.sprite = Sprite()
        self.hitbox: HitboxComponent | None = None
        self.movement: MovementComponent | None = None
        self.animation: AnimationComponent | None = None
        self.attributes: AttributeComponent | None = None
        self.skills: SkillComponent | None = None

    def create_hitbox_component(
        self, offset_x: float, offset_y: float, width: float, height: float
    ) -> None:
        self.hitbox = HitboxComponent(self.sprite, offset_x, offset_y, width, height)

    def create_movement_component(
        self, velocity_max: float, acceleration: float, deceleration: float
    ) -> None:
        self.movement = MovementComponent(self.sprite, velocity_max, acceleration, deceleration)

    def create_animation_component(self, texture_sheet: object) -> None:
        self.animation = AnimationComponent(self.sprite, texture_sheet)

    def create_attribute_component(self, level: int) -> None:
        self.attributes = AttributeComponent(level)

    def create_skill_component(self) -> None:
        self.skills = SkillComponent()

    @property
    def position(self) -> Vector2:
        """Top-left of the hitbox if there is one, else of the sprite."""
        if self.hitbox is not None:
            return self.hitbox.position
        return Vector2(self.sprite.position.x, self.sprite.position.y)

    def center(self) -> Vector2:
        bounds = self.global_bounds()
        return self.position + Vector2(bounds.width / 2.0, bounds.height / 2.0)

    def grid_position(self, grid_size: int) -> tuple[int, int]:
        """Grid cell of the entity's position."""
        grid = int(grid_size)
        if grid == 0:
            raise ValueError("grid_size must not be zero")
        position = self.position
        return _trunc_div(int(position.x), grid), _trunc_div(int(position.y), grid)

    def global_bounds(self) -> Rect:
        if self.hitbox is not None:
            return self.hitbox.global_bounds()
        return self.sprite.global_bounds()

    def next_position_bounds(self, dt: float) -> Rect:
        """Bounds after one step at the current velocity, or a -1 rectangle."""
        if self.hitbox is not None and self.movement is not None:
            return self.hitbox.next_position(self.movement.velocity * dt)
        return Rect(-1.0, -1.0, -1.0, -1.0)

    def set_position(self, x: float, y: float) -> None:
        if self.hitbox is not None:
            self.hitbox.set_position(x, y)
        else:
            self.sprite.set_position(x, y)

    def move(self, dir_x: float, dir_y: float, dt: float) -> None:
        """Accelerate in a direction; moving trains endurance."""
        if self.movement is not None:
            self.movement.move(dir_x, dir_y, dt)
        if self.skills is not None:
            self.skills.gain_exp(SkillType.ENDURANCE, 1)

    def stop_velocity(self) -> None:
        if self.movement is not None:
            self.movement.stop_velocity()

    def stop_velocity_x(self) -> None:
        if self.movement is not None:
            self.movement.stop_velocity_x()

    def stop_velocity_y(self) -> None:
        if self.movement is not None:
            self.movement.stop_velocity_y()

    def _animate_movement(self, dt: float) -> None:
        """Play the idle or walking animation that matches the velocity."""
        movement, animation = self.movement, self.animation
        if movement is None or animation is None:
            return
        velocity, top = movement.velocity, movement.velocity_max
        if movement.get_state(MovementState.IDLE):
            animation.play("IDLE", dt)
        elif movement.get_state(MovementState.MOVING_LEFT):
            animation.play_modified("WALK_LEFT", dt, velocity.x, top)
        elif movement.get_state(MovementState.MOVING_RIGHT):
            animation.play_modified("WALK_RIGHT", dt, velocity.x, top)
        elif movement.get_state(MovementState.MOVING_UP):
            animation.play_modified("WALK_UP", dt, velocity.y, top)
        elif movement.get_state(MovementState.MOVING_DOWN):
            animation.play_modified("WALK_DOWN", dt, velocity.y, top)

    @abstractmethod
    def update(self, dt: float, mouse_pos_view: Vector2) -> None:
        """Advance the entity by ``dt`` seconds."""