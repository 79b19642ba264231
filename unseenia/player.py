"""The player character."""

from __future__ import annotations

from unseenia.entity import Entity
from unseenia.geometry import Vector2
from unseenia.items import Sword

_HITBOX = (12.0, 10.0, 40.0, 54.0)
_MOVEMENT = (200.0, 1600.0, 1000.0)
_FRAME_SIZE = 64

_ANIMATIONS = {
    "IDLE": (15.0, 0, 0, 8, 0),
    "WALK_DOWN": (11.0, 0, 1, 3, 1),
    "WALK_LEFT": (11.0, 4, 1, 7, 1),
    "WALK_RIGHT": (11.0, 8, 1, 11, 1),
    "WALK_UP": (11.0, 12, 1, 15, 1),
    "ATTACK": (5.0, 0, 2, 1, 2),
}


class Player(Entity):
    """The controllable hero, carrying a sword."""

    def __init__(self, x: float, y: float, texture_sheet: object) -> None:
        super().__init__()
        self.attacking = False
        self.sword = Sword()

        self.create_hitbox_component(*_HITBOX)
        self.create_movement_component(*_MOVEMENT)
        self.create_animation_component(texture_sheet)
        self.create_attribute_component(1)
        self.create_skill_component()

        self.set_position(x, y)
        for key, (timer, sx, sy, fx, fy) in _ANIMATIONS.items():
            self.animation.add_animation(key, timer, sx, sy, fx, fy, _FRAME_SIZE, _FRAME_SIZE)

    def lose_hp(self, hp: int) -> None:
        self.attributes.lose_hp(hp)

    def gain_hp(self, hp: int) -> None:
        self.attributes.gain_hp(hp)

    def lose_exp(self, exp: int) -> None:
        self.attributes.lose_exp(exp)

    def gain_exp(self, exp: int) -> None:
        self.attributes.gain_exp(exp)

    def update_attack(self, attack_pressed: bool) -> None:
        """Start attacking when the attack button is held."""
        if attack_pressed:
            self.attacking = True

    def update_animation(self, dt: float) -> None:
        self._animate_movement(dt)

    def update(self, dt: float, mouse_pos_view: Vector2) -> None:
        """Move, animate, refresh the hitbox and aim the sword at the mouse."""
        self.movement.update(dt)
        self.update_animation(dt)
        self.hitbox.update()
        self.sword.update(mouse_pos_view, self.center())