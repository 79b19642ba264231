"""Items the player can carry: weapons and the inventory that holds them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Iterator

from unseenia.geometry import Rect, Sprite, Vector2


class Item:
    """Base class of everything that can be carried."""


class MeleeWeapon(Item, ABC):
    """A weapon drawn as a sprite next to its wielder."""

    def __init__(self, texture: object = None, width: float = 0.0, height: float = 0.0) -> None:
        self.weapon_texture = texture
        self.weapon_sprite = Sprite(texture_rect=Rect(0.0, 0.0, width, height), texture=texture)
        self.damage_min = 0
        self.damage_max = 0

    @abstractmethod
    def update(self, mouse_pos_view: Vector2, center: Vector2) -> None:
        """Follow the wielder and aim at the mouse."""


class Sword(MeleeWeapon):
    """A sword held at the wielder's centre and pointed at the mouse."""

    def __init__(self, texture: object = None, width: float = 0.0, height: float = 0.0) -> None:
        super().__init__(texture, width, height)
        bounds = self.weapon_sprite.global_bounds()
        self.weapon_sprite.origin = Vector2(bounds.width / 2.0, bounds.height)

    def update(self, mouse_pos_view: Vector2, center: Vector2) -> None:
        """Place the sword at ``center`` and rotate its tip towards the mouse."""
        self.weapon_sprite.set_position(center.x, center.y)
        dx = mouse_pos_view.x - self.weapon_sprite.position.x
        dy = mouse_pos_view.y - self.weapon_sprite.position.y
        degrees = math.degrees(math.atan2(dy, dx))
        self.weapon_sprite.rotation = degrees + 90.0


class RangedWeapon(Item):
    """A weapon that fires from a distance."""


class Bow(RangedWeapon):
    """A bow."""


class Inventory:
    """An ordered collection of items that grows as needed."""

    INITIAL_CAPACITY = 10

    def __init__(self) -> None:
        self._items: list[Item] = []
        self.capacity = self.INITIAL_CAPACITY

    def add(self, item: Item) -> None:
        """Append an item, doubling the capacity when it is full."""
        if len(self._items) >= self.capacity:
            self.capacity *= 2
        self._items.append(item)

    def remove(self, index: int) -> Item:
        """Remove and return the item at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"no item at index {index}")
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]