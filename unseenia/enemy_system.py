"""Creation of enemies by type."""

from __future__ import annotations

from enum import IntEnum
from typing import MutableMapping, MutableSequence

from unseenia.enemies import Enemy, Rat

_RAT_TEXTURE = "RAT1_SHEET"


class EnemyType(IntEnum):
    RAT = 0


class EnemySystem:
    """Creates enemies and adds them to a shared list of active enemies."""

    def __init__(
        self,
        active_enemies: MutableSequence[Enemy],
        textures: MutableMapping[str, object],
    ) -> None:
        self.active_enemies = active_enemies
        self.textures = textures

    def create_enemy(self, enemy_type: int, x: float, y: float) -> Enemy:
        """Create an enemy of the given type at (x, y) and make it active."""
        if enemy_type == EnemyType.RAT:
            enemy: Enemy = Rat(x, y, self.textures.get(_RAT_TEXTURE))
        else:
            raise ValueError(f"enemy type does not exist: {enemy_type}")
        self.active_enemies.append(enemy)
        return enemy

    def update(self, dt: float) -> None:
        """Advance the system; active enemies are updated by their owner."""