"""Map tiles: plain textured tiles and tiles that spawn enemies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from enum import IntEnum

from unseenia.geometry import Rect, Sprite, Vector2


class TileType(IntEnum):
    DEFAULT = 0
    DAMAGING = 1
    DOODAD = 2
    SPAWNER_ENEMY = 3


class Tile(ABC):
    """A grid-aligned piece of the map drawn from a texture sheet."""

    def __init__(
        self,
        tile_type: int,
        grid_x: int,
        grid_y: int,
        grid_size: float,
        texture: object,
        texture_rect: Rect,
        collision: bool,
    ) -> None:
        self.sprite = Sprite(
            position=Vector2(float(grid_x) * grid_size, float(grid_y) * grid_size),
            texture_rect=replace(texture_rect),
            texture=texture,
        )
        self.collision = collision
        self.tile_type = tile_type

    @property
    def position(self) -> Vector2:
        return Vector2(self.sprite.position.x, self.sprite.position.y)

    @property
    def texture_rect(self) -> Rect:
        return replace(self.sprite.texture_rect)

    def global_bounds(self) -> Rect:
        return self.sprite.global_bounds()

    def intersects(self, bounds: Rect) -> bool:
        return self.global_bounds().intersects(bounds)

    @abstractmethod
    def to_string(self) -> str:
        """The tile's fields as written to a map file."""

    def update(self) -> None:
        """Advance the tile; plain tiles have nothing to do."""


class RegularTile(Tile):
    """An ordinary tile that may block movement."""

    def __init__(
        self,
        tile_type: int,
        grid_x: int,
        grid_y: int,
        grid_size: float,
        texture: object,
        texture_rect: Rect,
        collision: bool = False,
    ) -> None:
        super().__init__(
            tile_type, grid_x, grid_y, grid_size, texture, texture_rect, collision
        )

    def to_string(self) -> str:
        rect = self.sprite.texture_rect
        return f"{int(self.tile_type)} {int(rect.left)} {int(rect.top)} {int(self.collision)}"


class EnemySpawnerTile(Tile):
    """A tile that spawns enemies of a given kind once the player is near."""

    def __init__(
        self,
        grid_x: int,
        grid_y: int,
        grid_size: float,
        texture: object,
        texture_rect: Rect,
        enemy_type: int,
        enemy_amount: int,
        enemy_time_to_spawn: int,
        enemy_max_distance: float,
    ) -> None:
        super().__init__(
            TileType.SPAWNER_ENEMY,
            grid_x,
            grid_y,
            grid_size,
            texture,
            texture_rect,
            False,
        )
        self.enemy_type = enemy_type
        self.enemy_amount = enemy_amount
        self.enemy_time_to_spawn = enemy_time_to_spawn
        self.enemy_max_distance = enemy_max_distance
        self.spawned = False

    def to_string(self) -> str:
        rect = self.sprite.texture_rect
        return (
            f"{int(self.tile_type)} {int(rect.left)} {int(rect.top)} "
            f"{self.enemy_type} {self.enemy_amount} {self.enemy_time_to_spawn} "
            f"{self.enemy_max_distance:g}"
        )