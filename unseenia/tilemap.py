"""A layered grid of tiles with collision, enemy spawning and a text file format."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Sequence

from unseenia.enemy_system import EnemySystem, EnemyType
from unseenia.entity import Entity
from unseenia.geometry import Rect, Vector2
from unseenia.tiles import EnemySpawnerTile, RegularTile, Tile, TileType

_COLLISION_REACH = (1, 3)
_VIEW_REACH_X = (15, 16)
_VIEW_REACH_Y = (8, 9)


def _clamp(value: int, limit: int) -> int:
    if value < 0:
        return 0
    if value > limit:
        return limit
    return value


def _window(center: int, reach: tuple[int, int], limit: int) -> range:
    """Grid indices around ``center``, clipped to ``[0, limit)``."""
    before, after = reach
    return range(_clamp(center - before, limit), _clamp(center + after, limit))


def _empty_grid(width: int, height: int, layers: int) -> list[list[list[list[Tile]]]]:
    return [[[[] for _ in range(layers)] for _ in range(height)] for _ in range(width)]


class TileMap:
    """A ``width`` by ``height`` grid of cells, each holding stacks of tiles per layer."""

    def __init__(
        self, grid_size: float, width: int, height: int, texture_file: str
    ) -> None:
        self.grid_size = float(grid_size)
        self.grid_size_int = int(grid_size)
        self.max_size_grid = (width, height)
        self.max_size = Vector2(float(width) * self.grid_size, float(height) * self.grid_size)
        self.layers = 1
        self.texture_file = texture_file
        self.map = _empty_grid(width, height, self.layers)

    @classmethod
    def from_file(cls, path: str | Path) -> TileMap:
        """Create a map from a saved map file."""
        tile_map = cls(1.0, 0, 0, "")
        tile_map.load_from_file(path)
        return tile_map

    @property
    def tile_sheet(self) -> str:
        return self.texture_file

    def _in_bounds(self, x: int, y: int, z: int) -> bool:
        width, height = self.max_size_grid
        return 0 <= x < width and 0 <= y < height and 0 <= z < self.layers

    def tile_empty(self, x: int, y: int, z: int) -> bool:
        """True if the cell exists and holds no tiles."""
        if self._in_bounds(x, y, z):
            return not self.map[x][y][z]
        return False

    def layer_size(self, x: int, y: int, layer: int) -> int:
        """Number of tiles in the cell, or -1 if the cell does not exist."""
        if 0 <= x < len(self.map) and 0 <= y < len(self.map[x]):
            if 0 <= layer < len(self.map[x][y]):
                return len(self.map[x][y][layer])
        return -1

    def tiles_at(self, x: int, y: int, z: int) -> list[Tile]:
        """The tiles stacked in a cell, bottom first."""
        if not self._in_bounds(x, y, z):
            raise IndexError(f"no cell at ({x}, {y}, {z})")
        return list(self.map[x][y][z])

    def add_tile(
        self,
        x: int,
        y: int,
        z: int,
        texture_rect: Rect,
        collision: bool,
        tile_type: int,
    ) -> RegularTile | None:
        """Stack a regular tile on a cell; out-of-range cells are ignored."""
        if not self._in_bounds(x, y, z):
            return None
        tile = RegularTile(
            tile_type, x, y, self.grid_size, self.texture_file, texture_rect, collision
        )
        self.map[x][y][z].append(tile)
        return tile

    def add_spawner_tile(
        self,
        x: int,
        y: int,
        z: int,
        texture_rect: Rect,
        enemy_type: int,
        enemy_amount: int,
        enemy_time_to_spawn: int,
        enemy_max_distance: int,
    ) -> EnemySpawnerTile | None:
        """Stack an enemy spawner on a cell; out-of-range cells are ignored."""
        if not self._in_bounds(x, y, z):
            return None
        tile = EnemySpawnerTile(
            x,
            y,
            self.grid_size,
            self.texture_file,
            texture_rect,
            enemy_type,
            enemy_amount,
            enemy_time_to_spawn,
            enemy_max_distance,
        )
        self.map[x][y][z].append(tile)
        return tile

    def remove_tile(self, x: int, y: int, z: int, tile_type: int = -1) -> Tile | None:
        """Remove the top tile of a cell.

        With a non-negative ``tile_type`` the top tile is removed only if it is
        of that type. Returns the removed tile, if any.
        """
        if not self._in_bounds(x, y, z):
            return None
        stack = self.map[x][y][z]
        if not stack:
            return None
        if tile_type >= 0 and stack[-1].tile_type != tile_type:
            return None
        return stack.pop()

    def check_type(self, x: int, y: int, z: int, tile_type: int) -> bool:
        """True if the top tile of the cell is of the given type."""
        if not self._in_bounds(x, y, z) or not self.map[x][y][z]:
            raise IndexError(f"no tile at ({x}, {y}, {z})")
        return self.map[x][y][z][-1].tile_type == tile_type

    def _iter_tiles(self) -> Iterator[tuple[int, int, int, Tile]]:
        for x, column in enumerate(self.map):
            for y, cell in enumerate(column):
                for z, stack in enumerate(cell):
                    for tile in stack:
                        yield x, y, z, tile

    def save_to_file(self, path: str | Path) -> None:
        """Write the map header followed by every tile."""
        width, height = self.max_size_grid
        parts = [
            f"{width} {height}\n{self.grid_size:g}\n{self.layers}\n{self.texture_file}\n"
        ]
        parts.extend(f"{x} {y} {z} {tile.to_string()} " for x, y, z, tile in self._iter_tiles())
        Path(path).write_text("".join(parts), encoding="utf-8")

    def load_from_file(self, path: str | Path) -> None:
        """Replace the map with the contents of a saved map file."""
        tokens = Path(path).read_text(encoding="utf-8").split()
        if len(tokens) < 5:
            raise ValueError(f"map file {path} has an incomplete header")
        try:
            width, height, grid_size, layers = (int(t) for t in tokens[:4])
        except ValueError as exc:
            raise ValueError(f"map file {path} has a malformed header") from exc
        texture_file = tokens[4]

        grid = _empty_grid(width, height, layers)
        grid_size_f = float(grid_size)
        rest = iter(tokens[5:])

        def take(count: int) -> list[str] | None:
            chunk = [token for _, token in zip(range(count), rest)]
            return chunk if len(chunk) == count else None

        while (head := take(4)) is not None:
            x, y, z, kind = (int(t) for t in head)
            if not (0 <= x < width and 0 <= y < height and 0 <= z < layers):
                raise ValueError(f"tile at ({x}, {y}, {z}) lies outside the map")
            if kind == TileType.SPAWNER_ENEMY:
                fields = take(6)
                if fields is None:
                    break
                tr_x, tr_y, enemy_type, amount, tts = (int(t) for t in fields[:5])
                max_distance = int(float(fields[5]))
                tile: Tile = EnemySpawnerTile(
                    x,
                    y,
                    grid_size_f,
                    texture_file,
                    Rect(tr_x, tr_y, grid_size, grid_size),
                    enemy_type,
                    amount,
                    tts,
                    max_distance,
                )
            else:
                fields = take(3)
                if fields is None:
                    break
                tr_x, tr_y, collision = (int(t) for t in fields)
                tile = RegularTile(
                    kind,
                    x,
                    y,
                    grid_size_f,
                    texture_file,
                    Rect(tr_x, tr_y, grid_size, grid_size),
                    bool(collision),
                )
            grid[x][y][z].append(tile)

        self.grid_size = grid_size_f
        self.grid_size_int = grid_size
        self.max_size_grid = (width, height)
        self.max_size = Vector2(float(width * grid_size), float(height * grid_size))
        self.layers = layers
        self.texture_file = texture_file
        self.map = grid

    def update_world_bounds_collision(self, entity: Entity, dt: float) -> None:
        """Keep the entity inside the world, stopping it at the edges."""
        position = entity.position
        bounds = entity.global_bounds()
        if position.x < 0.0:
            entity.set_position(0.0, position.y)
            entity.stop_velocity_x()
        elif position.x + bounds.width > self.max_size.x:
            entity.set_position(self.max_size.x - bounds.width, position.y)
            entity.stop_velocity_x()

        position = entity.position
        bounds = entity.global_bounds()
        if position.y < 0.0:
            entity.set_position(position.x, 0.0)
            entity.stop_velocity_y()
        elif position.y + bounds.height > self.max_size.y:
            entity.set_position(position.x, self.max_size.y - bounds.height)
            entity.stop_velocity_y()

    def _layer_tiles(
        self, xs: range, ys: range, layer: int = 0
    ) -> Iterator[tuple[int, int, Tile]]:
        for x in xs:
            for y in ys:
                if layer < len(self.map[x][y]):
                    for tile in list(self.map[x][y][layer]):
                        yield x, y, tile

    def update_tile_collision(self, entity: Entity, dt: float) -> None:
        """Push the entity out of colliding tiles around it."""
        width, height = self.max_size_grid
        grid_x, grid_y = entity.grid_position(self.grid_size_int)
        xs = _window(grid_x, _COLLISION_REACH, width)
        ys = _window(grid_y, _COLLISION_REACH, height)

        for _, _, tile in self._layer_tiles(xs, ys):
            player = entity.global_bounds()
            wall = tile.global_bounds()
            next_bounds = entity.next_position_bounds(dt)
            if not (tile.collision and tile.intersects(next_bounds)):
                continue

            overlaps_x = player.left < wall.right and player.right > wall.left
            overlaps_y = player.top < wall.bottom and player.bottom > wall.top

            if player.top < wall.top and player.bottom < wall.bottom and overlaps_x:
                entity.stop_velocity_y()
                entity.set_position(player.left, wall.top - player.height)
            elif player.top > wall.top and player.bottom > wall.bottom and overlaps_x:
                entity.stop_velocity_y()
                entity.set_position(player.left, wall.bottom)

            if player.left < wall.left and player.right < wall.right and overlaps_y:
                entity.stop_velocity_x()
                entity.set_position(wall.left - player.width, player.top)
            elif player.left > wall.left and player.right > wall.right and overlaps_y:
                entity.stop_velocity_x()
                entity.set_position(wall.right, player.top)

    def update_tiles(self, entity: Entity, dt: float, enemy_system: EnemySystem) -> None:
        """Update tiles near the entity and fire spawners that have not spawned yet."""
        width, height = self.max_size_grid
        grid_x, grid_y = entity.grid_position(self.grid_size_int)
        xs = _window(grid_x, _VIEW_REACH_X, width)
        ys = _window(grid_y, _VIEW_REACH_Y, height)

        for x, y, tile in self._layer_tiles(xs, ys):
            tile.update()
            if isinstance(tile, EnemySpawnerTile) and not tile.spawned:
                enemy_system.create_enemy(
                    EnemyType.RAT, x * self.grid_size, y * self.grid_size
                )
                tile.spawned = True

    def visible_tiles(self, grid_position: Sequence[int]) -> list[Tile]:
        """Tiles around a grid position in drawing order.

        Doodads are drawn after everything else, most recently seen first.
        """
        width, height = self.max_size_grid
        grid_x, grid_y = grid_position
        xs = _window(grid_x, _VIEW_REACH_X, width)
        ys = _window(grid_y, _VIEW_REACH_Y, height)

        regular: list[Tile] = []
        deferred: list[Tile] = []
        for _, _, tile in self._layer_tiles(xs, ys):
            (deferred if tile.tile_type == TileType.DOODAD else regular).append(tile)
        return regular + deferred[::-1]