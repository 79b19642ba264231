import pytest

from unseenia.enemies import Rat
from unseenia.enemy_system import EnemySystem
from unseenia.geometry import Rect, Vector2
from unseenia.player import Player
from unseenia.tiles import EnemySpawnerTile, TileType
from unseenia.tilemap import TileMap


@pytest.fixture
def tile_map():
    return TileMap(64.0, 10, 10, "tiles.png")


def rect():
    return Rect(0, 0, 64, 64)


def test_new_map_is_empty(tile_map):
    assert tile_map.tile_empty(0, 0, 0)
    assert tile_map.layer_size(9, 9, 0) == 0
    assert tile_map.max_size == Vector2(640.0, 640.0)


def test_out_of_range_cells(tile_map):
    assert tile_map.tile_empty(10, 0, 0) is False
    assert tile_map.layer_size(-1, 0, 0) == -1
    assert tile_map.add_tile(10, 0, 0, rect(), False, 0) is None
    with pytest.raises(IndexError):
        tile_map.check_type(0, 0, 0, 0)


def test_add_and_remove(tile_map):
    tile_map.add_tile(2, 3, 0, rect(), True, TileType.DEFAULT)
    tile_map.add_tile(2, 3, 0, rect(), False, TileType.DOODAD)
    assert tile_map.layer_size(2, 3, 0) == 2
    assert tile_map.check_type(2, 3, 0, TileType.DOODAD)
    assert tile_map.remove_tile(2, 3, 0, TileType.DEFAULT) is None
    assert tile_map.layer_size(2, 3, 0) == 2
    removed = tile_map.remove_tile(2, 3, 0)
    assert removed.tile_type == TileType.DOODAD
    assert tile_map.layer_size(2, 3, 0) == 1


def test_save_and_load_round_trip(tile_map, tmp_path):
    tile_map.add_tile(2, 3, 0, Rect(64, 0, 64, 64), True, TileType.DEFAULT)
    tile_map.add_spawner_tile(4, 5, 0, Rect(0, 64, 64, 64), 0, 2, 60, 1000)
    path = tmp_path / "map.slmp"
    tile_map.save_to_file(path)
    assert path.read_text().startswith("10 10\n64\n1\ntiles.png\n")

    loaded = TileMap.from_file(path)
    assert loaded.max_size_grid == (10, 10)
    assert loaded.grid_size == 64.0
    assert loaded.texture_file == "tiles.png"
    for cell in [(2, 3, 0), (4, 5, 0)]:
        original = tile_map.tiles_at(*cell)
        again = loaded.tiles_at(*cell)
        assert [t.to_string() for t in again] == [t.to_string() for t in original]
    assert isinstance(loaded.tiles_at(4, 5, 0)[0], EnemySpawnerTile)
    assert loaded.tiles_at(2, 3, 0)[0].collision is True


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TileMap.from_file(tmp_path / "absent.slmp")


def test_load_tile_outside_map(tmp_path):
    path = tmp_path / "bad.slmp"
    path.write_text("2 2\n64\n1\ntiles.png\n5 0 0 0 0 0 1 ")
    with pytest.raises(ValueError):
        TileMap.from_file(path)


def test_world_bounds_keep_entity_inside(tile_map):
    player = Player(-5.0, 20.0, None)
    tile_map.update_world_bounds_collision(player, 0.1)
    assert player.position.x == 0.0

    player.set_position(700.0, 20.0)
    player.movement.velocity = Vector2(50.0, 0.0)
    tile_map.update_world_bounds_collision(player, 0.1)
    assert player.position.x + player.global_bounds().width == tile_map.max_size.x
    assert player.movement.velocity.x == 0.0


def test_tile_collision_from_above(tile_map):
    tile_map.add_tile(2, 2, 0, rect(), True, TileType.DEFAULT)
    player = Player(140.0, 80.0, None)
    player.movement.velocity = Vector2(0.0, 100.0)
    tile_map.update_tile_collision(player, 0.1)
    wall = tile_map.tiles_at(2, 2, 0)[0].global_bounds()
    assert player.position.y + player.global_bounds().height == wall.top
    assert player.position.x == 140.0
    assert player.movement.velocity.y == 0.0


def test_tile_without_collision_does_not_block(tile_map):
    tile_map.add_tile(2, 2, 0, rect(), False, TileType.DEFAULT)
    player = Player(140.0, 80.0, None)
    player.movement.velocity = Vector2(0.0, 100.0)
    tile_map.update_tile_collision(player, 0.1)
    assert player.position == Vector2(140.0, 80.0)
    assert player.movement.velocity.y == 100.0


def test_update_tiles_spawns_once(tile_map):
    tile_map.add_spawner_tile(1, 1, 0, rect(), 0, 1, 60, 1000)
    enemies = []
    system = EnemySystem(enemies, {})
    player = Player(100.0, 100.0, None)
    tile_map.update_tiles(player, 0.1, system)
    tile_map.update_tiles(player, 0.1, system)
    assert len(enemies) == 1
    assert isinstance(enemies[0], Rat)
    assert enemies[0].position == Vector2(64.0, 64.0)
    assert tile_map.tiles_at(1, 1, 0)[0].spawned is True


def test_visible_tiles_defer_doodads(tile_map):
    first_doodad = tile_map.add_tile(0, 0, 0, rect(), False, TileType.DOODAD)
    plain = tile_map.add_tile(0, 1, 0, rect(), False, TileType.DEFAULT)
    second_doodad = tile_map.add_tile(1, 0, 0, rect(), False, TileType.DOODAD)
    visible = tile_map.visible_tiles((0, 0))
    assert visible == [plain, second_doodad, first_doodad]