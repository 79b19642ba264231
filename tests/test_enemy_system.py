import pytest

from unseenia.enemies import Rat
from unseenia.enemy_system import EnemySystem, EnemyType


def _system():
    enemies = []
    return enemies, EnemySystem(enemies, {"RAT1_SHEET": "rat-texture"})


def test_type_zero_creates_rat():
    enemies, system = _system()
    rat = system.create_enemy(0, 0.0, 0.0)
    assert isinstance(rat, Rat)
    assert enemies == [rat]


def test_create_rat_appends_to_shared_list():
    enemies, system = _system()
    rat = system.create_enemy(EnemyType.RAT, 128.0, 256.0)
    assert enemies == [rat]
    assert isinstance(rat, Rat)


def test_created_rat_is_placed_at_position():
    _, system = _system()
    rat = system.create_enemy(EnemyType.RAT, 128.0, 256.0)
    assert (rat.position.x, rat.position.y) == (128.0, 256.0)


def test_created_rat_uses_rat_texture():
    _, system = _system()
    rat = system.create_enemy(EnemyType.RAT, 0.0, 0.0)
    assert rat.animation.texture_sheet == "rat-texture"


def test_unknown_type_raises_and_adds_nothing():
    enemies, system = _system()
    with pytest.raises(ValueError):
        system.create_enemy(7, 0.0, 0.0)
    assert enemies == []


def test_several_enemies_accumulate_in_order():
    enemies, system = _system()
    first = system.create_enemy(EnemyType.RAT, 0.0, 0.0)
    second = system.create_enemy(EnemyType.RAT, 64.0, 0.0)
    system.update(0.1)
    assert enemies == [first, second]