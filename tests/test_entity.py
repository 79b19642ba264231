import pytest

from unseenia.entity import Entity
from unseenia.geometry import Rect, Vector2
from unseenia.skills import SkillType


class Dummy(Entity):
    def __init__(self):
        super().__init__()
        self.updates = 0

    def update(self, dt, mouse_pos_view):
        self.updates += 1


def test_entity_is_abstract():
    with pytest.raises(TypeError):
        Entity()


def test_set_position_without_hitbox_moves_sprite():
    entity = Dummy()
    entity.set_position(30.0, 40.0)
    assert entity.sprite.position == Vector2(30.0, 40.0)
    assert entity.position == Vector2(30.0, 40.0)


def test_set_position_with_hitbox_offsets_sprite():
    entity = Dummy()
    entity.create_hitbox_component(5.0, 7.0, 20.0, 30.0)
    entity.set_position(100.0, 200.0)
    assert entity.position == Vector2(100.0, 200.0)
    assert entity.sprite.position == Vector2(100.0 - 5.0, 200.0 - 7.0)


def test_global_bounds_uses_hitbox():
    entity = Dummy()
    entity.create_hitbox_component(5.0, 7.0, 20.0, 30.0)
    entity.set_position(10.0, 10.0)
    assert entity.global_bounds() == Rect(10.0, 10.0, 20.0, 30.0)


def test_center_is_middle_of_hitbox():
    entity = Dummy()
    entity.create_hitbox_component(0.0, 0.0, 20.0, 30.0)
    entity.set_position(10.0, 10.0)
    assert entity.center() == Vector2(10.0 + 20.0 / 2, 10.0 + 30.0 / 2)


def test_grid_position():
    grid = 64
    entity = Dummy()
    Entity.set_position(entity, 3 * grid + 5.0, 2 * grid)
    assert Entity.grid_position(entity, grid) == (3, 2)


def test_grid_position_truncates_towards_zero():
    entity = Dummy()
    Entity.set_position(entity, -10.0, 5.0)
    assert Entity.grid_position(entity, 64) == (0, 0)


def test_grid_position_zero_size_raises():
    entity = Dummy()
    with pytest.raises(ValueError):
        Entity.grid_position(entity, 0)


def test_next_position_bounds_without_components():
    assert Dummy().next_position_bounds(0.1) == Rect(-1.0, -1.0, -1.0, -1.0)


def test_next_position_bounds_follows_velocity():
    entity = Dummy()
    Entity.create_hitbox_component(entity, 0.0, 0.0, 10.0, 10.0)
    Entity.create_movement_component(entity, 500.0, 100.0, 0.0)
    Entity.move(entity, 1.0, 0.0, 1.0)
    bounds = Entity.next_position_bounds(entity, 0.5)
    velocity = entity.movement.velocity
    assert bounds.left == pytest.approx(entity.position.x + velocity.x * 0.5)
    assert bounds.top == pytest.approx(entity.position.y)


def test_move_accelerates_and_trains_endurance():
    entity = Dummy()
    Entity.create_movement_component(entity, 200.0, 100.0, 10.0)
    Entity.create_skill_component(entity)
    before = entity.skills.skills[SkillType.ENDURANCE].exp
    Entity.move(entity, -1.0, 0.0, 1.0)
    assert entity.movement.velocity.x < 0
    assert entity.skills.skills[SkillType.ENDURANCE].exp == before + 1


def test_stop_velocity_variants():
    entity = Dummy()
    entity.create_movement_component(200.0, 100.0, 10.0)
    entity.move(1.0, 1.0, 1.0)
    entity.stop_velocity_x()
    assert entity.movement.velocity.x == 0.0
    assert entity.movement.velocity.y > 0.0
    entity.move(1.0, 0.0, 1.0)
    entity.stop_velocity_y()
    assert entity.movement.velocity.y == 0.0
    entity.stop_velocity()
    assert entity.movement.velocity == Vector2(0.0, 0.0)


def test_created_attributes_have_level():
    entity = Dummy()
    Entity.create_attribute_component(entity, 3)
    assert entity.attributes.level == 3