import pytest

from artyengine.collision_manager import CollisionType
from artyengine.collisions import CollisionMode
from artyengine.colliders import (
    BoxCollider,
    CircleCollider,
    ColliderGrid,
    default_collision_manager,
)
from artyengine.rigid_body import RigidBody
from artyengine.scene import SceneNode
from artyengine.vector import Vector2


def make_box(position, size, collision_type, owner=None):
    if owner is not None:
        owner.local_position = position
        collider = BoxCollider(owner=owner)
    else:
        collider = BoxCollider()
        collider.local_position = position
    collider.set_size(size)
    collider.set_type(collision_type)
    return collider


def recorder(delegate):
    events = []
    delegate.add(lambda *args: events.append(args))
    return events


def test_set_type_takes_mask_from_manager():
    box = BoxCollider()
    box.set_type(CollisionType.PLAYER)
    assert box.layer_mask == default_collision_manager().find_mapping(CollisionType.PLAYER)


def test_collision_response_bit_toggles():
    manager = default_collision_manager()
    box = BoxCollider()
    box.set_type(CollisionType.PLAYER)
    box.set_collision_response_to_type(CollisionType.ENEMY, True)
    assert manager.layer_mask_judge(box.layer_mask, CollisionType.ENEMY)
    box.set_collision_response_to_type(CollisionType.ENEMY, False)
    assert not manager.layer_mask_judge(box.layer_mask, CollisionType.ENEMY)


def test_trigger_insert_fires_begin_overlap_on_both():
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(5, 0), Vector2(10, 10), CollisionType.BLOCK)
    a_events = recorder(a.on_component_begin_overlap)
    b_events = recorder(b.on_component_begin_overlap)
    assert a.insert(b) is True
    assert a_events == [(a, b, None)]
    assert b_events == [(b, a, None)]
    assert b in a.collisions and a in b.collisions
    assert a.insert(b) is False


def test_insert_ignores_non_responding_types():
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    enemy = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.ENEMY)
    assert a.insert(enemy) is False
    assert a.is_collisions_empty


def test_insert_ignores_separated_colliders():
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(100, 0), Vector2(10, 10), CollisionType.BLOCK)
    assert a.insert(b) is False


def test_erase_ends_separated_contacts():
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(5, 0), Vector2(10, 10), CollisionType.BLOCK)
    a.insert(b)
    ended = recorder(b.on_component_end_overlap)
    b.local_position = Vector2(100, 0)
    assert a.erase() == [b]
    assert ended == [(b, a, None)]
    assert a.is_collisions_empty and b.is_collisions_empty


def test_collisions_of_type_returns_owners():
    node_a, node_b = SceneNode(), SceneNode()
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER, owner=node_a)
    b = make_box(Vector2(5, 0), Vector2(10, 10), CollisionType.BLOCK, owner=node_b)
    a.insert(b)
    assert a.collisions_of_type(CollisionType.BLOCK) == [node_b]
    assert a.collisions_of_type(CollisionType.PLAYER) == []


def test_clear_removes_contacts_from_both_sides():
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(5, 0), Vector2(10, 10), CollisionType.BLOCK)
    a.insert(b)
    ended = recorder(b.on_component_end_overlap)
    a.clear()
    assert b.is_collisions_empty
    assert ended == [(b, a, None)]


def test_mode_none_without_grid_clears_at_once():
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(5, 0), Vector2(10, 10), CollisionType.BLOCK)
    a.insert(b)
    a.set_collision_mode(CollisionMode.NONE)
    assert a.mode is CollisionMode.NONE
    assert b.is_collisions_empty


def test_update_reports_ongoing_overlap():
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(5, 0), Vector2(10, 10), CollisionType.BLOCK)
    a.insert(b)
    a_events = recorder(a.on_component_overlap)
    b_events = recorder(b.on_component_overlap)
    a.update(0.0)
    assert a_events == [(a, b, None)]
    assert b_events == [(b, a, None)]


def test_collision_pushes_kinematic_body_out_and_stops_it():
    block = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.BLOCK)
    block.set_collision_mode(CollisionMode.COLLISION)
    node = SceneNode()
    player = make_box(Vector2(0, 8), Vector2(10, 10), CollisionType.PLAYER, owner=node)
    player.set_collision_mode(CollisionMode.COLLISION)
    rigid = RigidBody(node)
    rigid.velocity = Vector2(0, -100)
    player.rigid_body = rigid
    player_hits = recorder(player.on_component_hit)
    block_hits = recorder(block.on_component_hit)

    assert player.insert(block) is True
    assert node.world_position.y == pytest.approx(10.0, abs=1e-3)
    assert node.world_position.x == 0
    assert block.world_position == Vector2(0, 0)
    assert rigid.velocity == Vector2.ZERO
    assert player_hits[0][3] == -block_hits[0][3]
    assert player_hits[0][4].hit_component is block


def test_circle_radius_is_absolute():
    circle = CircleCollider()
    circle.set_radius(-3)
    assert circle.radius == 3
    assert circle.rect().half == Vector2(3, 3)
    assert circle.rect().center == circle.world_position


def test_circle_radius_follows_scale():
    node = SceneNode()
    node.local_scale = Vector2(2, 2)
    circle = CircleCollider(owner=node)
    circle.set_radius(4)
    circle.update(0.0)
    assert circle.radius == pytest.approx(4)
    node.local_scale = Vector2(4, 4)
    circle.update(0.0)
    assert circle.radius == pytest.approx(8.0)


def test_box_size_follows_scale():
    node = SceneNode()
    box = BoxCollider(owner=node)
    box.set_size(Vector2(-10, 10))
    assert box.size == Vector2(10, 10)
    node.local_scale = Vector2(2, -3)
    box.update(0.0)
    assert box.size == Vector2(20, 30)


def test_circle_and_box_overlap():
    circle = CircleCollider()
    circle.set_radius(5)
    circle.set_type(CollisionType.DART)
    box = make_box(Vector2(8, 0), Vector2(10, 10), CollisionType.BLOCK)
    assert circle.insert(box) is True
    assert circle.contains_point(Vector2(1, 1))
    assert not box.contains_point(Vector2(0, 0))


def test_grid_process_pairs_overlapping_colliders():
    grid = ColliderGrid()
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(5, 0), Vector2(10, 10), CollisionType.BLOCK)
    grid.add(a)
    grid.add(b)
    grid.process()
    assert b in a.collisions
    b.local_position = Vector2(100, 0)
    grid.process()
    assert a.is_collisions_empty


def test_grid_clamps_far_colliders_into_last_zone():
    grid = ColliderGrid()
    far = make_box(Vector2(10000, 10000), Vector2(10, 10), CollisionType.BLOCK)
    grid.add(far)
    grid.zone_tick(far)
    assert far in grid.colliders_at(ColliderGrid.COLUMNS - 1, ColliderGrid.ROWS - 1)
    grid.remove(far)
    assert far not in grid.colliders_at(ColliderGrid.COLUMNS - 1, ColliderGrid.ROWS - 1)


def test_grid_orders_zone_by_layer():
    grid = ColliderGrid()
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.BLOCK)
    a.layer, b.layer = 2, 1
    grid.add(a)
    grid.add(b)
    grid.zone_tick(a)
    grid.zone_tick(b)
    cell = grid._cell_of(a.world_position)
    assert grid.colliders_at(*cell) == (b, a)


def test_grid_defers_clear_until_process():
    grid = ColliderGrid()
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    b = make_box(Vector2(5, 0), Vector2(10, 10), CollisionType.BLOCK)
    grid.add(a)
    grid.add(b)
    grid.process()
    a.set_collision_mode(CollisionMode.NONE)
    assert b in a.collisions
    grid.process()
    assert a.is_collisions_empty
    assert b.is_collisions_empty


def test_grid_skips_disabled_collider():
    grid = ColliderGrid()
    a = make_box(Vector2(0, 0), Vector2(10, 10), CollisionType.PLAYER)
    a.set_collision_mode(CollisionMode.NONE)
    grid.add(a)
    grid.zone_tick(a)
    cell = grid._cell_of(a.world_position)
    assert a not in grid.colliders_at(*cell)
    assert a in grid