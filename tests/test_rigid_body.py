import pytest

from artyengine.physics_types import PhysicsMaterial
from artyengine.rigid_body import RigidBody
from artyengine.scene import SceneNode
from artyengine.vector import Vector2


def make_body(**attrs):
    body = RigidBody(SceneNode())
    for key, value in attrs.items():
        setattr(body, key, value)
    return body


def test_defaults_from_source():
    body = RigidBody()
    assert body.max_speed == 5000.0
    assert body.gravity == 980.0
    assert body.linear_drag == 0.05
    assert body.mass == 1.0


def test_add_impulse_divides_by_mass():
    body = make_body(mass=2.0)
    body.add_impulse(Vector2(4.0, -6.0))
    assert body.velocity == Vector2(4.0, -6.0) / 2.0


def test_add_impulse_ignored_when_not_moveable():
    body = make_body()
    body.moveable = False
    body.add_impulse(Vector2(4.0, 0.0))
    assert body.velocity == Vector2.ZERO


def test_disabling_movement_and_rotation_clears_speeds():
    body = make_body(velocity=Vector2(3.0, 3.0), angular_velocity=12.0)
    body.moveable = False
    body.rotatable = False
    assert body.velocity == Vector2.ZERO
    assert body.angular_velocity == 0.0


def test_linear_drag_slows_without_reversing():
    body = make_body(velocity=Vector2(10.0, -10.0))
    body.update(1.0)
    assert 0 < body.velocity.x < 10.0
    assert -10.0 < body.velocity.y < 0


def test_strong_drag_stops_instead_of_reversing():
    body = make_body(velocity=Vector2(10.0, -10.0), linear_drag=100.0)
    body.update(1.0)
    assert body.velocity == Vector2.ZERO


def test_update_rotates_owner():
    body = make_body(angular_velocity=90.0)
    body.update(1.0)
    assert body.owner.local_rotation == 90.0


def test_update_does_nothing_when_disabled():
    body = make_body(velocity=Vector2(10.0, 0.0), angular_velocity=90.0)
    body.enabled = False
    body.update(1.0)
    assert body.velocity == Vector2(10.0, 0.0)
    assert body.owner.local_rotation == 0.0


def test_precise_update_applies_gravity_and_moves_owner():
    body = make_body(gravity=10.0, linear_drag=0.0)
    offset = body.precise_update(1.0)
    assert body.velocity == Vector2(0.0, 10.0)
    assert offset == Vector2(0.0, 10.0)
    assert body.owner.local_position == Vector2(0.0, 10.0)


def test_precise_update_clamps_speed_for_movement_only():
    body = make_body(velocity=Vector2(100.0, -100.0), max_speed=5.0, gravity_enabled=False)
    offset = body.precise_update(1.0)
    assert offset == Vector2(5.0, -5.0)
    assert body.velocity == Vector2(100.0, -100.0)


def test_precise_update_not_moveable():
    body = make_body()
    body.moveable = False
    assert body.precise_update(1.0) == Vector2.ZERO
    assert body.owner.local_position == Vector2.ZERO


def test_resting_contact_on_floor_cancels_gravity():
    body = make_body(gravity=10.0)
    floor = (Vector2(0.0, -1.0), PhysicsMaterial(0.0, 0.0), None)
    body.precise_update(1.0, [floor])
    assert body.velocity.y == pytest.approx(0.0)
    assert body.owner.local_position.y == pytest.approx(0.0)


def test_static_contact_removes_normal_velocity():
    body = make_body(velocity=Vector2(5.0, 10.0))
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.0, 0.0))
    assert body.velocity.equals(Vector2(5.0, 0.0))


def test_static_contact_full_bounce_reflects():
    body = make_body(velocity=Vector2(5.0, 10.0))
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.0, 1.0))
    assert body.velocity.equals(Vector2(5.0, -10.0))


def test_bounce_ignored_for_stay_contacts():
    body = make_body(velocity=Vector2(5.0, 10.0))
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.0, 1.0), None, True)
    assert body.velocity.equals(Vector2(5.0, 0.0))


def test_bounciness_is_clamped_to_one():
    body = make_body(velocity=Vector2(0.0, 10.0))
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.0, 5.0))
    assert body.velocity.equals(Vector2(0.0, -10.0))


def test_high_friction_stops_sliding():
    body = make_body(velocity=Vector2(5.0, 10.0))
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(10.0, 0.0))
    assert body.velocity.is_nearly_zero()


def test_separating_velocity_is_untouched():
    body = make_body(velocity=Vector2(5.0, -10.0))
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.4, 0.5))
    assert body.velocity == Vector2(5.0, -10.0)


def test_elastic_collision_of_equal_masses_swaps_velocities():
    a = make_body(velocity=Vector2(10.0, 0.0))
    b = make_body(velocity=Vector2.ZERO)
    a.restrict_velocity(Vector2(-1.0, 0.0), PhysicsMaterial(0.0, 1.0), b)
    assert a.velocity.equals(Vector2.ZERO)
    assert b.velocity.equals(Vector2(10.0, 0.0))


def test_two_body_collision_conserves_momentum():
    a = make_body(velocity=Vector2(4.0, 3.0), mass=3.0)
    b = make_body(velocity=Vector2(-2.0, 1.0), mass=1.5)
    before = a.velocity * a.mass + b.velocity * b.mass
    a.restrict_velocity(Vector2(-1.0, 0.0), PhysicsMaterial(0.0, 0.3), b)
    after = a.velocity * a.mass + b.velocity * b.mass
    assert after.equals(before)
    assert a.velocity.y == pytest.approx(3.0)
    assert b.velocity.y == pytest.approx(1.0)


def test_bodies_moving_apart_do_not_exchange():
    a = make_body(velocity=Vector2(-3.0, 0.0))
    b = make_body(velocity=Vector2(3.0, 0.0))
    a.restrict_velocity(Vector2(-1.0, 0.0), PhysicsMaterial(0.0, 1.0), b)
    assert a.velocity == Vector2(-3.0, 0.0)
    assert b.velocity == Vector2(3.0, 0.0)