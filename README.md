# artyengine

The logic core of a small 2D game engine, in plain Python with no runtime
dependencies: vector math, shapes, collision detection and response, simple
rigid bodies, a smoothing camera and an animation state machine.

## Modules

- `artyengine.fmath`: scalar helpers: `clamp` (bounds in either order), `mid`,
  `lerp`, `smooth_step`, `fmod`, `normalize_degree` (into `[0, 360)`),
  `degree_to_radian`, `radian_to_degree`, `inv_sqrt` (0 for 0),
  `is_small_number`, a polynomial `atan2` approximation, and the random helpers
  `rand_int`, `rand_real` and `rand_perc`.
- `artyengine.vector`: the immutable `Vector2` with component-wise arithmetic,
  `dot`, `cross`, `size`, `safe_normal`, `clamp_axes`, `rotate`,
  `rotate_around`, `project_onto`, `to_degree` / `from_degree`, and the
  constants `Vector2.ZERO` and `Vector2.UNIT`.
- `artyengine.transform`: the immutable `Transform` (position, rotation in
  degrees, scale) with `Transform.IDENTITY`.
- `artyengine.box`: the axis-aligned `Box2`. A box built from corners that are
  not strictly ordered becomes `Box2.EMPTY`; `Box2.from_center` keeps the size
  as given. It offers `contains`, `contains_or_on`, `is_on`, `intersects`,
  `overlap` and `closest_point_to`.
- `artyengine.ray`, `artyengine.segment`: `Ray2` and `Segment2` with distance
  and closest-point queries; `Segment2.intersection` returns the crossing point
  or `None`.
- `artyengine.circle`: `Circle`, which rescales from its initial radius in
  `update_transform`.
- `artyengine.polygon`: `Polygon`, stored around its arithmetic mean and placed
  with `update_transform`. `contains` tests a point; `intersects_polygon` and
  `intersects_circle` return a `Contact` (depth, normal, optional point) or
  `None`.
- `artyengine.physics_types`: `PhysicsMaterial` (friction, bounciness) with
  `PhysicsMaterial.combine` under a `CombinePattern` (`MIN`, `MID`, `MAX`), and
  the `HitResult` record.
- `artyengine.delegate`: `UnicastDelegate` (one callback, returns its result)
  and `MulticastDelegate` (ordered callbacks, duplicates ignored).
- `artyengine.collision_manager`: the `CollisionType` enum and a
  `CollisionManager` holding, per type, the bit mask of types it responds to.
  `initialize` fills in the default response pairs; `find_mapping` raises
  `KeyError` for a type without an entry.
- `artyengine.collisions`: shape-level functions for circles and boxes:
  `overlaps`, `hit`, `separation` and `resolve_offsets`, plus
  `collision_test_polygons` and the `ColliderShape` and `CollisionMode` enums.
- `artyengine.scene`: `SceneNode`, a node with a local `Transform`, a parent
  hierarchy (`attach_to`, `detach_from`, `descendants`, `destroy`), world
  position, rotation and scale, and `activate` / `deactivate` events.
- `artyengine.rigid_body`: `RigidBody`, which moves an owner node with
  velocity, gravity, linear and angular drag. `precise_update` applies gravity
  and resting contacts and returns the offset moved; `restrict_velocity` applies
  friction and bounce against a static obstacle or an elastic exchange with
  another moving body.
- `artyengine.colliders`: the `CircleCollider` and `BoxCollider` components,
  which keep track of their contacts and report them through the events
  `on_component_begin_overlap`, `on_component_overlap`,
  `on_component_end_overlap`, `on_component_hit` and `on_component_stay`.
  `ColliderGrid` places registered colliders in a 10 × 6 grid of zones and, in
  `process`, pairs colliders that share a zone, starts new contacts, ends stale
  ones and clears the colliders scheduled for it.
- `artyengine.camera`: `Camera`, a `SceneNode` whose virtual position and
  spring arm length trail the real ones on every `calculate` call, optionally
  held inside a `frame` box, with `shake`.
- `artyengine.animator`: `Animation` (frames, interval, looping, reverse,
  per-frame notifications), `AnimEdge` transitions guarded by
  `IntegerCondition`, `FloatCondition`, `BoolCondition` and `TriggerCondition`
  in `ComparisonMode.AND` or `OR`, and the `Animator` state machine with typed
  parameters (`ParamType`), `set_node`, `play_montage` and `update`.
- `artyengine.file_manager`: `create_folder` (returns whether the folder was
  created under the current directory), `read_file` and `write_file` for UTF-8
  text.

## Installation

```
pip install .
```

## Examples

Boxes and the collision table:

```python
from artyengine.vector import Vector2
from artyengine.box import Box2
from artyengine.collision_manager import CollisionManager, CollisionType

a = Box2.from_center(Vector2(0, 0), 4, 4)
b = Box2.from_center(Vector2(3, 0), 4, 4)
print(a.intersects(b))   # True
print(a.overlap(b))      # the shared rectangle

manager = CollisionManager()
manager.initialize()
mask = manager.find_mapping(CollisionType.PLAYER)
print(manager.layer_mask_judge(mask, CollisionType.BLOCK))  # True
```

Colliders in a grid:

```python
from artyengine.vector import Vector2
from artyengine.colliders import BoxCollider, ColliderGrid

grid = ColliderGrid()
first = BoxCollider(name="first")
second = BoxCollider(name="second")
first.local_position = Vector2(0, 100)
second.local_position = Vector2(5, 100)
for collider in (first, second):
    collider.set_size(Vector2(10, 10))
    grid.add(collider)

touched = []
first.on_component_begin_overlap.add(lambda me, other, owner: touched.append(other.name))
grid.process()
print(touched)  # ['second']
```

An animation state machine:

```python
from artyengine.animator import (
    AnimEdge, Animation, Animator, FloatCondition, ParamType, TransitionComparison,
)

idle = Animation(["idle0", "idle1"], interval=0.1)
run = Animation(["run0", "run1", "run2"], interval=0.1)
animator = Animator()
animator.insert("idle", idle)
animator.insert("run", run)
animator.add_parameter("speed", ParamType.FLOAT)
AnimEdge(idle, run).add_condition(
    FloatCondition("speed", 0.1, TransitionComparison.GREATER)
)

animator.set_node("idle")
animator.set_float("speed", 1.0)
animator.update()
print(animator.is_playing("run"))  # True
```

## What the package does not do

It holds no game loop, window, renderer, input handling, audio or video
playback, resource loading or level management. Frames given to an `Animation`
are opaque values that the package hands back but never draws, and time only
advances when the caller calls `update`, `precise_update`, `calculate`,
`ColliderGrid.process` or `Animation.advance`.

## Running the tests

```
pip install .[test]
pytest
```