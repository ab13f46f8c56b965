# sphsim

`sphsim` is a small entity-component-system (ECS) core for particle simulations. It comes with the components and systems that a simulation of spheres viewed through a camera needs. Everything runs in memory and is built on numpy.

## Modules

### `sphsim.component_pool`

`ComponentPool` stores the components of one type in a sparse set. A sparse index maps each entity id to a slot in two dense lists: one holds the components and one holds the entity ids.

- `add_component(entity, component)` attaches a component. If the entity already has one, it is replaced. A negative entity id raises `ValueError`.
- `get_component(entity)` returns the component.
- `remove_component(entity)` detaches the component. It moves the last dense element into the freed slot, so dense order changes after a removal.
- Both `get_component` and `remove_component` raise `KeyError` when the entity has no component in the pool.
- `has_component(entity)` and `entity in pool` report whether the entity has a component.
- `reserve(capacity)` grows the sparse index so that it covers ids up to `capacity`. A negative capacity raises `ValueError`.
- `dense_entities()` and `dense_components()` return tuples in dense storage order.
- `len(pool)` is the number of components. Iterating over a pool yields the components in dense order.

### `sphsim.component_view`

`ComponentView(*pools)` joins one or more pools on entity id. Giving it no pools raises `ValueError`.

- Iterating yields `(entity, component_1, component_2, ...)` for every entity that is present in all the pools.
- The walk is driven by whichever pool was smallest when the view was built.
- `size_hint()` is that pool's length, which is an upper bound on how many tuples the view yields.
- `smallest_dense()` returns that pool's dense entity ids.

### `sphsim.registry`

`Registry` creates entities and keeps one pool per component type. A pool is created the first time its type is requested.

- `create_entity()` returns a new entity id. Ids are sequential and start at 0.
- `add_component(entity, component)` stores the component under `type(component)`.
- `emplace_component(entity, component_type, *args, **kwargs)` builds a component from the given arguments, attaches it and returns it.
- `add_component` and `emplace_component` raise `IndexError` for an id that was never created.
- `has_component(entity, component_type)` reports whether the entity has a component of that type.
- `remove_component(entity, component_type)` detaches the component and raises `KeyError` if it is absent.
- `remove_entity(entity)` strips every component from the entity. Unknown ids are ignored.
- `is_alive(entity)` is true once the entity has been given a component, and false again after `remove_entity`.
- `pool(component_type)` returns the pool for a type.
- `view(*component_types)` returns a `ComponentView` over those types.
- `len(registry)` is the number of entities created.

### `sphsim.components`

These are plain dataclasses. Their vector and matrix fields are `float32` numpy arrays, and the constructors check the shape of each one.

- `CameraComponent` holds:
  - `fov`, which is used as radians (default `45.0`)
  - `aspect_ratio` (default `16/9`)
  - `near` and `far` (defaults `0.1` and `100.0`)
  - `projection_matrix` and `view_projection`, which start as identity
  - `is_dirty`
- `TransformComponent` holds:
  - `position`
  - `rotation`, a quaternion `(w, x, y, z)` that defaults to identity
  - `scale`
  - `transform`
  - `is_dirty`
- `SphereComponent` packs `position_and_radius` as `(x, y, z, radius)`. Its `position` property is a writable view of the first three values, and its `radius` property returns the fourth.
- `InstanceComponent` is an empty marker for spheres that are drawn instanced.
- `MeshComponent` holds integer handles `vao`, `vbo` and `shader_program`, plus a `radius`.
- `AABB` holds a 2-D box as its `min` and `max` corners.

### `sphsim.camera_system`

- `perspective(fovy, aspect, near, far)` returns a right-handed perspective matrix that maps depth to [-1, 1]. `fovy` is in radians. The matrix acts on column vectors. A zero aspect ratio raises `ValueError`, and so does `near == far`.
- `look_at(eye, center, up)` returns a right-handed view matrix. It raises `ValueError` if the view direction or the side vector has zero length.
- `rotate_vector(quaternion, vector)` rotates a 3-vector by a `(w, x, y, z)` quaternion.
- `CameraSystem().update(registry)` runs over every entity that has both a `CameraComponent` and a `TransformComponent`:
  - If the camera is dirty, it recomputes the projection and clears `is_dirty`.
  - It builds a view matrix from the transform's position and rotation. With the identity rotation the camera looks along -z with +y up.
  - It stores `projection_matrix @ view` in `view_projection`.

### `sphsim.falling`

`FallingSpheresSystem().update(registry)` lowers the y coordinate of each instanced sphere by `FALL_STEP`, which is `0.1`.

## Example

```python
from sphsim.registry import Registry
from sphsim.components import CameraComponent, TransformComponent, SphereComponent, InstanceComponent
from sphsim.camera_system import CameraSystem
from sphsim.falling import FallingSpheresSystem

registry = Registry()

camera = registry.create_entity()
registry.add_component(camera, CameraComponent(aspect_ratio=640 / 480))
registry.add_component(camera, TransformComponent())

for i in range(10):
    sphere = registry.create_entity()
    registry.emplace_component(sphere, InstanceComponent)
    registry.emplace_component(sphere, SphereComponent, (0.0, i * 0.5, -10.0, 1.0))

cameras = CameraSystem()
falling = FallingSpheresSystem()

cameras.update(registry)
falling.update(registry)

for entity, instance, sphere in registry.view(InstanceComponent, SphereComponent):
    print(entity, sphere.position_and_radius)
```

## What it does not do

- It does not open a window, render anything or read a configuration file. `MeshComponent` and the camera matrices only hold data that a renderer could use.
- It has no main loop and no command-line program. You create a registry and call each system's `update` yourself.
- The only motion it provides is `FallingSpheresSystem`'s fixed downward step. There is no fluid or particle-interaction physics.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```