# threesisters

The core of a small 2D game engine: an entity-component-system, a tag pool,
an orthographic camera, physics helpers, a batched sprite renderer that
hands its vertex batches to a backend you supply, and text layout.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `threesisters.types`: `Signature` (a 32-bit component bit set with
  `set`, `reset`, `test`, `&` and `Signature.from_positions`), the `System`
  base class (its `entities` is a sorted set of entity ids), `ECSError`, and
  the limits `MAX_ENTITIES` (100 000) and `MAX_COMPONENTS` (32).
- `threesisters.component_array`: `ComponentArray`, dense storage of one
  component type keyed by entity.
- `threesisters.entity_manager`: `EntityManager`, which hands out entity ids
  from a queue and stores each entity's signature.
- `threesisters.component_manager`: `ComponentManager`, which numbers
  registered component classes and keeps one array per class.
- `threesisters.system_manager`: `SystemManager`, which keeps each system's
  entity set in step with entity signatures.
- `threesisters.ecs`: `ECS`, the coordinator over the three managers.
- `threesisters.components`: `Transform`, `Transform2D`, `Material2D`,
  `BodyType`, `Rigidbody2D`, `BoxCollider2D`, `Character` and `SubTexture`.
- `threesisters.tag_manager`: `TagManager` and `TagError`.
- `threesisters.transforms`: 4x4 matrices `ortho`, `translate`, `rotate_z`
  and `scale` for column vectors.
- `threesisters.camera`: `OrthoCamera` and the `MatrixTarget` protocol.
- `threesisters.physics`: `aabb_collision`, `shape_material` (returning a
  `ShapeMaterial`) and `box_half_extents`.
- `threesisters.sprite_renderer`: `SpriteRenderer`, `RenderBackend`,
  `QuadVertex`, `LineVertex`, `RendererStats` and `quad_indices`.
- `threesisters.text_renderer`: `text_projection`, `layout_text` and
  `GlyphQuad`.
- `threesisters.ecs_systems`: `SpriteRenderSystem` and `ColliderDebugSystem`.

## Entity-component-system

```python
from dataclasses import dataclass

from threesisters.components import Transform2D
from threesisters.ecs import ECS
from threesisters.types import System


@dataclass
class Velocity:
    dx: float = 0.0
    dy: float = 0.0


class MovementSystem(System):
    def update(self, ecs, dt):
        for entity in self.entities:
            transform = ecs.get_component(entity, Transform2D)
            velocity = ecs.get_component(entity, Velocity)
            transform.position += (velocity.dx * dt, velocity.dy * dt)


ecs = ECS()
ecs.register_component(Transform2D)
ecs.register_component(Velocity)

movement = ecs.register_system(MovementSystem)
ecs.set_system_signature(
    MovementSystem,
    ecs.get_component_type(Transform2D),
    ecs.get_component_type(Velocity),
)

player = ecs.create_entity()
ecs.add_component(player, Transform2D(), Velocity(dx=1.0))

movement.update(ecs, 0.016)
```

Components are keyed by their class; each class must be registered before
use, and at most 32 may be registered. `add_component` takes one or more
components; if any of their classes is not registered, nothing is attached
and `ECSError` is raised. `set_system_signature` takes either one
`Signature` or component type numbers; a system keeps the first signature it
is given. Systems see exactly the entities whose signature contains theirs,
and destroying an entity removes its components and drops it from every
system.

`ECS(debug=True)` raises `ECSError` on misuse such as adding the same
component twice or reading a component an entity lacks. With `debug=False`
most of those checks are skipped.

## Tags

```python
from threesisters.tag_manager import TagManager

tags = TagManager()
enemy = object()
tags.add_tag("enemy", enemy)
assert tags.get_tag_of(enemy) == "enemy"
assert tags.has_tag("enemy", enemy)
assert tags.get_all_with_tag("enemy", object) == [enemy]
```

Objects are matched by identity, and lookups by kind match the exact class
the object had when tagged. `get_all_with_tag` and `replace_tag` raise
`TagError` when nothing matches; `get_tag_of` returns `None` for an untagged
object.

## Camera

`OrthoCamera(width, height, position)` builds a projection over
`0..width` by `0..height` viewed from `position`. `projection_view()`
returns the 4x4 matrix; `calculate_projection_view(shader)` also passes it to
`shader.set_matrix4("projectionView", matrix, True)`, so any object with
that method will do.

## Rendering

`SpriteRenderer(sprite_size, backend)` scales every position by
`sprite_size`, the size in pixels of one world unit. Quads are built from a
position, size, rotation in degrees, colour and texture coordinates;
`stack_quad` adds to the current batch and `flush_quads` hands it to the
backend, while `draw_quad` does both for one quad. Batches of up to 1000
quads or 1000 lines are flushed automatically when full. `draw_line`,
`stack_line`, `flush_lines` and `draw_rect` (rotation in radians) work the
same way for lines. `stats` counts quads created and draw calls.

```python
from threesisters.sprite_renderer import SpriteRenderer


class RecordingBackend:
    def __init__(self):
        self.quad_batches = []
        self.line_batches = []

    def draw_quads(self, vertices, index_count):
        self.quad_batches.append((vertices, index_count))

    def draw_lines(self, vertices):
        self.line_batches.append(vertices)


backend = RecordingBackend()
renderer = SpriteRenderer((32, 32), backend)
renderer.stack_quad(0, (1.0, 2.0), (1.0, 1.0), 0.0)
renderer.stack_quad(0, (3.0, 2.0), (1.0, 1.0), 45.0)
renderer.flush_quads()

vertices, index_count = backend.quad_batches[0]
assert len(vertices) == 8 and index_count == 12
```

`quad_indices(index_count)` gives the matching triangle indices
(`0, 1, 2, 2, 3, 0` per quad).

`SpriteRenderSystem.render(ecs, renderer)` stacks one quad per entity from
its `Transform2D` and `Material2D` and flushes the batch.
`ColliderDebugSystem` draws green outlines of `BoxCollider2D`s.

## Text

`layout_text(characters, text, position, scale)` takes a mapping of
characters to `Character` glyphs and returns one `GlyphQuad` (texture id and
six `(x, y, u, v)` vertices) per character, advancing the pen by each glyph's
advance in 1/64 pixels. `text_projection(width, height)` returns a projection
centred on the screen.

## What this package does not do

It opens no window and issues no graphics calls: rendering ends at the
vertex batches passed to your `RenderBackend`. It does not load shaders,
textures or fonts; `Character` tables and texture ids come from you. It runs
no physics simulation: `threesisters.physics` offers overlap tests and
collider settings only, and `Rigidbody2D.runtime_body` is left for whatever
physics engine you attach.