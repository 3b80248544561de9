"""Systems that draw entities through the sprite renderer."""

from __future__ import annotations

from threesisters.components import BoxCollider2D, Material2D, Transform2D
from threesisters.ecs import ECS
from threesisters.sprite_renderer import SpriteRenderer
from threesisters.types import Entity, System

COLLIDER_COLOR = (0.0, 1.0, 0.0, 1.0)


class SpriteRenderSystem(System):
    """Draws every entity with a transform and a material as one batch."""

    def render(self, ecs: ECS, renderer: SpriteRenderer) -> None:
        """Stack a quad for each entity, then flush the batch."""
        for entity in self.entities:
            transform = ecs.get_component(entity, Transform2D)
            material = ecs.get_component(entity, Material2D)
            renderer.stack_quad(
                material.tex_index,
                transform.position,
                transform.size,
                transform.rotation,
                material.color,
                material.tex_coords,
            )
        renderer.flush_quads()


class ColliderDebugSystem(System):
    """Draws the outlines of box colliders for debugging."""

    @staticmethod
    def _draw(ecs: ECS, renderer: SpriteRenderer, entity: Entity) -> None:
        transform = ecs.get_component(entity, Transform2D)
        collider = ecs.get_component(entity, BoxCollider2D)
        renderer.draw_rect(
            transform.position + collider.offset,
            transform.size * (collider.size * 2.0),
            transform.rotation + collider.rotation_offset,
            COLLIDER_COLOR,
        )

    def render_box_collider(
        self, ecs: ECS, renderer: SpriteRenderer, entity: Entity
    ) -> None:
        """Draw the box collider of one entity."""
        self._draw(ecs, renderer, entity)

    def render_all_box_colliders(self, ecs: ECS, renderer: SpriteRenderer) -> None:
        """Draw the box colliders of every entity in this system."""
        for entity in self.entities:
            self._draw(ecs, renderer, entity)