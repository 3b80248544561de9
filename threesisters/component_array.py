"""Densely packed storage of one component type, keyed by entity."""

from __future__ import annotations

from typing import Generic, TypeVar

from threesisters.types import MAX_ENTITIES, ECSError, Entity

T = TypeVar("T")


class ComponentArray(Generic[T]):
    """Keeps the components of one type packed, with entity/index maps.

    With ``debug`` on, misuse raises :class:`ECSError`; with it off the
    checks are skipped and a missing entity surfaces as ``KeyError``.
    """

    def __init__(self, debug: bool = True) -> None:
        self.debug = debug
        self._components: list[T] = []
        self._index_of: dict[Entity, int] = {}
        self._entity_at: list[Entity] = []

    def insert(self, entity: Entity, component: T) -> None:
        """Give ``entity`` a component of this type."""
        if entity in self._index_of:
            if self.debug:
                raise ECSError(f"entity {entity} already contains this component")
            self._components[self._index_of[entity]] = component
            return
        if len(self._components) >= MAX_ENTITIES:
            raise ECSError("component array is full")
        self._index_of[entity] = len(self._components)
        self._entity_at.append(entity)
        self._components.append(component)

    def remove(self, entity: Entity) -> None:
        """Remove the entity's component, keeping the storage dense."""
        if self.debug and entity not in self._index_of:
            raise ECSError(f"entity {entity} has no such component to remove")
        removed = self._index_of.pop(entity)
        last_component = self._components.pop()
        last_entity = self._entity_at.pop()
        if last_entity != entity:
            self._components[removed] = last_component
            self._entity_at[removed] = last_entity
            self._index_of[last_entity] = removed

    def get(self, entity: Entity) -> T:
        """Return the entity's component."""
        if self.debug and entity not in self._index_of:
            raise ECSError(f"cannot find entity {entity} with this component")
        return self._components[self._index_of[entity]]

    def __contains__(self, entity: object) -> bool:
        return entity in self._index_of

    def __len__(self) -> int:
        return len(self._components)

    def entity_destroyed(self, entity: Entity) -> None:
        """Drop the entity's component if it has one."""
        if entity in self._index_of:
            self.remove(entity)