"""Coordinator tying together entities, components and systems."""

from __future__ import annotations

from typing import Any, TypeVar

from threesisters.component_manager import ComponentManager
from threesisters.entity_manager import EntityManager
from threesisters.system_manager import SystemManager
from threesisters.types import (
    MAX_COMPONENTS,
    ComponentType,
    ECSError,
    Entity,
    Signature,
    System,
)

T = TypeVar("T")
S = TypeVar("S", bound=System)


class ECS:
    """Creates and manages entities, their components and the systems.

    With ``debug`` on, the managers raise :class:`ECSError` on misuse; with
    it off, most of those checks are skipped.
    """

    def __init__(self, debug: bool = True) -> None:
        self.debug = debug
        self._entities = EntityManager()
        self._components = ComponentManager(debug)
        self._systems = SystemManager(debug)

    # entities

    def create_entity(self) -> Entity:
        """Create an entity and return its id."""
        return self._entities.create_entity()

    def destroy_entity(self, entity: Entity) -> None:
        """Destroy an entity and drop its components and system memberships."""
        self._entities.destroy_entity(entity)
        self._components.entity_destroyed(entity)
        self._systems.entity_destroyed(entity)

    # components

    def register_component(self, component_type: type) -> None:
        """Register a component class for use by entities and systems."""
        self._components.register_component(component_type)

    def add_component(self, entity: Entity, *args: Any) -> None:
        """Attach one or more components to an existing entity.

        Every component's class must be registered; otherwise nothing is
        attached and :class:`ECSError` is raised.
        """
        if not args:
            raise TypeError("at least one component must be given")
        if len(args) >= MAX_COMPONENTS:
            raise ECSError(
                f"too many components given, the max is {MAX_COMPONENTS}"
            )
        positions = [self._components.get_component_type(type(c)) for c in args]
        for component in args:
            self._components.add_component(entity, component)
        self._update_signature(entity, positions, True)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        """Detach the entity's component of the given class."""
        position = self._components.get_component_type(component_type)
        self._components.remove_component(entity, component_type)
        self._update_signature(entity, [position], False)

    def _update_signature(
        self, entity: Entity, positions: list[ComponentType], value: bool
    ) -> None:
        signature = self._entities.get_signature(entity)
        for position in positions:
            signature.set(position, value)
        self._entities.set_signature(entity, signature)
        self._systems.entity_signature_changed(entity, signature)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        """Return the entity's component of the given class."""
        return self._components.get_component(entity, component_type)

    def has_component(self, entity: Entity, component_type: type) -> bool:
        """Return whether the entity has a component of the given class."""
        return self._components.has_component(entity, component_type)

    def get_component_type(self, component_type: type) -> ComponentType:
        """Return the type number of a registered component class."""
        return self._components.get_component_type(component_type)

    # systems

    def register_system(self, system_type: type[S]) -> S:
        """Register a system class and return its instance."""
        return self._systems.register_system(system_type)

    def set_system_signature(self, system_type: type, *args: Any) -> None:
        """Set which components a system's entities must have.

        Accepts either a single :class:`Signature` or component type numbers.
        """
        if len(args) == 1 and isinstance(args[0], Signature):
            self._systems.set_signature(system_type, args[0])
            return
        if any(isinstance(a, bool) or not isinstance(a, int) for a in args):
            raise TypeError("signature arguments must be component type numbers")
        if len(args) >= MAX_COMPONENTS:
            raise ECSError(
                f"too many signature component types, the max is {MAX_COMPONENTS}"
            )
        self._systems.set_signature(system_type, Signature.from_positions(*args))