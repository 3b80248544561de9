"""Registry of component types and their packed arrays."""

from __future__ import annotations

from typing import Any, TypeVar

from threesisters.component_array import ComponentArray
from threesisters.types import MAX_COMPONENTS, ComponentType, ECSError, Entity

T = TypeVar("T")


class ComponentManager:
    """Maps component classes to type numbers and component arrays."""

    def __init__(self, debug: bool = True) -> None:
        self.debug = debug
        self._types: dict[type, ComponentType] = {}
        self._arrays: dict[type, ComponentArray[Any]] = {}
        self._next_type: ComponentType = 0

    def _array(self, component_type: type[T]) -> ComponentArray[T]:
        try:
            return self._arrays[component_type]
        except KeyError:
            raise ECSError(
                f"no component array for unregistered type {component_type.__name__}"
            ) from None

    def register_component(self, component_type: type) -> None:
        """Register a component class, giving it the next type number."""
        if component_type in self._types:
            if self.debug:
                raise ECSError(
                    f"component {component_type.__name__} is already registered"
                )
            return
        if self._next_type >= MAX_COMPONENTS:
            raise ECSError(f"cannot register more than {MAX_COMPONENTS} components")
        self._types[component_type] = self._next_type
        self._arrays[component_type] = ComponentArray(self.debug)
        self._next_type += 1

    def get_component_type(self, component_type: type) -> ComponentType:
        """Return the type number of a registered component class."""
        try:
            return self._types[component_type]
        except KeyError:
            raise ECSError(
                f"component {component_type.__name__} is not registered"
            ) from None

    def add_component(self, entity: Entity, component: Any) -> None:
        """Attach ``component`` to the entity, keyed by its class."""
        self._array(type(component)).insert(entity, component)

    def remove_component(self, entity: Entity, component_type: type) -> None:
        """Detach the entity's component of the given class."""
        self._array(component_type).remove(entity)

    def get_component(self, entity: Entity, component_type: type[T]) -> T:
        """Return the entity's component of the given class."""
        return self._array(component_type).get(entity)

    def has_component(self, entity: Entity, component_type: type) -> bool:
        """Return whether the entity has a component of the given class."""
        return entity in self._array(component_type)

    def entity_destroyed(self, entity: Entity) -> None:
        """Remove every component attached to the entity."""
        for array in self._arrays.values():
            array.entity_destroyed(entity)