"""Registry of systems and the signatures that select their entities."""

from __future__ import annotations

import copy
from typing import TypeVar

from threesisters.types import ECSError, Entity, Signature, System

S = TypeVar("S", bound=System)


class SystemManager:
    """Keeps each system's entity set in step with entity signatures."""

    def __init__(self, debug: bool = True) -> None:
        self.debug = debug
        self._signatures: dict[type, Signature] = {}
        self._systems: dict[type, System] = {}

    def register_system(self, system_type: type[S]) -> S:
        """Create, store and return an instance of ``system_type``."""
        if not (isinstance(system_type, type) and issubclass(system_type, System)):
            raise TypeError("system type must inherit from System")
        if system_type in self._systems:
            raise ECSError(f"system {system_type.__name__} is already registered")
        system = system_type()
        self._systems[system_type] = system
        return system

    def set_signature(self, system_type: type, signature: Signature) -> None:
        """Set the signature a system selects entities by.

        The first signature given to a system is kept; later calls leave it
        unchanged.
        """
        if self.debug and system_type not in self._systems:
            raise ECSError(f"system {system_type.__name__} is not registered")
        self._signatures.setdefault(system_type, copy.copy(signature))

    def entity_destroyed(self, entity: Entity) -> None:
        """Remove the entity from every system."""
        for system in self._systems.values():
            system.entities.discard(entity)

    def entity_signature_changed(self, entity: Entity, signature: Signature) -> None:
        """Add the entity to matching systems and drop it from the rest."""
        for system_type, system in self._systems.items():
            wanted = self._signatures.setdefault(system_type, Signature())
            if (signature & wanted) == wanted:
                system.entities.add(entity)
            else:
                system.entities.discard(entity)