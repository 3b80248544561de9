"""Hands out entity ids and stores each entity's signature."""

from __future__ import annotations

import copy
from collections import deque

from threesisters.types import MAX_ENTITIES, ECSError, Entity, Signature


class EntityManager:
    """Distributes entity ids and records which are in use."""

    def __init__(self) -> None:
        self._available: deque[Entity] = deque(range(MAX_ENTITIES))
        self._signatures: dict[Entity, Signature] = {}
        self.living_entity_count = 0

    @staticmethod
    def _check(entity: Entity) -> None:
        if not 0 <= entity < MAX_ENTITIES:
            raise ECSError(f"entity {entity} out of range")

    def create_entity(self) -> Entity:
        """Take the next free id from the front of the queue."""
        if not self._available:
            raise ECSError("too many entities in existence")
        entity = self._available.popleft()
        self.living_entity_count += 1
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Clear the entity's signature and return its id to the queue."""
        self._check(entity)
        self._signatures.pop(entity, None)
        self._available.append(entity)
        self.living_entity_count -= 1

    def set_signature(self, entity: Entity, signature: Signature) -> None:
        """Store a copy of ``signature`` for the entity."""
        self._check(entity)
        self._signatures[entity] = copy.copy(signature)

    def get_signature(self, entity: Entity) -> Signature:
        """Return a copy of the entity's signature."""
        self._check(entity)
        return copy.copy(self._signatures.get(entity, Signature()))