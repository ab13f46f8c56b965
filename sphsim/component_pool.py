"""Sparse-set storage for one component type."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ComponentPool(Generic[T]):
    """Stores components of one type densely, indexed by entity id.

    A sparse list maps an entity id to the position of its component in
    the dense arrays. Removal swaps the last component into the freed slot,
    so the dense arrays never have holes.
    """

    def __init__(self) -> None:
        self._location: list[Optional[int]] = []
        self._components: list[T] = []
        self._entities: list[int] = []

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{entity}: {component!r}"
            for entity, component in zip(self._entities, self._components)
        )
        return f"{type(self).__name__}({{{pairs}}})"

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[T]:
        return iter(self._components)

    def __contains__(self, entity: object) -> bool:
        return isinstance(entity, int) and self.has_component(entity)

    def has_component(self, entity: int) -> bool:
        """Return whether ``entity`` holds a component in this pool."""
        return 0 <= entity < len(self._location) and self._location[entity] is not None

    def get_component(self, entity: int) -> T:
        """Return the component of ``entity``; raise KeyError if it has none."""
        if not self.has_component(entity):
            raise KeyError(f"entity {entity} has no component in this pool")
        index = self._location[entity]
        assert index is not None
        return self._components[index]

    def add_component(self, entity: int, component: T) -> None:
        """Attach ``component`` to ``entity``, replacing any existing one."""
        if entity < 0:
            raise ValueError(f"entity id must not be negative: {entity}")
        if self.has_component(entity):
            index = self._location[entity]
            assert index is not None
            self._components[index] = component
            return

        if entity >= len(self._location):
            self._location.extend([None] * (entity + 1 - len(self._location)))

        self._location[entity] = len(self._components)
        self._components.append(component)
        self._entities.append(entity)

    def remove_component(self, entity: int) -> None:
        """Detach the component of ``entity``; raise KeyError if it has none."""
        if not self.has_component(entity):
            raise KeyError(f"entity {entity} has no component in this pool")
        index = self._location[entity]
        assert index is not None
        last_entity = self._entities[-1]

        self._components[index] = self._components[-1]
        self._entities[index] = last_entity
        self._location[last_entity] = index

        self._components.pop()
        self._entities.pop()

        self._location[entity] = None

    def reserve(self, capacity: int) -> None:
        """Make room in the sparse index for entity ids up to ``capacity``."""
        if capacity < 0:
            raise ValueError(f"capacity must not be negative: {capacity}")
        missing = capacity + 1 - len(self._location)
        if missing > 0:
            self._location.extend([None] * missing)

    def dense_entities(self) -> tuple[int, ...]:
        """Entity ids in dense storage order."""
        return tuple(self._entities)

    def dense_components(self) -> tuple[T, ...]:
        """Components in dense storage order."""
        return tuple(self._components)