"""Entity registry holding one component pool per component type."""

from __future__ import annotations

from typing import Any, TypeVar

from sphsim.component_pool import ComponentPool
from sphsim.component_view import ComponentView

T = TypeVar("T")


class Registry:
    """Creates entities and attaches typed components to them."""

    def __init__(self) -> None:
        self._entities: list[bool] = []
        self._pools: dict[type, ComponentPool[Any]] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def pool(self, component_type: type[T]) -> ComponentPool[T]:
        """Return the pool for ``component_type``, creating it on first use."""
        try:
            return self._pools[component_type]
        except KeyError:
            created: ComponentPool[T] = ComponentPool()
            self._pools[component_type] = created
            return created

    def create_entity(self) -> int:
        """Create a new entity and return its id."""
        self._entities.append(False)
        return len(self._entities) - 1

    def _require_entity(self, entity: int) -> None:
        if not 0 <= entity < len(self._entities):
            raise IndexError(f"no such entity: {entity}")

    def add_component(self, entity: int, component: Any) -> None:
        """Attach ``component`` to ``entity`` under its own type."""
        self._require_entity(entity)
        self.pool(type(component)).add_component(entity, component)
        self._entities[entity] = True

    def emplace_component(
        self, entity: int, component_type: type[T], *args: Any, **kwargs: Any
    ) -> T:
        """Build a ``component_type`` from the arguments, attach and return it."""
        self._require_entity(entity)
        component = component_type(*args, **kwargs)
        self.pool(component_type).add_component(entity, component)
        self._entities[entity] = True
        return component

    def has_component(self, entity: int, component_type: type) -> bool:
        """Return whether ``entity`` holds a ``component_type``."""
        return self.pool(component_type).has_component(entity)

    def remove_component(self, entity: int, component_type: type) -> None:
        """Detach the ``component_type`` of ``entity``; KeyError if absent."""
        self.pool(component_type).remove_component(entity)

    def remove_entity(self, entity: int) -> None:
        """Strip every component from ``entity``; unknown ids are ignored."""
        if not 0 <= entity < len(self._entities):
            return
        for pool in self._pools.values():
            if pool.has_component(entity):
                pool.remove_component(entity)
        self._entities[entity] = False

    def is_alive(self, entity: int) -> bool:
        """Return whether ``entity`` was given a component and not removed."""
        return 0 <= entity < len(self._entities) and self._entities[entity]

    def view(self, *args: type) -> ComponentView:
        """Return a view over entities holding every listed component type."""
        return ComponentView(*(self.pool(component_type) for component_type in args))