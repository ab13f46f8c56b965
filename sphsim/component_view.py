"""Iteration over entities that hold every one of several components."""

from __future__ import annotations

from typing import Any, Iterator

from sphsim.component_pool import ComponentPool


class ComponentView:
    """Joins several component pools on entity id.

    Iteration walks the pool that was smallest when the view was built and
    yields ``(entity, component_1, component_2, ...)`` for every entity
    found in all pools.
    """

    def __init__(self, *args: ComponentPool[Any]) -> None:
        if not args:
            raise ValueError("a component view needs at least one component pool")
        self._pools = args
        self._smallest = min(args, key=len)

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        for entity in self._smallest.dense_entities():
            if all(pool.has_component(entity) for pool in self._pools):
                yield (entity, *(pool.get_component(entity) for pool in self._pools))

    def size_hint(self) -> int:
        """Upper bound on the number of entities the view yields."""
        return len(self._smallest)

    def smallest_dense(self) -> tuple[int, ...]:
        """Dense entity ids of the pool the view iterates over."""
        return self._smallest.dense_entities()