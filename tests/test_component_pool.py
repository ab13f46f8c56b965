import pytest

from sphsim.component_pool import ComponentPool


def _pool_with_three():
    pool = ComponentPool()
    some_component = 3
    pool.add_component(0, some_component)
    pool.add_component(2, some_component)
    pool.add_component(6, some_component)
    return pool


def test_dense_entities_in_insertion_order():
    pool = _pool_with_three()
    assert pool.dense_entities() == (0, 2, 6)


def test_updating_components_in_dense_order():
    pool = _pool_with_three()
    for increment, (entity, value) in enumerate(
        zip(pool.dense_entities(), pool), start=2
    ):
        pool.add_component(entity, value + increment)
    assert list(pool) == [5, 6, 7]
    assert pool.dense_components() == (5, 6, 7)
    assert pool.get_component(6) == 7


def test_has_component_and_contains():
    pool = _pool_with_three()
    assert pool.has_component(2)
    assert not pool.has_component(1)
    assert not pool.has_component(100)
    assert not pool.has_component(-1)
    assert 6 in pool
    assert 5 not in pool
    assert "0" not in pool


def test_get_missing_component_raises():
    pool = _pool_with_three()
    with pytest.raises(KeyError):
        pool.get_component(1)


def test_add_replaces_existing_component():
    pool = _pool_with_three()
    pool.add_component(2, 99)
    assert len(pool) == 3
    assert pool.get_component(2) == 99
    assert pool.dense_entities() == (0, 2, 6)


def test_remove_swaps_last_into_place():
    pool = _pool_with_three()
    pool.add_component(6, 8)
    pool.remove_component(0)
    assert pool.dense_entities() == (6, 2)
    assert pool.get_component(6) == 8
    assert not pool.has_component(0)
    assert len(pool) == 2


def test_remove_last_component():
    pool = _pool_with_three()
    pool.remove_component(6)
    assert pool.dense_entities() == (0, 2)
    assert 6 not in pool


def test_remove_missing_component_raises():
    pool = _pool_with_three()
    with pytest.raises(KeyError):
        pool.remove_component(3)


def test_negative_entity_rejected():
    pool = ComponentPool()
    with pytest.raises(ValueError):
        pool.add_component(-1, 5)


def test_reserve_then_fill_and_empty():
    pool = ComponentPool()
    amount = 1000
    pool.reserve(amount)
    assert len(pool) == 0
    for entity in range(amount):
        pool.add_component(entity, 5)
    assert len(pool) == amount
    assert set(pool) == {5}
    for entity in range(amount):
        pool.remove_component(entity)
    assert len(pool) == 0
    assert pool.dense_entities() == ()
    assert not any(pool.has_component(entity) for entity in range(amount))


def test_reserve_keeps_existing_components():
    pool = _pool_with_three()
    pool.reserve(2)
    assert pool.get_component(6) == 3
    with pytest.raises(ValueError):
        pool.reserve(-1)