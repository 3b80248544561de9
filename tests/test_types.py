import copy

import pytest

from threesisters.types import MAX_COMPONENTS, Signature, System


def test_set_and_test_round_trip():
    sig = Signature()
    sig.set(3)
    assert sig.test(3)
    assert not sig.test(2)


def test_set_false_clears_bit():
    sig = Signature.from_positions(4, 6)
    sig.set(4, False)
    assert not sig.test(4)
    assert sig.test(6)


def test_reset_clears_all():
    sig = Signature.from_positions(0, 10, MAX_COMPONENTS - 1)
    sig.reset()
    assert sig == Signature()
    assert not sig


@pytest.mark.parametrize("position", [-1, MAX_COMPONENTS])
def test_out_of_range_position_raises(position):
    sig = Signature()
    with pytest.raises(IndexError):
        sig.set(position)
    with pytest.raises(IndexError):
        sig.test(position)


def test_and_is_intersection():
    a = Signature.from_positions(0, 1, 5)
    b = Signature.from_positions(1, 5, 7)
    assert (a & b) == Signature.from_positions(1, 5)


def test_subset_invariant():
    entity = Signature.from_positions(2, 3, 9)
    system = Signature.from_positions(2, 9)
    assert (entity & system) == system
    assert (system & entity) != entity


def test_int_round_trip():
    sig = Signature.from_positions(1, 8, 30)
    assert Signature(int(sig)) == sig


def test_iter_yields_positions_in_order():
    sig = Signature.from_positions(12, 0, 7)
    assert list(sig) == [0, 7, 12]


def test_too_wide_bits_rejected():
    with pytest.raises(ValueError):
        Signature(1 << MAX_COMPONENTS)


def test_copy_is_independent():
    sig = Signature.from_positions(1)
    dup = copy.copy(sig)
    dup.set(2)
    assert not sig.test(2)
    assert dup.test(1)


def test_system_entities_are_ordered():
    system = System()
    for entity in (5, 1, 3, 1):
        system.entities.add(entity)
    assert list(system.entities) == [1, 3, 5]