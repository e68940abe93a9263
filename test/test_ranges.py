import pytest
import numpy as np
from rift.ranges import (ClosedRange, PartialRangeFrom, PartialRangeThrough, PartialRangeUpTo, Range,
                         closed, half_open, range_from, range_through, range_to)
import itertools
import random

import logging

logging.basicConfig(level=logging.DEBUG)
log = logging.getLogger()

bounds = list(range(-6, 7))
probes = list(range(-10, 11))

# list of pairs of (lower, upper)
bounded = [
    (a, b)
    for a in bounds
    for b in bounds
    if a <= b
]


@pytest.mark.parametrize("v", bounds)
def test_range_to(v):
    r = range_to(v)
    assert isinstance(r, PartialRangeUpTo)
    for i in probes:
        assert r.contains(i) == (i < v)
        assert (i in r) == (i < v)


@pytest.mark.parametrize("v", bounds)
def test_range_through(v):
    r = range_through(v)
    assert isinstance(r, PartialRangeThrough)
    for i in probes:
        assert r.contains(i) == (i <= v)


@pytest.mark.parametrize("v", bounds)
def test_range_from(v):
    r = range_from(v)
    assert isinstance(r, PartialRangeFrom)
    for i in probes:
        assert r.contains(i) == (v <= i)


@pytest.mark.parametrize("a, b", bounded)
def test_half_open_matches_builtin(a, b):
    r = half_open(a, b)
    assert isinstance(r, Range)
    native = range(a, b)
    for i in probes:
        assert (i in r) == (i in native)
    assert list(r) == list(native)
    assert len(r) == len(native)
    assert r.is_empty == (len(native) == 0)


@pytest.mark.parametrize("a, b", bounded)
def test_closed_matches_builtin(a, b):
    r = closed(a, b)
    assert isinstance(r, ClosedRange)
    native = range(a, b + 1)
    for i in probes:
        assert (i in r) == (i in native)
    assert list(r) == list(native)
    assert len(r) == len(native)
    assert not r.is_empty


@pytest.mark.parametrize("x", [random.uniform(-10, 10) for x in range(20)])
def test_float_bounds(x):
    assert (x in half_open(-5.0, 5.0)) == (-5.0 <= x < 5.0)
    assert (x in closed(-5.0, 5.0)) == (-5.0 <= x <= 5.0)
    assert (x in range_to(5.0)) == (x < 5.0)
    assert (x in range_through(5.0)) == (x <= 5.0)
    assert (x in range_from(5.0)) == (x >= 5.0)


def test_doc_examples():
    through_five = range_through(5.0)
    assert through_five.contains(4.0)
    assert through_five.contains(5.0)
    assert not through_five.contains(6.0)

    up_to_five = range_to(5.0)
    assert up_to_five.contains(4.0)
    assert not up_to_five.contains(5.0)

    less_than_five = half_open(0.0, 5.0)
    assert less_than_five.contains(3.14)
    assert not less_than_five.contains(5.0)

    lowercase = closed('a', 'z')
    assert lowercase.contains('z')
    assert not lowercase.contains('A')


def test_slicing():
    numbers = [10, 20, 30, 40, 50, 60, 70]
    assert numbers[range_to(3).to_slice()] == [10, 20, 30]
    assert numbers[range_through(3).to_slice()] == [10, 20, 30, 40]
    assert numbers[range_from(3).to_slice()] == [40, 50, 60, 70]
    assert numbers[half_open(1, 3).to_slice()] == [20, 30]
    assert numbers[closed(1, 3).to_slice()] == [20, 30, 40]
    assert numbers[range_through(-1).to_slice()] == numbers
    assert numbers[closed(-3, -1).to_slice()] == [50, 60, 70]


def test_numpy_bounds():
    r = half_open(np.int8(0), np.int8(4))
    assert list(r) == [0, 1, 2, 3]
    assert np.uint32(2) in r
    assert np.int8(3) in closed(np.int8(0), np.int8(3))


def test_partial_range_from_iterates():
    assert list(itertools.islice(range_from(3), 4)) == [3, 4, 5, 6]


@pytest.mark.parametrize("make", [
    lambda: half_open(2, 1),
    lambda: closed(2, 1),
    lambda: half_open(float('nan'), 1.0),
    lambda: closed(0.0, float('nan')),
    lambda: range_to(float('nan')),
    lambda: range_through(np.float32('nan')),
    lambda: range_from(float('nan')),
])
def test_preconditions(make):
    with pytest.raises(ValueError):
        make()


def test_non_integer_ranges_do_not_iterate():
    with pytest.raises(TypeError):
        list(half_open(0.0, 2.0))
    with pytest.raises(TypeError):
        closed('a', 'c').to_slice()


@pytest.mark.parametrize("a, b", random.sample(bounded, 10))
@pytest.mark.parametrize("c, d", random.sample(bounded, 10))
def test_overlaps(a, b, c, d):
    def overlaps_native(x, y):
        return bool(set(x) & set(y))

    assert half_open(a, b).overlaps(half_open(c, d)) == overlaps_native(range(a, b), range(c, d))
    assert half_open(a, b).overlaps(closed(c, d)) == overlaps_native(range(a, b), range(c, d + 1))
    assert closed(a, b).overlaps(half_open(c, d)) == overlaps_native(range(a, b + 1), range(c, d))
    assert closed(a, b).overlaps(closed(c, d)) == overlaps_native(range(a, b + 1), range(c, d + 1))


def test_clamped():
    assert closed(0, 10).clamped(closed(2, 5)) == closed(2, 5)
    assert closed(3, 4).clamped(closed(0, 10)) == closed(3, 4)
    assert closed(-5, -1).clamped(closed(0, 10)) == closed(0, 0)


def test_value_semantics():
    assert half_open(1, 3) == half_open(1, 3)
    assert half_open(1, 3) != closed(1, 3)
    assert hash(closed(1, 3)) == hash(closed(1, 3))
    assert range_to(3) != range_through(3)


@pytest.mark.parametrize("r, expected", [
    (half_open(0.0, 1.0), True),
    (half_open(0.5, 0.5), False),
    (half_open('a', 'c'), True),
    (half_open('b', 'b'), False),
    (closed(0.0, 0.0), True),
    (closed('a', 'z'), True),
    (range_to(0.5), True),
    (range_through('m'), True),
    (range_from(-1.5), True),
    (half_open(0, 0), False),
    (closed(3, 3), True),
])
def test_truthiness(r, expected):
    assert bool(r) == expected
    assert (r or None) is (r if expected else None)


@pytest.mark.parametrize("make", [
    lambda: closed(-1, 0),
    lambda: closed(-2, 3),
    lambda: half_open(-1, 1),
    lambda: half_open(-3, 0),
])
def test_mixed_sign_slices(make):
    with pytest.raises(ValueError):
        make().to_slice()


def test_negative_slices():
    numbers = [10, 20, 30, 40, 50, 60, 70]
    assert numbers[half_open(-3, -1).to_slice()] == [50, 60]
    assert numbers[closed(-2, -1).to_slice()] == [60, 70]
