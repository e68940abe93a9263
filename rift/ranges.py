"""
Named range constructors.

Each function stands in for a range operator and builds the range of the
matching kind, with the same membership rules as the builtin comparisons:

    range_to(v)       ..v     x < v
    range_through(v)  ..=v    x <= v
    range_from(v)     v..     v <= x
    half_open(a, b)   a..b    a <= x < b
    closed(a, b)      a..=b   a <= x <= b

Bounds can be anything ordered: ints, floats, strings, numpy scalars.
Integer ranges also iterate and slice like builtin ``range``. A bounded
range whose bounds mix negative and non-negative indices cannot be turned
into a slice.
"""
from __future__ import annotations

import itertools
import operator
from dataclasses import dataclass
import typing

import numpy as np


def _check_bound(v):
    # NaN
    if v != v:
        raise ValueError(f'range bound must compare equal to itself, got {v!r}')
    return v


def _check_ordered(lower, upper):
    _check_bound(lower)
    _check_bound(upper)
    if lower > upper:
        raise ValueError(f'range requires lower <= upper, got {lower!r} > {upper!r}')


def _is_integer(v) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, (bool, np.bool_))


def _int_bounds(*bounds) -> typing.List[int]:
    for b in bounds:
        if not _is_integer(b):
            raise TypeError(f'only integer ranges can be iterated or sliced, got {b!r}')
    return [operator.index(b) for b in bounds]


def _slice_bounds(lower, upper) -> typing.List[int]:
    lower, upper = _int_bounds(lower, upper)
    if (lower < 0) != (upper < 0):
        raise ValueError(f'slice bounds must not mix negative and non-negative indices, got {lower} and {upper}')
    return [lower, upper]


class _RangeExpression:
    def contains(self, x) -> bool:
        raise NotImplementedError

    def __contains__(self, x) -> bool:
        return self.contains(x)

    def __call__(self, x) -> bool:
        return self.contains(x)

    def __bool__(self):
        return True


@dataclass(frozen=True)
class PartialRangeUpTo(_RangeExpression):
    upper: typing.Any

    def __post_init__(self):
        _check_bound(self.upper)

    def contains(self, x) -> bool:
        return x < self.upper

    def to_slice(self) -> slice:
        upper, = _int_bounds(self.upper)
        return slice(None, upper)


@dataclass(frozen=True)
class PartialRangeThrough(_RangeExpression):
    upper: typing.Any

    def __post_init__(self):
        _check_bound(self.upper)

    def contains(self, x) -> bool:
        return x <= self.upper

    def to_slice(self) -> slice:
        upper, = _int_bounds(self.upper)
        # slice(None, 0) would drop the last element
        if upper == -1:
            return slice(None, None)
        return slice(None, upper + 1)


@dataclass(frozen=True)
class PartialRangeFrom(_RangeExpression):
    lower: typing.Any

    def __post_init__(self):
        _check_bound(self.lower)

    def contains(self, x) -> bool:
        return self.lower <= x

    def to_slice(self) -> slice:
        lower, = _int_bounds(self.lower)
        return slice(lower, None)

    def __iter__(self):
        lower, = _int_bounds(self.lower)
        return itertools.count(lower)


@dataclass(frozen=True)
class Range(_RangeExpression):
    lower: typing.Any
    upper: typing.Any

    def __post_init__(self):
        _check_ordered(self.lower, self.upper)

    def contains(self, x) -> bool:
        return self.lower <= x < self.upper

    @property
    def is_empty(self) -> bool:
        return self.lower == self.upper

    def overlaps(self, other: typing.Union[Range, ClosedRange]) -> bool:
        if self.is_empty:
            return False
        if isinstance(other, ClosedRange):
            return other.lower < self.upper and self.lower <= other.upper
        if other.is_empty:
            return False
        return other.lower < self.upper and self.lower < other.upper

    def __bool__(self):
        return not self.is_empty

    def to_range(self) -> range:
        return range(*_int_bounds(self.lower, self.upper))

    def to_slice(self) -> slice:
        return slice(*_slice_bounds(self.lower, self.upper))

    def __iter__(self):
        return iter(self.to_range())

    def __len__(self):
        return len(self.to_range())


@dataclass(frozen=True)
class ClosedRange(_RangeExpression):
    lower: typing.Any
    upper: typing.Any

    def __post_init__(self):
        _check_ordered(self.lower, self.upper)

    def contains(self, x) -> bool:
        return self.lower <= x <= self.upper

    @property
    def is_empty(self) -> bool:
        return False

    def overlaps(self, other: typing.Union[Range, ClosedRange]) -> bool:
        if isinstance(other, Range):
            return other.overlaps(self)
        return other.lower <= self.upper and self.lower <= other.upper

    def clamped(self, limits: ClosedRange) -> ClosedRange:
        lower = min(max(self.lower, limits.lower), limits.upper)
        upper = min(max(self.upper, limits.lower), limits.upper)
        return ClosedRange(lower, upper)

    def to_range(self) -> range:
        lower, upper = _int_bounds(self.lower, self.upper)
        return range(lower, upper + 1)

    def to_slice(self) -> slice:
        lower, upper = _slice_bounds(self.lower, self.upper)
        if upper == -1:
            return slice(lower, None)
        return slice(lower, upper + 1)

    def __iter__(self):
        return iter(self.to_range())

    def __len__(self):
        return len(self.to_range())


def range_to(maximum) -> PartialRangeUpTo:
    return PartialRangeUpTo(maximum)


def range_through(maximum) -> PartialRangeThrough:
    return PartialRangeThrough(maximum)


def range_from(minimum) -> PartialRangeFrom:
    return PartialRangeFrom(minimum)


def half_open(minimum, maximum) -> Range:
    return Range(minimum, maximum)


def closed(minimum, maximum) -> ClosedRange:
    return ClosedRange(minimum, maximum)
