from __future__ import annotations

import abc
import collections.abc

import numpy as np


def _defines(C, methods):
    # object supplies default comparisons, so it never counts
    for method in methods:
        for B in C.__mro__[:-1]:
            if method in B.__dict__:
                if B.__dict__[method] is None:
                    return NotImplemented
                break
        else:
            return NotImplemented
    return True


class _Capability(metaclass=abc.ABCMeta):
    """A type has the capability if some class in its MRO, other than
    object, defines every method in ``_methods``."""

    __slots__ = ()

    @classmethod
    def __subclasshook__(cls, C):
        if '_methods' in cls.__dict__:
            return _defines(C, cls._methods)
        return NotImplemented


class PartialEq(_Capability):
    __slots__ = ()
    _methods = ('__eq__',)


Eq = PartialEq


class PartialOrd(_Capability):
    __slots__ = ()
    _methods = ('__lt__',)


Hash = collections.abc.Hashable


class Not(_Capability):
    __slots__ = ()
    _methods = ('__invert__',)


def not_(value: Not):
    # ~True is -2, so bools negate logically
    if isinstance(value, (bool, np.bool_)):
        return not value
    return ~value
