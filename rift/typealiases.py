from __future__ import annotations

import builtins
import ctypes
from dataclasses import dataclass
import numpy as np
import typing


@dataclass(frozen=True)
class TypeInfo:
    name: str
    np_type: typing.Type[np.generic]
    ctype: object
    py_type: typing.Union[typing.Type[int], typing.Type[float], typing.Type[builtins.bool], typing.Type[str]]

    @property
    def is_integer(self) -> builtins.bool:
        return issubclass(self.np_type, np.integer)

    @property
    def is_signed(self) -> builtins.bool:
        return issubclass(self.np_type, (np.signedinteger, np.floating))

    @property
    def bits(self) -> int:
        return np.dtype(self.np_type).itemsize * 8


_known_types = [
    TypeInfo('isize', np.intp, ctypes.c_ssize_t, int),
    TypeInfo('i8', np.int8, ctypes.c_int8, int),
    TypeInfo('i16', np.int16, ctypes.c_int16, int),
    TypeInfo('i32', np.int32, ctypes.c_int32, int),
    TypeInfo('i64', np.int64, ctypes.c_int64, int),
    TypeInfo('usize', np.uintp, ctypes.c_size_t, int),
    TypeInfo('u8', np.uint8, ctypes.c_uint8, int),
    TypeInfo('u16', np.uint16, ctypes.c_uint16, int),
    TypeInfo('u32', np.uint32, ctypes.c_uint32, int),
    TypeInfo('u64', np.uint64, ctypes.c_uint64, int),
    TypeInfo('f32', np.float32, ctypes.c_float, float),
    TypeInfo('f64', np.float64, ctypes.c_double, float),
    TypeInfo('bool', np.bool_, ctypes.c_bool, builtins.bool),
    TypeInfo('char', np.str_, ctypes.c_wchar, str),
]

_by_name = {t.name: t for t in _known_types}


def type_info(*,
              name: str = None,
              np_type: typing.Type[np.generic] = None,
              ctype: object = None,
              py_type: type = None) -> TypeInfo:
    # must specify exactly one query parameter
    if sum([int(name is not None),
            int(np_type is not None),
            int(ctype is not None),
            int(py_type is not None)]) != 1:
        raise ValueError('type_info takes exactly one query parameter')
    # python type overrides
    if py_type is not None:
        if py_type is int:
            np_type = np.int64
        elif py_type is float:
            np_type = np.float64
        elif py_type is builtins.bool:
            np_type = np.bool_
        elif py_type is str:
            np_type = np.str_
        else:
            raise ValueError(f'bad py_type: {py_type}')
    if name is not None:
        if name in _by_name:
            return _by_name[name]
        raise ValueError(f'no type named {name!r}')
    # isize/usize share their numpy and ctypes types with a fixed-width
    # alias, so they are only reachable by name
    for t in _known_types:
        if t.name in ('isize', 'usize'):
            continue
        if np_type is not None and np.dtype(t.np_type) == np.dtype(np_type):
            return t
        if ctype is not None and t.ctype == ctype:
            return t
    raise ValueError(f'no match found for inputs {name} {np_type} {ctype} {py_type}')


def normalize_to_type_info(t) -> TypeInfo:
    if isinstance(t, TypeInfo):
        return t
    if t is int or t is float or t is builtins.bool or t is str:
        return type_info(py_type=t)
    if isinstance(t, str):
        return type_info(name=t)
    if isinstance(t, type) and issubclass(t, np.generic):
        return type_info(np_type=t)
    return type_info(ctype=t)


def bounds(t) -> typing.Tuple[typing.Any, typing.Any]:
    """(min, max) representable by an alias, as numpy scalars"""
    info = normalize_to_type_info(t)
    if info.is_integer:
        limits = np.iinfo(info.np_type)
    elif issubclass(info.np_type, np.floating):
        limits = np.finfo(info.np_type)
    else:
        raise ValueError(f'{info.name} has no numeric bounds')
    return info.np_type(limits.min), info.np_type(limits.max)


isize = np.intp
i8 = np.int8
i16 = np.int16
i32 = np.int32
i64 = np.int64

usize = np.uintp
u8 = np.uint8
u16 = np.uint16
u32 = np.uint32
u64 = np.uint64

f32 = np.float32
f64 = np.float64

bool = builtins.bool

char = str
