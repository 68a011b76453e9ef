# File: src/mstair/litrepr/literal/declared.py
"""
Declared-type queries: openness, runtime agreement, element and entry types.

A declared type is what the enclosing context promises about a slot (a
field annotation, a container's type argument, a ctypes `_type_`). A closed
declared type fixes the runtime type, so the printed literal may omit it.
"""

import ctypes
import inspect
import types
from typing import Annotated, Any, ForwardRef, TypeVar, Union, get_args, get_origin

from mstair.litrepr.base.types import LITERAL_NATIVE_TYPES


__all__ = [
    "is_default_literal_type",
    "is_open_type",
    "mapping_item_types",
    "runtime_matches",
    "sequence_item_type",
    "unwrap_declared",
]

_NONE_TYPE = type(None)

_DEFAULT_POINTER_TARGETS: tuple[type, ...] = (
    *LITERAL_NATIVE_TYPES,
    ctypes.c_bool,
    ctypes.c_int,
    ctypes.c_double,
    ctypes.c_wchar_p,
)


def _is_union(typ: Any) -> bool:
    origin = get_origin(typ)
    return origin is Union or origin is types.UnionType


def unwrap_declared(typ: Any) -> Any:
    """
    Strip `Annotated` metadata and a single `None` alternative.

    >>> unwrap_declared(int | None)
    <class 'int'>
    """
    while True:
        if get_origin(typ) is Annotated:
            typ = get_args(typ)[0]
            continue
        if _is_union(typ):
            members = [arg for arg in get_args(typ) if arg is not _NONE_TYPE]
            if len(members) == 1:
                typ = members[0]
                continue
        return typ


def is_open_type(typ: Any) -> bool:
    """
    Return True if a slot declared as `typ` can hold values of several runtime types.

    Open: `Any`, `object`, type variables, unresolved forward references,
    unions of two or more non-None members, abstract classes and protocols.
    `Optional[X]` is as open as `X`.
    """
    typ = unwrap_declared(typ)
    if typ is Any or typ is object:
        return True
    if isinstance(typ, (TypeVar, ForwardRef, str)):
        return True
    if _is_union(typ):
        return True
    base = get_origin(typ) or typ
    if not isinstance(base, type):
        return False
    return inspect.isabstract(base) or bool(getattr(base, "_is_protocol", False))


def runtime_matches(typ: Any, value: Any) -> bool:
    """Return True if `value` is exactly an instance of the class `typ` names."""
    base = unwrap_declared(typ)
    base = get_origin(base) or base
    return isinstance(base, type) and type(value) is base


def is_default_literal_type(typ: Any) -> bool:
    """
    Return True if a pointer to `typ` needs no explicit type argument.

    These are the target types a bare literal already implies: Python's
    literal types and their closest ctypes counterparts.
    """
    return typ in _DEFAULT_POINTER_TARGETS


def sequence_item_type(typ: Any, value: Any, index: int) -> Any:
    """
    Return the declared type of element `index` of sequence `value`.

    :param typ: Declared type of the sequence itself.
    :param value: The sequence; ctypes arrays supply their own element type.
    :param index: Element position, used by fixed-length tuple annotations.
    :return: The element type, or `Any` when the declaration does not say.
    """
    if isinstance(value, ctypes.Array):
        return type(value)._type_
    base = unwrap_declared(typ)
    args = get_args(base)
    origin = get_origin(base)
    if isinstance(origin, type) and issubclass(origin, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return args[index] if index < len(args) else Any
    return args[0] if len(args) == 1 else Any


def mapping_item_types(typ: Any) -> tuple[Any, Any]:
    """Return the declared (key, value) types of a mapping, `Any` where unknown."""
    args = get_args(unwrap_declared(typ))
    if len(args) == 2:
        return args[0], args[1]
    return Any, Any


# End of file: src/mstair/litrepr/literal/declared.py
