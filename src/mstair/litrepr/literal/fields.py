# File: src/mstair/litrepr/literal/fields.py
"""
Record introspection: visible fields, their declared types, and zero values.

Records are dataclass instances, named tuples, ctypes structures and unions,
and plain objects with a `__dict__` or `__slots__`. Fields whose name starts
with an underscore are private and never listed.
"""

import ctypes
import dataclasses
import numbers
import typing
from collections import deque
from collections.abc import Mapping, Sequence, Set
from functools import cache
from typing import Any

from mstair.litrepr.literal.model import RecordField


__all__ = [
    "is_namedtuple",
    "is_record_value",
    "is_zero",
    "record_fields",
]


def is_namedtuple(value: object) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_record_value(value: object) -> bool:
    """Return True for the record shapes that carry a field list of their own."""
    if isinstance(value, type):
        return False
    return (
        isinstance(value, (ctypes.Structure, ctypes.Union))
        or dataclasses.is_dataclass(value)
        or is_namedtuple(value)
    )


@cache
def _type_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError, AttributeError):
        # Unresolvable forward references keep their string form.
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            hints.update(vars(klass).get("__annotations__", {}))
        return hints


@cache
def _ctypes_fields(cls: type) -> tuple[RecordField, ...]:
    anonymous = set(getattr(cls, "_anonymous_", ()))
    fields: list[RecordField] = []
    for klass in reversed(cls.__mro__):
        for entry in vars(klass).get("_fields_", ()):
            name, ctype = entry[0], entry[1]
            if not name.startswith("_"):
                fields.append(RecordField(name, ctype, name in anonymous))
    return tuple(fields)


@cache
def _dataclass_fields(cls: type) -> tuple[RecordField, ...]:
    hints = _type_hints(cls)
    return tuple(
        RecordField(field.name, hints.get(field.name, Any), bool(field.metadata.get("anonymous")))
        for field in dataclasses.fields(cls)
        if field.repr and not field.name.startswith("_")
    )


@cache
def _namedtuple_fields(cls: type) -> tuple[RecordField, ...]:
    hints = _type_hints(cls)
    return tuple(RecordField(name, hints.get(name, Any)) for name in cls._fields)


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(name for name in slots if name not in ("__dict__", "__weakref__"))
    return names


def _instance_fields(value: object) -> tuple[RecordField, ...]:
    names = _slot_names(type(value))
    names.extend(name for name in getattr(value, "__dict__", {}) if name not in names)
    try:
        hints = _type_hints(type(value))
    except TypeError:  # unhashable metaclass instance
        hints = {}
    return tuple(RecordField(name, hints.get(name, Any)) for name in names if not name.startswith("_"))


def record_fields(value: object) -> tuple[RecordField, ...]:
    """
    Return the visible fields of a record value, in declaration order.

    Dataclass fields declared with ``repr=False`` are hidden. A field is
    anonymous when listed in a ctypes `_anonymous_` or declared with
    ``metadata=ANONYMOUS``. Plain objects list their slots followed by their
    instance attributes.

    :param value: A record instance.
    :return: The fields; attribute values are read separately with `getattr`.
    """
    cls = type(value)
    if isinstance(value, (ctypes.Structure, ctypes.Union)):
        return _ctypes_fields(cls)
    if dataclasses.is_dataclass(value):
        return _dataclass_fields(cls)
    if is_namedtuple(value):
        return _namedtuple_fields(cls)
    return _instance_fields(value)


def is_zero(value: Any, _seen: set[int] | None = None) -> bool:
    """
    Return True if `value` is the zero value of its type.

    Zero values: None, False, numeric zero, empty text and bytes, empty
    containers, a null ctypes pointer, a ctypes scalar holding 0 or None, a
    ctypes aggregate whose storage is all zero bytes, and a record whose
    visible fields are all zero. A record reached again through its own
    fields is non-zero.

    >>> is_zero(0.0), is_zero(""), is_zero([0])
    (True, True, False)
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return not value
    if isinstance(value, numbers.Number):
        return value == 0
    if isinstance(value, memoryview):
        return value.nbytes == 0
    if isinstance(value, ctypes._Pointer):
        return not value
    if isinstance(value, ctypes._SimpleCData):
        return not value.value
    if isinstance(value, (ctypes.Structure, ctypes.Union, ctypes.Array)):
        return not any(bytes(value))
    if is_record_value(value):
        return _is_zero_record(value, set() if _seen is None else _seen)
    if isinstance(value, (Sequence, Mapping, Set, deque)):
        return len(value) == 0
    return False


def _is_zero_record(value: object, seen: set[int]) -> bool:
    if id(value) in seen:
        return False
    seen.add(id(value))
    return all(is_zero(getattr(value, f.name, None), seen) for f in record_fields(value))


# End of file: src/mstair/litrepr/literal/fields.py
