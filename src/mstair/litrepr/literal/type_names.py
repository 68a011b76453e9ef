# File: src/mstair/litrepr/literal/type_names.py
"""
Display names for classes, typing constructs and ctypes types.

Builtins print bare, everything else as ``module.QualName``. ctypes pointer
and array types, whose own names are generated (``LP_Node``,
``c_int_Array_3``), print in reference notation instead: ``*Node``, ``[3]c_int``.
"""

import ctypes
import types
import typing
from functools import cache
from typing import Annotated, Any, ForwardRef, TypeVar, Union, get_args, get_origin


__all__ = ["type_name"]

_SHORT_NAMES: dict[type, str] = {
    bytes: "bytes",
    bytearray: "bytearray",
    memoryview: "memoryview",
    type(None): "None",
    ctypes.c_ubyte: "byte",
}


def type_name(typ: Any, pkg: str = "") -> str:
    """
    Return the display name of a type descriptor.

    :param typ: A class, typing construct, TypeVar, forward reference or ctypes type.
    :param pkg: Module prefix to drop from qualified class names.
    :return: Name such as ``list[int]``, ``app.models.User | None`` or ``*Node``.
    """
    try:
        return _type_name_cached(typ, pkg)
    except TypeError:  # unhashable typing construct, e.g. Literal[[1]]
        return _type_name(typ, pkg)


@cache
def _type_name_cached(typ: Any, pkg: str) -> str:
    return _type_name(typ, pkg)


def _type_name(typ: Any, pkg: str) -> str:
    if typ is None:
        return "None"
    if typ is Any:
        return "Any"
    if typ is Ellipsis:
        return "..."
    if isinstance(typ, str):
        return typ
    if isinstance(typ, ForwardRef):
        return typ.__forward_arg__
    if isinstance(typ, TypeVar):
        return typ.__name__
    if isinstance(typ, list):  # Callable parameter list
        return "[" + ", ".join(_type_name(arg, pkg) for arg in typ) + "]"

    origin = get_origin(typ)
    args = get_args(typ)
    if origin is Annotated:
        return _type_name(args[0], pkg)
    if origin is Union or origin is types.UnionType:
        return " | ".join(_type_name(arg, pkg) for arg in args)
    if origin is typing.Literal:
        return "Literal[" + ", ".join(repr(arg) for arg in args) + "]"
    if origin is not None:
        base = _type_name(origin, pkg)
        if not args:
            return base
        return base + "[" + ", ".join(_type_name(arg, pkg) for arg in args) + "]"

    if isinstance(typ, type):
        if issubclass(typ, ctypes._Pointer):
            return "*" + _type_name(typ._type_, pkg)
        if issubclass(typ, ctypes.Array):
            return f"[{typ._length_}]{_type_name(typ._type_, pkg)}"
        return _class_name(typ, pkg)
    return repr(typ)


def _class_name(cls: type, pkg: str) -> str:
    short = _SHORT_NAMES.get(cls)
    if short is not None:
        return short
    qualname = cls.__qualname__.rpartition("<locals>.")[2]
    module = cls.__module__
    if module == "builtins":
        return qualname
    if pkg and (module == pkg or module.startswith(pkg + ".")):
        module = module[len(pkg) + 1 :]
    return f"{module}.{qualname}" if module else qualname


# End of file: src/mstair/litrepr/literal/type_names.py
