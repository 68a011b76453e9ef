# File: src/mstair/litrepr/literal/formatter.py
"""
Recursive literal formatter.

`Fmt` walks a value graph and writes a source-like literal into an
`IndentBuffer`. Composites print as ``TypeName{...}``; a composite's type
name is left out when the enclosing slot's declared type is closed and the
runtime type equals it. References already printed in the same call render
as ``/* visited */ (TypeName)(0xADDR)``, so cyclic graphs terminate.
"""

from __future__ import annotations

import ctypes
import math
from collections import UserString
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from mstair.litrepr.base.types import LITERAL_NATIVE_TYPES, MISSING
from mstair.litrepr.literal.buffer import IndentBuffer
from mstair.litrepr.literal.classify import classify, has_identity, is_nil, scalar_view
from mstair.litrepr.literal.declared import (
    is_default_literal_type,
    is_open_type,
    mapping_item_types,
    runtime_matches,
    sequence_item_type,
    unwrap_declared,
)
from mstair.litrepr.literal.fields import is_zero, record_fields
from mstair.litrepr.literal.model import (
    Kind,
    RecordField,
    UnrecognizedKindError,
    has_literal_method,
)
from mstair.litrepr.literal.text import bytes_as_text, is_literal_safe, quote
from mstair.litrepr.literal.type_names import type_name
from mstair.litrepr.literal.visited import VisitedSet, reference_id
from mstair.litrepr.xlogging.logger_factory import create_logger


if TYPE_CHECKING:
    from mstair.litrepr.literal.conf import Conf


__all__ = [
    "Fmt",
    "complex_literal",
    "float_literal",
]

_LOG = create_logger(__name__)


def float_literal(value: float) -> str:
    """
    Return the shortest literal that reads back as `value`.

    Infinities and NaN have no literal form and print as the Go math calls
    that produce them.
    """
    if math.isnan(value):
        return "math.NaN()"
    if math.isinf(value):
        return "math.Inf(1)" if value > 0 else "math.Inf(-1)"
    return repr(float(value))


def _complex_part(value: float) -> str:
    text = float_literal(value)
    return text[:-2] if text.endswith(".0") else text


def complex_literal(value: complex) -> str:
    """
    Return `value` in ``a+bi`` notation, without the surrounding parentheses.

    >>> complex_literal(complex(1, -2)), complex_literal(2j)
    ('1-2i', '2i')
    """
    imag = _complex_part(value.imag) + "i"
    if value.real == 0:
        return imag
    sign = "-" if math.copysign(1.0, value.imag) < 0 else "+"
    return f"{_complex_part(value.real)}{sign}{imag.removeprefix('-')}"


class Fmt:
    """
    Rendering state for one top-level value.

    A Fmt carries its options, output buffer, visited set and type-elision
    flag. It renders exactly one value; get a new one from `Conf.fmt()` for
    the next.

    Example:
        >>> from mstair.litrepr.literal.conf import CONF_SINGLE
        >>> CONF_SINGLE.fmt().format([1, 2])
        'list{1, 2}'
    """

    conf: Conf
    buf: IndentBuffer
    elide_type: bool
    visited: VisitedSet

    def __init__(self, conf: Conf, level: int = 0) -> None:
        self.conf = conf
        self.buf = IndentBuffer(conf.indent, level)
        self.elide_type = False
        self.visited = VisitedSet()
        self._used = False

    def format(self, value: Any, typ: Any = MISSING) -> str:
        """
        Render `value` and return the literal text.

        :param value: Any value.
        :param typ: Declared type of the value; defaults to its runtime type.
        :return: The literal.
        :raises RuntimeError: If this instance has already rendered a value.
        """
        if self._used:
            raise RuntimeError("Fmt renders one value only; call Conf.fmt() for another")
        self._used = True
        declared = type(value) if typ is MISSING else typ
        _LOG.trace("rendering %s declared as %s", type(value).__qualname__, self.type_name(declared))
        self.fmt_any(declared, value)
        return self.buf.getvalue()

    # ---------- dispatch ----------

    def fmt_any(self, declared: Any, value: Any) -> None:
        """Render `value` in a slot declared as `declared`."""
        rtype, plain = scalar_view(declared, value)
        if self.fmted_nil(declared, rtype, plain) or self.fmted_literal(value):
            return
        value = plain
        kind = classify(value, rtype)
        match kind:
            case Kind.NIL:
                self.fmt_nil(declared, rtype)
            case Kind.TYPE:
                self.fmt_type_descriptor(value)
            case Kind.BOOL:
                self.fmt_bool(declared, rtype, value)
            case Kind.INT | Kind.UINT:
                self.fmt_int(declared, rtype, value)
            case Kind.BYTE:
                self.fmt_byte(declared, rtype, value)
            case Kind.ADDRESS:
                self.fmt_address(declared, rtype, value)
            case Kind.FLOAT:
                self.fmt_float(declared, rtype, value)
            case Kind.COMPLEX:
                self.fmt_complex(declared, rtype, value)
            case Kind.STRING:
                self.fmt_string(declared, rtype, value)
            case Kind.BYTES:
                self.fmt_bytes(declared, rtype, value)
            case Kind.ENUM:
                self.fmt_enum(value)
            case Kind.SEQUENCE:
                self.fmt_sequence(declared, value)
            case Kind.MAPPING:
                self.fmt_mapping(declared, value)
            case Kind.REFERENCE:
                self.fmt_reference(value)
            case Kind.RECORD:
                self.fmt_record(declared, value)
            case Kind.CHANNEL | Kind.FUNCTION:
                self.fmt_unformattable(value)
            case Kind.OPAQUE:
                self.fmt_opaque(value)
            case _:
                raise UnrecognizedKindError(kind, value)

    def fmt_elided(self, declared: Any, value: Any) -> None:
        """Render a container element; its type name is omitted when the slot is closed."""
        with self.elided(not is_open_type(declared)):
            self.fmt_any(declared, value)

    @contextmanager
    def elided(self, elide: bool) -> Iterator[None]:
        previous, self.elide_type = self.elide_type, elide
        try:
            yield
        finally:
            self.elide_type = previous

    # ---------- type names ----------

    def type_name(self, typ: Any) -> str:
        return type_name(typ, self.conf.pkg)

    def expr_type_name(self, typ: Any) -> str:
        """Type name usable before a parenthesized operand."""
        name = self.type_name(typ)
        if name.startswith("*") or " | " in name:
            return f"({name})"
        return name

    def composite_type_name(self, declared: Any, value: Any) -> str:
        if runtime_matches(declared, value):
            return self.type_name(unwrap_declared(declared))
        return self.type_name(type(value))

    def fmt_type_name_opt(self, declared: Any, value: Any) -> None:
        if self.elide_type and runtime_matches(declared, value):
            return
        self.buf.append(self.composite_type_name(declared, value))

    def fmt_ident(self, pkg: str, name: str) -> None:
        """Write `pkg.name`, or just `name` inside that package."""
        if self.conf.pkg != pkg:
            self.buf.append(pkg + ".")
        self.buf.append(name)

    @contextmanager
    def conversion(self, declared: Any, rtype: Any) -> Iterator[None]:
        """Wrap the block in ``TypeName(...)`` when the literal alone would not imply `rtype`."""
        wrap = rtype not in LITERAL_NATIVE_TYPES and is_open_type(declared)
        if wrap:
            self.buf.append(self.expr_type_name(rtype) + "(")
        yield
        if wrap:
            self.buf.append(")")

    # ---------- scalars ----------

    def fmted_nil(self, declared: Any, rtype: Any, value: Any) -> bool:
        if not is_nil(value):
            return False
        self.fmt_nil(declared, rtype)
        return True

    def fmt_nil(self, declared: Any, rtype: Any) -> None:
        """Write ``nil``; a typed null in an open slot becomes ``(*T)(nil)``."""
        if rtype is type(None) or not is_open_type(declared):
            self.buf.append("nil")
            return
        self.buf.append(self.expr_type_name(rtype) + "(nil)")

    def fmted_literal(self, value: Any) -> bool:
        if not has_literal_method(value):
            return False
        self.buf.append(value.__literal__())
        return True

    def fmt_type_descriptor(self, value: Any) -> None:
        self.buf.append(f"type[{self.type_name(value)}]")

    def fmt_bool(self, declared: Any, rtype: Any, value: bool) -> None:
        with self.conversion(declared, rtype):
            self.buf.append("true" if value else "false")

    def fmt_int(self, declared: Any, rtype: Any, value: int) -> None:
        with self.conversion(declared, rtype):
            self.buf.append(str(int(value)))

    def fmt_byte(self, declared: Any, rtype: Any, value: int | bytes) -> None:
        code = value[0] if isinstance(value, bytes) else value
        with self.conversion(declared, rtype):
            self.buf.append(f"0x{code:02x}")

    def fmt_address(self, declared: Any, rtype: Any, value: int) -> None:
        with self.conversion(declared, rtype):
            self.buf.append(f"0x{value:x}")

    def fmt_float(self, declared: Any, rtype: Any, value: float) -> None:
        with self.conversion(declared, rtype):
            self.buf.append(float_literal(value))

    def fmt_complex(self, declared: Any, rtype: Any, value: complex) -> None:
        """Write ``(a+bi)``; a conversion wrapper supplies the parentheses itself."""
        if rtype not in LITERAL_NATIVE_TYPES and is_open_type(declared):
            self.buf.append(f"{self.expr_type_name(rtype)}({complex_literal(value)})")
        else:
            self.buf.append(f"({complex_literal(value)})")

    def fmt_string(self, declared: Any, rtype: Any, value: str | UserString) -> None:
        with self.conversion(declared, rtype):
            self.fmt_text(str(value))

    def fmt_text(self, text: str) -> None:
        if self.conf.is_multi and is_literal_safe(text):
            self.buf.append(f"`{text}`")
        else:
            self.buf.append(quote(text))

    def fmt_bytes(self, declared: Any, rtype: Any, value: bytes | bytearray | memoryview) -> None:
        """
        Write printable UTF-8 as ``TypeName(text)``, anything else as a hex byte list.

        The text form always names the type, since a bare string literal
        would read back as text.
        """
        data = bytes(value)
        text = bytes_as_text(data)
        if text is None:
            self.fmt_bytes_hex(declared, value, data)
            return
        self.buf.append(self.expr_type_name(rtype) + "(")
        self.fmt_text(text)
        self.buf.append(")")

    def fmt_bytes_hex(self, declared: Any, value: Any, data: bytes) -> None:
        self.fmt_type_name_opt(declared, value)
        self.buf.append("{" + ", ".join(f"0x{byte:02x}" for byte in data) + "}")

    def fmt_enum(self, value: Any) -> None:
        name = value.name
        if not name or not name.isidentifier():  # flag combinations
            self.fmt_opaque(value)
            return
        self.buf.append(f"{self.type_name(type(value))}.{name}")

    def fmt_unformattable(self, value: Any) -> None:
        """Channels and functions have no literal; print their type and identity."""
        self.buf.append(f"{self.expr_type_name(type(value))}(0x{id(value):x})")

    def fmt_opaque(self, value: Any) -> None:
        try:
            text = repr(value)
        except Exception as e:
            _LOG.warning("repr() of %s failed: %s", type(value).__qualname__, str(e))
            text = f"<unrenderable {type(value).__qualname__}: {e}>"
        self.buf.append(text)

    # ---------- references ----------

    def fmted_visited(self, value: Any) -> bool:
        """Write the back-reference form and return True if `value` was already printed."""
        if not has_identity(value) or self.visited.add(value):
            return False
        ref = reference_id(value)
        _LOG.trace("cycle or shared reference to %s", type(value).__qualname__)
        self.buf.append(f"/* visited */ ({self.type_name(type(value))})(0x{ref.address:x})")
        return True

    def fmt_reference(self, value: Any) -> None:
        """
        Render a non-null ctypes pointer.

        Pointers to structures, unions and arrays print as ``&Target{...}``.
        Others print as ``ctypes.pointer[T](target)``, with ``[T]`` left out
        when the target literal already implies it.
        """
        if self.fmted_visited(value):
            return
        target_type = type(value)._type_
        target = value.contents
        with self.elided(False):
            if isinstance(target, (ctypes.Structure, ctypes.Union, ctypes.Array)):
                self.buf.append("&")
                self.fmt_any(target_type, target)
                return
            self.fmt_ident("ctypes", "pointer")
            if not is_default_literal_type(target_type):
                self.buf.append(f"[{self.type_name(target_type)}]")
            self.buf.append("(")
            self.fmt_any(target_type, target)
            self.buf.append(")")

    # ---------- composites ----------

    def fmt_block(self, entries: list[Any], fmt_entry: Callable[[Any], None]) -> None:
        """
        Write ``{a, b}`` on one line, or one entry per line with trailing commas.
        """
        if self.conf.is_single:
            self.buf.append("{")
            for index, entry in enumerate(entries):
                if index:
                    self.buf.append(", ")
                fmt_entry(entry)
            self.buf.append("}")
            return
        self.buf.append("{")
        self.buf.append_newline()
        with self.buf.indented():
            for entry in entries:
                self.buf.append_indent()
                fmt_entry(entry)
                self.buf.append(",")
                self.buf.append_newline()
        self.buf.append_indent()
        self.buf.append("}")

    def fmt_sequence(self, declared: Any, value: Any) -> None:
        items = list(value)
        if items and self.fmted_visited(value):
            return
        self.fmt_type_name_opt(declared, value)
        if not items or (isinstance(value, ctypes.Array) and is_zero(value)):
            self.buf.append("{}")
            return
        entries = [(sequence_item_type(declared, value, index), item) for index, item in enumerate(items)]
        self.fmt_block(entries, lambda entry: self.fmt_elided(*entry))

    def fmt_mapping(self, declared: Any, value: Any) -> None:
        items = list(value.items())
        if items and self.fmted_visited(value):
            return
        self.fmt_type_name_opt(declared, value)
        if not items:
            self.buf.append("{}")
            return
        key_type, value_type = mapping_item_types(declared)

        def fmt_entry(entry: tuple[Any, Any]) -> None:
            key, item = entry
            self.fmt_elided(key_type, key)
            self.buf.append(": ")
            self.fmt_elided(value_type, item)

        self.fmt_block(items, fmt_entry)

    def fmt_record(self, declared: Any, value: Any) -> None:
        if self.fmted_visited(value):
            return
        self.fmt_type_name_opt(declared, value)
        fields = [
            (field, item)
            for field in record_fields(value)
            if (item := getattr(value, field.name, MISSING)) is not MISSING
        ]
        with self.elided(False):
            if not fields:
                self.buf.append("{}")
            elif len(fields) == 1 and fields[0][0].anonymous:
                self.fmt_record_unit(*fields[0])
            elif self.conf.is_single:
                self.fmt_record_single(fields)
            else:
                self.fmt_record_multi(fields)

    def fmt_record_unit(self, field: RecordField, item: Any) -> None:
        """A record wrapping one anonymous field prints the field value without its name."""
        if self.conf.skip_zero_fields and is_zero(item):
            self.buf.append("{}")
            return
        if self.conf.is_single:
            self.buf.append("{")
            self.fmt_any(field.declared, item)
            self.buf.append("}")
            return
        self.buf.append("{")
        self.buf.append_newline()
        with self.buf.indented():
            self.buf.append_indent()
            self.fmt_any(field.declared, item)
        self.buf.append_newline()
        self.buf.append_indent()
        self.buf.append("}")

    def fmt_record_single(self, fields: list[tuple[RecordField, Any]]) -> None:
        shown = [(field, item) for field, item in fields if not self.skipped(item)]
        self.buf.append("{")
        for index, (field, item) in enumerate(shown):
            if index:
                self.buf.append(", ")
            self.fmt_field(field, item)
        self.buf.append("}")

    def fmt_record_multi(self, fields: list[tuple[RecordField, Any]]) -> None:
        """
        With zero fields elided, nothing left prints ``{}`` and a single
        survivor stays on one line. Otherwise each field gets its own line.
        """
        if self.conf.skip_zero_fields:
            fields = [(field, item) for field, item in fields if not is_zero(item)]
            if not fields:
                self.buf.append("{}")
                return
            if len(fields) == 1:
                self.buf.append("{")
                self.fmt_field(*fields[0])
                self.buf.append("}")
                return
        self.fmt_block(fields, lambda entry: self.fmt_field(*entry))

    def skipped(self, item: Any) -> bool:
        return self.conf.skip_zero_fields and is_zero(item)

    def fmt_field(self, field: RecordField, item: Any) -> None:
        self.buf.append(field.name + ": ")
        self.fmt_any(field.declared, item)


# End of file: src/mstair/litrepr/literal/formatter.py
