# File: src/mstair/litrepr/literal/literal_api.py
"""
Public entry points for rendering values as source-like literals.

Exports:
- format_literal(): render a value with the given options.
- format_literal_indented(): render starting at a nesting level, for embedding.
- format_literal_bytes(): render to UTF-8 bytes.
- print_literal(): write ``desc: literal`` and a newline.
- println_literal(): write a literal and a newline.
- is_literal_safe(): test whether text can be written as a raw literal.
"""

import sys
from typing import IO, Any

from mstair.litrepr.base.types import MISSING
from mstair.litrepr.literal.conf import CONF_DEFAULT, Conf
from mstair.litrepr.literal.text import is_literal_safe


__all__ = [
    "format_literal",
    "format_literal_bytes",
    "format_literal_indented",
    "is_literal_safe",
    "print_literal",
    "println_literal",
]


def format_literal(value: Any, conf: Conf = CONF_DEFAULT, *, typ: Any = MISSING) -> str:
    """
    Render `value` as a source-like literal.

    :param value: Any value, including cyclic graphs.
    :param conf: Rendering options; multi-line with zero fields elided by default.
    :param typ: Declared type of the value, for typed nulls and conversions.
    :return: The literal text.

    Example:
        >>> from mstair.litrepr.literal.conf import CONF_SINGLE
        >>> format_literal({"a": [1, 2]}, CONF_SINGLE)
        'dict{"a": list{1, 2}}'
    """
    return conf.fmt().format(value, typ)


def format_literal_indented(
    value: Any,
    level: int,
    conf: Conf = CONF_DEFAULT,
    *,
    typ: Any = MISSING,
) -> str:
    """
    Render `value` as if nested `level` levels deep.

    The first line carries no indent, since the caller has already written
    one; continuation lines and the closing brace are indented from `level`.

    :raises ValueError: If `level` is negative.
    """
    return conf.fmt(level).format(value, typ)


def format_literal_bytes(
    value: Any,
    conf: Conf = CONF_DEFAULT,
    *,
    level: int = 0,
    typ: Any = MISSING,
) -> bytes:
    """Render `value` and return the literal encoded as UTF-8."""
    text = conf.fmt(level).format(value, typ)
    return text.encode("utf-8", errors="backslashreplace")


def print_literal(desc: str, value: Any, conf: Conf | None = None, *, file: IO[str] | None = None) -> None:
    """
    Write ``desc: literal`` and a newline.

    :param desc: Label printed before the literal.
    :param value: The value to render.
    :param conf: Options; None reads them from the environment and any .env file.
    :param file: Output stream, standard output by default.
    """
    conf = conf if conf is not None else Conf.from_environment()
    out = file if file is not None else sys.stdout
    out.write(f"{desc}: {format_literal(value, conf)}\n")


def println_literal(value: Any, conf: Conf | None = None, *, file: IO[str] | None = None) -> None:
    """Write the literal of `value` and a newline; options as for print_literal()."""
    conf = conf if conf is not None else Conf.from_environment()
    out = file if file is not None else sys.stdout
    out.write(format_literal(value, conf) + "\n")


# End of file: src/mstair/litrepr/literal/literal_api.py
