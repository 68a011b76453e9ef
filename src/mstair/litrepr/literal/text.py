# File: src/mstair/litrepr/literal/text.py
"""
Quoting rules for text literals.

Text renders either as a raw backquoted literal, which needs no escaping,
or as a double-quoted literal escaped the way Go's ``strconv.Quote`` does.
"""

import unicodedata
from typing import Final


__all__ = [
    "bytes_as_text",
    "is_literal_safe",
    "quote",
]

_BYTE_ORDER_MARK: Final[str] = "\ufeff"
_RAW_CONTROLS: Final[frozenset[str]] = frozenset("\t\n\r")

_ESCAPES: Final[dict[str, str]] = {
    "\a": r"\a",
    "\b": r"\b",
    "\f": r"\f",
    "\n": r"\n",
    "\r": r"\r",
    "\t": r"\t",
    "\v": r"\v",
    "\\": r"\\",
    '"': r"\"",
}


def _is_surrogate(char: str) -> bool:
    return "\ud800" <= char <= "\udfff"


def is_literal_safe(text: str) -> bool:
    """
    Return True if `text` can be written between backquotes unchanged.

    Rejected: lone surrogates (invalid encoding units), backquotes, the
    byte-order mark, and control characters other than tab, newline and
    carriage return.

    >>> is_literal_safe("a\\nb")
    True
    >>> is_literal_safe("a`b")
    False
    """
    for char in text:
        if char == "`" or char == _BYTE_ORDER_MARK or _is_surrogate(char):
            return False
        if char not in _RAW_CONTROLS and unicodedata.category(char) == "Cc":
            return False
    return True


def quote(text: str) -> str:
    """
    Return `text` as a double-quoted, escaped literal.

    Printable characters pass through. Other code points use ``\\xNN`` below
    0x80, ``\\uNNNN`` in the basic plane and ``\\UNNNNNNNN`` above it.
    """
    parts: list[str] = ['"']
    for char in text:
        escape = _ESCAPES.get(char)
        if escape is not None:
            parts.append(escape)
        elif char.isprintable():
            parts.append(char)
        else:
            code = ord(char)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def bytes_as_text(data: bytes) -> str | None:
    """
    Decode `data` for rendering as a text literal, or return None.

    Bytes qualify when they are valid UTF-8 and every character is printable
    or has a short escape such as ``\\n``; anything else renders better as a
    hexadecimal byte list.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return None
    if all(char.isprintable() or char in _ESCAPES for char in text):
        return text
    return None


# End of file: src/mstair/litrepr/literal/text.py
