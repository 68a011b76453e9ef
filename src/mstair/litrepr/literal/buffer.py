# File: src/mstair/litrepr/literal/buffer.py
"""
Append-only text buffer that tracks the current indentation level.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


__all__ = ["IndentBuffer"]


class IndentBuffer:
    """
    Text accumulator for one rendering call.

    `indent` is written `level` times by append_indent(). The level only
    changes through indented(), which restores it on exit, so it can never
    go below its starting value.
    """

    __slots__ = ("_chunks", "indent", "level")

    _chunks: list[str]
    indent: str
    level: int

    def __init__(self, indent: str = "", level: int = 0) -> None:
        if level < 0:
            raise ValueError(f"indentation level must not be negative, got {level}")
        self._chunks = []
        self.indent = indent
        self.level = level

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)

    def __str__(self) -> str:
        return self.getvalue()

    def __repr__(self) -> str:
        return f"IndentBuffer(level={self.level}, text={self.getvalue()!r})"

    def append(self, text: str) -> None:
        if text:
            self._chunks.append(text)

    def append_newline(self) -> None:
        self._chunks.append("\n")

    def append_indent(self) -> None:
        """Write the indent string once per current level."""
        self.append(self.indent * self.level)

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Increase the level by one for the duration of the block."""
        self.level += 1
        try:
            yield
        finally:
            self.level -= 1

    def getvalue(self) -> str:
        text = "".join(self._chunks)
        self._chunks = [text] if text else []
        return text


# End of file: src/mstair/litrepr/literal/buffer.py
