# File: src/mstair/litrepr/literal/test_text.py
"""
Tests for raw-literal safety, double-quote escaping, and bytes-as-text decoding.
"""

import pytest

from mstair.litrepr.literal.text import bytes_as_text, is_literal_safe, quote


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", True),
        ("plain words", True),
        ("tab\tnewline\ncr\r", True),
        ("café 世界", True),
        ("back`quote", False),
        ("\ufeffbom", False),
        ("nul\x00", False),
        ("del\x7f", False),
        ("bell\a", False),
        ("lone \ud800 surrogate", False),
    ],
)
def test_is_literal_safe(text: str, expected: bool) -> None:
    assert is_literal_safe(text) is expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", '""'),
        ("hi", '"hi"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        ("a\tb\nc", '"a\\tb\\nc"'),
        ("\a\b\f\v", '"\\a\\b\\f\\v"'),
        ("\x00\x1f\x7f", '"\\x00\\x1f\\x7f"'),
        ("café", '"café"'),
        ("zero\u200bwidth", '"zero\\u200bwidth"'),
        ("\ud800", '"\\ud800"'),
        ("\U000e0001", '"\\U000e0001"'),
        ("back`quote", '"back`quote"'),
    ],
)
def test_quote(text: str, expected: str) -> None:
    assert quote(text) == expected


@pytest.mark.unit
def test_bytes_as_text_accepts_printable_utf8() -> None:
    assert bytes_as_text(b"") == ""
    assert bytes_as_text(b"hello") == "hello"
    assert bytes_as_text(b"two\nlines\t") == "two\nlines\t"
    assert bytes_as_text("café".encode()) == "café"


@pytest.mark.unit
@pytest.mark.parametrize("data", [b"\xff", b"\xc3", b"\x00", b"ok\x01", b"\x1b[0m"])
def test_bytes_as_text_rejects_binary(data: bytes) -> None:
    assert bytes_as_text(data) is None


# End of file: src/mstair/litrepr/literal/test_text.py
