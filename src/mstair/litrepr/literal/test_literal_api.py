# File: src/mstair/litrepr/literal/test_literal_api.py
"""
Tests for the public entry points and environment-driven options.
"""

from __future__ import annotations

import io
import os
from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from mstair.litrepr.base.config import in_desktop_mode
from mstair.litrepr.literal import conf as conf_mod
from mstair.litrepr.literal.conf import CONF_DEFAULT, CONF_FULL, CONF_SINGLE, Conf
from mstair.litrepr.literal.literal_api import (
    format_literal,
    format_literal_bytes,
    format_literal_indented,
    print_literal,
    println_literal,
)


@dataclass
class Point:
    x: int
    y: int


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear LITREPR_* vars and skip .env loading."""
    monkeypatch.setattr(conf_mod, "fs_load_dotenv", lambda *a, **k: False)
    for key in [k for k in os.environ if k.startswith("LITREPR_")]:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def desktop_mode() -> Iterator[None]:
    in_desktop_mode(override=True)
    try:
        yield
    finally:
        in_desktop_mode(unset_override=True)


# ---------- Conf ----------


@pytest.mark.unit
def test_presets() -> None:
    assert CONF_DEFAULT.is_multi and CONF_DEFAULT.skip_zero_fields
    assert CONF_FULL.is_multi and not CONF_FULL.skip_zero_fields
    assert CONF_SINGLE.is_single and not CONF_SINGLE.is_multi
    assert CONF_DEFAULT.indent == "    "


@pytest.mark.unit
def test_conf_is_immutable() -> None:
    with pytest.raises(AttributeError):
        CONF_DEFAULT.indent = ""  # type: ignore[misc]


@pytest.mark.unit
def test_from_environment_defaults(clean_env: None) -> None:
    assert Conf.from_environment() == CONF_DEFAULT


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "indent"),
    [("2", "  "), ("tab", "\t"), ("TAB", "\t"), ("", ""), ("0", ""), ("junk", "")],
)
def test_from_environment_indent(clean_env: None, monkeypatch: pytest.MonkeyPatch, raw: str, indent: str) -> None:
    monkeypatch.setenv("LITREPR_INDENT", raw)
    assert Conf.from_environment().indent == indent


@pytest.mark.unit
def test_from_environment_flags(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LITREPR_ZERO_FIELDS", "yes")
    monkeypatch.setenv("LITREPR_PKG", " app.models ")
    conf = Conf.from_environment()
    assert conf.zero_fields is True
    assert conf.pkg == "app.models"


@pytest.mark.unit
def test_calculated_follows_desktop_mode(desktop_mode: None) -> None:
    assert Conf.calculated() is CONF_DEFAULT
    in_desktop_mode(override=False)
    assert Conf.calculated() is CONF_SINGLE


# ---------- format functions ----------


@pytest.mark.unit
def test_format_literal_defaults_to_multi_line() -> None:
    assert format_literal([1, 2]) == "list{\n    1,\n    2,\n}"
    assert format_literal([1, 2], CONF_SINGLE) == "list{1, 2}"
    assert format_literal(None, CONF_SINGLE, typ=int | None) == "nil"


@pytest.mark.unit
def test_format_literal_indented_continues_from_level() -> None:
    conf = Conf(indent="  ")
    assert format_literal_indented([1], 1, conf) == "list{\n    1,\n  }"
    assert format_literal_indented([1], 0, conf) == format_literal([1], conf)
    with pytest.raises(ValueError):
        format_literal_indented([1], -1, conf)


@pytest.mark.unit
def test_format_literal_bytes() -> None:
    assert format_literal_bytes("é", CONF_SINGLE) == '"é"'.encode()
    assert format_literal_bytes([1], Conf(indent=" "), level=1) == b"list{\n  1,\n }"


# ---------- printing ----------


@pytest.mark.unit
def test_print_literal_writes_label_and_newline() -> None:
    out = io.StringIO()
    print_literal("point", Point(1, 2), Conf(indent="", pkg=__name__), file=out)
    assert out.getvalue() == "point: Point{x: 1, y: 2}\n"


@pytest.mark.unit
def test_println_literal_uses_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    println_literal(10, CONF_SINGLE)
    assert capsys.readouterr().out == "10\n"


@pytest.mark.unit
def test_print_literal_reads_environment(
    clean_env: None, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("LITREPR_INDENT", "")
    monkeypatch.setenv("LITREPR_PKG", __name__)
    print_literal("p", Point(0, 2))
    assert capsys.readouterr().out == "p: Point{y: 2}\n"


# End of file: src/mstair/litrepr/literal/test_literal_api.py
