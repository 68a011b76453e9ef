# File: src/mstair/litrepr/xlogging/test_logger_util.py
"""
Tests for LogLevelConfig: DSL parsing, per-logger variables, precedence, lifecycle.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest

from mstair.litrepr.xlogging import logger_util as lu
from mstair.litrepr.xlogging.logger_constants import TRACE
from mstair.litrepr.xlogging.logger_util import LogEnvVar, LogLevelConfig, level_from_text


# ---------- Fixtures ----------


@pytest.fixture(autouse=False)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear LOG_* level vars and reset the singleton, skipping .env loads."""
    monkeypatch.setattr(lu, "fs_load_dotenv", lambda *a, **k: False)
    for k in [k for k in os.environ if k.startswith(("LOG_LEVEL", "LOG_ROOT_LEVEL"))]:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setattr(lu, "_log_level_config_instance", None, raising=False)
    yield
    monkeypatch.setattr(lu, "_log_level_config_instance", None, raising=False)


# ---------- Level text ----------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("text", "expected"),
    [("DEBUG", logging.DEBUG), ("trace", TRACE), ("'INFO'", logging.INFO), ("15", 15), ("", None), ("LOUD", None)],
)
def test_level_from_text(text: str, expected: int | None) -> None:
    assert level_from_text(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "module"),
    [
        ("LOG_LEVEL", ""),
        ("LOG_LEVELS", ""),
        ("LOG_LEVEL_ROOT", ""),
        ("LOG_LEVEL_MSTAIR_LITREPR", "mstair.litrepr"),
        ("LOG_LEVELS_MY__APP", "my_app"),
    ],
)
def test_env_var_names(name: str, module: str) -> None:
    var = LogEnvVar.from_env_var(name, "DEBUG")
    assert var is not None
    assert var.module == module


@pytest.mark.unit
def test_unrelated_env_var_is_ignored() -> None:
    assert LogEnvVar.from_env_var("LOG_FORMAT", "x") is None
    assert LogEnvVar.from_env_var("LITREPR_INDENT", "2") is None


# ---------- Parsing ----------


class TestParsing:
    @pytest.mark.unit
    def test_bare_level_sets_default(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "DEBUG")
        assert LogLevelConfig().get_effective_level("any.module") == logging.DEBUG

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value",
        [
            "mstair.litrepr.*:TRACE;urllib3:ERROR",
            "mstair.litrepr.*=TRACE, urllib3=ERROR",
            "mstair.litrepr.*:TRACE urllib3:ERROR",
        ],
    )
    def test_separators(self, monkeypatch: pytest.MonkeyPatch, clean_env: None, value: str) -> None:
        monkeypatch.setenv("LOG_LEVELS", value)
        cfg = LogLevelConfig()
        assert cfg.pattern_to_level == {"mstair.litrepr.*": TRACE, "urllib3": logging.ERROR}

    @pytest.mark.unit
    def test_invalid_levels_are_skipped(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", ";;pkg.*:DEBUG;other:LOUD;x:DEBUG:extra;;")
        assert list(LogLevelConfig().pattern_to_level) == ["pkg.*"]

    @pytest.mark.unit
    def test_scoped_variable(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "mstair.*:INFO")
        monkeypatch.setenv("LOG_LEVEL_MSTAIR_LITREPR_LITERAL", "TRACE")
        cfg = LogLevelConfig()
        assert cfg.get_effective_level("mstair.litrepr.literal.formatter") == TRACE
        assert cfg.get_effective_level("mstair.litrepr.xlogging") == logging.INFO

    @pytest.mark.unit
    def test_root_alias(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "root=ERROR; app=INFO")
        cfg = LogLevelConfig()
        assert cfg.get_effective_level("app.views") == logging.INFO
        assert cfg.get_effective_level("other") == logging.ERROR


# ---------- Precedence ----------


class TestPrecedence:
    @pytest.mark.unit
    def test_exact_beats_glob(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "app.*:DEBUG;app.core:ERROR")
        assert LogLevelConfig().get_effective_level("app.core") == logging.ERROR

    @pytest.mark.unit
    def test_ancestor_beats_glob(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "app.*:DEBUG;app.core:ERROR")
        assert LogLevelConfig().get_effective_level("app.core.utils") == logging.ERROR

    @pytest.mark.unit
    def test_longest_fixed_prefix_wins(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "a*:DEBUG; app*:INFO")
        assert LogLevelConfig().get_effective_level("app.module") == logging.INFO

    @pytest.mark.unit
    def test_case_insensitive(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVELS", "App.*:DEBUG")
        assert LogLevelConfig().get_effective_level("APP.core") == logging.DEBUG

    @pytest.mark.unit
    def test_fallback(self, clean_env: None) -> None:
        cfg = LogLevelConfig()
        assert cfg.get_effective_level("x") == logging.WARNING
        assert cfg.get_effective_level("x", default=logging.ERROR) == logging.ERROR


# ---------- Lifecycle ----------


class TestLifecycle:
    @pytest.mark.unit
    def test_singleton_reloads_only_on_request(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        first = LogLevelConfig.get_instance()
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert LogLevelConfig.get_instance() is first
        assert first.get_effective_level("x") == logging.INFO
        first.update_from_environment()
        assert first.get_effective_level("x") == logging.ERROR

    @pytest.mark.unit
    def test_root_level_from_environment(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        assert lu.get_root_level_from_environment() is None
        monkeypatch.setenv("LOG_ROOT_LEVEL", "info")
        assert lu.get_root_level_from_environment() == logging.INFO


# End of file: src/mstair/litrepr/xlogging/test_logger_util.py
