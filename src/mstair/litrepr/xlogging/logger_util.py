# File: src/mstair/litrepr/xlogging/logger_util.py
"""
Environment variable-driven log level configuration.

Sources, all read after loading `.env`:
- `LOG_LEVEL` / `LOG_LEVELS`: pattern DSL such as ``"DEBUG"`` or
  ``"mstair.litrepr.*:TRACE; urllib3=WARNING"``
- `LOG_LEVEL_<NAME>` / `LOG_LEVELS_<NAME>`: the same DSL scoped to one logger,
  where `_` in NAME separates dotted parts and `__` stands for a literal `_`
- `LOG_ROOT_LEVEL`: level applied to the root logger by initialize_root()

Precedence for a logger name: exact > nearest ancestor > most specific glob >
bare default > caller fallback.
"""

from __future__ import annotations

import fnmatch
import logging
import os
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Final, NamedTuple

from mstair.litrepr.base.fs_helpers import fs_load_dotenv
from mstair.litrepr.xlogging.logger_constants import initialize_logger_constants


__all__ = ["LogLevelConfig", "get_root_level_from_environment"]

_FRAGMENT_SEPARATOR_RX: Final[re.Pattern[str]] = re.compile(r"[;, ]+")
_ASSIGNMENT_OPERATOR_RX: Final[re.Pattern[str]] = re.compile(r"[:=]+")

_log_level_config_instance: LogLevelConfig | None = None


def level_names_mapping() -> dict[str, int]:
    """Uppercase level names (including TRACE and SUPPRESS) to numbers."""
    initialize_logger_constants()
    return {
        k.upper(): v
        for k, v in logging.getLevelNamesMapping().items()
        if isinstance(k, str) and k.isupper() and isinstance(v, int)
    }


def level_from_text(text: str, level_map: dict[str, int] | None = None) -> int | None:
    """Return a numeric level from a level name or decimal string, else None."""
    s = text.strip().strip("\"'")
    if not s:
        return None
    if s.isdigit():
        return int(s, 10)
    level = (level_map or level_names_mapping()).get(s.upper())
    if level is None or level == logging.NOTSET:
        return None
    return level


def get_root_level_from_environment() -> int | None:
    """Return the root logger level from LOG_ROOT_LEVEL, or None if unset or invalid."""
    fs_load_dotenv()
    raw = os.environ.get("LOG_ROOT_LEVEL", "")
    return level_from_text(raw) if raw else None


@dataclass(slots=True)
class LogEnvVar:
    """
    Parsed name of a log-level environment variable.

    `module` is the dotted logger name encoded in the suffix, or "" for the
    unscoped LOG_LEVEL / LOG_LEVELS / LOG_LEVEL_ROOT forms.
    """

    NAME_RX: ClassVar[re.Pattern[str]] = re.compile(
        r"""
        ^(?P<BASENAME>LOG_LEVELS?)          # LOG_LEVEL or LOG_LEVELS
        (?P<SUFFIX>(?:_[A-Z][A-Z0-9_]*)*)$  # optional logger-name suffix
        """,
        re.VERBOSE,
    )

    name: str = field(default="", repr=False)
    module: str = ""
    value: str = field(default="", repr=False)

    @classmethod
    def from_env_var(cls, name: str, value: str) -> LogEnvVar | None:
        """Return a LogEnvVar if `name` is a log-level variable, else None."""
        re_match = cls.NAME_RX.match(name)
        if re_match is None:
            return None
        suffix = re_match["SUFFIX"].lstrip("_")
        if not suffix or suffix == "ROOT":
            module = ""
        else:
            module = suffix.replace("__", "\0").replace("_", ".").replace("\0", "_").lower()
        return cls(name=name, module=module, value=value)

    @classmethod
    def from_environ(cls) -> Iterator[LogEnvVar]:
        """Yield a LogEnvVar for each matching environment variable, least specific first."""
        fs_load_dotenv()
        for name, value in sorted(os.environ.items()):
            if (env_var := cls.from_env_var(name, value)) is not None:
                yield env_var


class LogEnvPatternLevel(NamedTuple):
    """A logger-name pattern and the level it selects."""

    pattern: str
    level: int


@dataclass(slots=True)
class LogLevelConfig:
    """
    Resolve logger levels from environment variables.

    The empty pattern "" holds the bare default level.
    """

    pattern_to_level: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pattern_to_level:
            self.update_from_environment()

    @classmethod
    def get_instance(cls) -> LogLevelConfig:
        """Return the shared LogLevelConfig, creating it on first use."""
        global _log_level_config_instance
        if _log_level_config_instance is None:
            _log_level_config_instance = LogLevelConfig()
        return _log_level_config_instance

    def update_from_environment(self) -> None:
        """Rebuild the pattern table from the current environment."""
        self.pattern_to_level.clear()
        level_map = level_names_mapping()
        for var in LogEnvVar.from_environ():
            for item in self.parse_log_var(var, level_map):
                self.pattern_to_level[item.pattern] = item.level

    @staticmethod
    def parse_log_var(
        var: LogEnvVar, level_map: dict[str, int] | None = None
    ) -> Iterator[LogEnvPatternLevel]:
        """Split one variable's DSL value into pattern/level pairs, skipping unknown levels."""
        level_map = level_map or level_names_mapping()
        for fragment in _FRAGMENT_SEPARATOR_RX.split(var.value):
            fragment = fragment.strip()
            if not fragment:
                continue

            parts = _ASSIGNMENT_OPERATOR_RX.split(fragment, maxsplit=1)
            if len(parts) == 2:
                pattern, level_text = parts[0].strip().strip("'\""), parts[1]
            else:
                pattern, level_text = "", parts[0]

            if var.module:
                pattern = f"{var.module}.{pattern}" if pattern not in {"", "root"} else var.module
            if pattern.lower() == "root":
                pattern = ""

            level = level_from_text(level_text, level_map)
            if level is not None:
                yield LogEnvPatternLevel(pattern, level)

    def get_effective_level(self, logger_name: str, *, default: int = logging.WARNING) -> int:
        """Return the configured level for a logger name."""
        name_lc = logger_name.lower()
        named: dict[str, int] = {k.lower(): v for k, v in self.pattern_to_level.items() if k}

        # 1) Exact
        if name_lc in named:
            return named[name_lc]

        # 2) Ancestor
        parts = name_lc.split(".")
        for end in range(len(parts) - 1, 0, -1):
            ancestor = ".".join(parts[:end])
            if ancestor in named:
                return named[ancestor]

        # 3) Best glob
        best: tuple[int, int] | None = None
        for pattern, level in named.items():
            if not any(ch in pattern for ch in "*?[") or not fnmatch.fnmatch(name_lc, pattern):
                continue
            score = min((i for i, ch in enumerate(pattern) if ch in "*?["), default=len(pattern))
            if best is None or score > best[0]:
                best = (score, level)
        if best is not None:
            return best[1]

        # 4) Bare default, 5) fallback
        return self.pattern_to_level.get("", default)


# End of file: src/mstair/litrepr/xlogging/logger_util.py
