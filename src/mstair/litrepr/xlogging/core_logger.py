# File: src/mstair/litrepr/xlogging/core_logger.py
"""
Structured logging with environment-driven configuration.

Example:
    >>> from mstair.litrepr.xlogging.logger_factory import create_logger
    >>> _LOG = create_logger(__name__)
    >>> _LOG.debug("visited %s", {"a": [1, 2]})  # args render as literals
    >>> with _LOG.prefix_with("[fmt]"):
    ...     _LOG.trace("entering record")

Design:
- Only the root logger owns handlers; CoreLogger instances propagate.
- Levels come from LogLevelConfig (LOG_LEVEL, LOG_LEVELS, LOG_LEVEL_<NAME>).
- initialize_root() is the only entry point for root setup and keeps its
  state on the root logger object, not in a module global.
"""

from __future__ import annotations

import contextvars
import inspect
import logging
import os
import re
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType
from typing import Any, ClassVar, TextIO

from mstair.litrepr.base import config as cfg
from mstair.litrepr.base.constants import (
    DEFAULT_LOG_DATEFMT,
    DEFAULT_LOG_FORMAT,
    K_LOG_DATEFMT,
    K_LOG_FORMAT,
)
from mstair.litrepr.base.types import PRIMITIVE_TYPES

from .logger_constants import K_CALLER_CLASS_NAME, TRACE, initialize_logger_constants
from .logger_formatter import CoreFormatter
from .logger_util import LogLevelConfig, get_root_level_from_environment


__all__: list[str] = [
    "CoreLogger",
    "initialize_root",
]

_LOG_KWARGS_STANDARD: set[str] = {"exc_info", "stack_info", "stacklevel", "extra"}
_LOG_ROOT_ATTR_NAME = "_litrepr_corelogger_initialized"

_log_prefix: contextvars.ContextVar[str] = contextvars.ContextVar("log_prefix", default="")


class CoreLogger(logging.Logger):
    """
    Application logger that extends logging.Logger with:

    - A TRACE level below DEBUG.
    - Literal rendering of non-primitive args (dicts, dataclasses, ctypes...).
    - The caller's class name on each record.
    - A prefix context manager for scoped message prefixes.
    """

    _INTERNAL_FRAME_OFFSET: ClassVar[int] = 2  # log() method + wrapper method (debug/info/etc)

    def __init__(
        self,
        name: str,
        level: int | str = logging.NOTSET,
    ) -> None:
        """
        :param name: Logger name, usually the module's __name__.
        :param level: Initial level; NOTSET resolves the level from the environment.
        """
        initialize_logger_constants()
        if level in {logging.NOTSET, "NOTSET", ""}:
            level = LogLevelConfig.get_instance().get_effective_level(name)
        super().__init__(name, level)

        root_level = logging.getLogger().getEffectiveLevel()
        if self.level < root_level:
            self.setLevel(root_level)

    def __repr__(self) -> str:
        level = self.getEffectiveLevel()
        return f"<{type(self).__name__} '{self.name}' {logging.getLevelName(level)}={level}>"

    def log(self, level: int, msg: object, *args: Any, **kwargs: Any) -> None:
        """
        Emit a record after rendering args and applying the active prefix.

        Unknown keyword arguments are moved into `extra`.
        """
        initialize_root()
        if cfg.in_analysis_mode() or not self.isEnabledFor(level):
            return

        extra: dict[str, Any] = dict(kwargs.pop("extra", None) or {})
        for key in [k for k in kwargs if k not in _LOG_KWARGS_STANDARD]:
            extra[key] = kwargs.pop(key)

        stacklevel: int = kwargs.pop("stacklevel", 1) + self._INTERNAL_FRAME_OFFSET
        extra.setdefault(K_CALLER_CLASS_NAME, _caller_class_name(stacklevel))

        prefix = _log_prefix.get()
        if prefix:
            msg = f"{prefix}{msg}"

        super().log(
            level,
            msg,
            *_render_args(args),
            exc_info=kwargs.get("exc_info"),
            stack_info=kwargs.get("stack_info", False),
            stacklevel=stacklevel,
            extra=extra,
        )

    def trace(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log a message at TRACE level (below DEBUG)."""
        self.log(TRACE, msg, *args, **kwargs)

    def debug(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at CRITICAL level, with a stack trace unless stack_info is given."""
        kwargs.setdefault("stack_info", True)
        self.log(logging.CRITICAL, msg, *args, **kwargs)

    def exception(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log at ERROR level with exception info, going through log() like the other levels."""
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, msg, *args, **kwargs)

    @contextmanager
    def prefix_with(self, prefix: str) -> Iterator[None]:
        """
        Prefix every message logged within the block.

        Nested prefixes accumulate. State lives in a ContextVar, so threads and
        tasks do not see each other's prefixes.

        :param prefix: Text placed before the message, followed by " > ".
        """
        token = _log_prefix.set(_log_prefix.get() + prefix + " > ")
        try:
            yield
        finally:
            _log_prefix.reset(token)


def initialize_root(
    fmt: str | None = None,
    datefmt: str | None = None,
    level: int | str | None = None,
    force: bool = False,
) -> None:
    """
    Idempotently configure the root logger for CoreLogger.

    - Ensures exactly one stderr StreamHandler with CoreFormatter exists.
    - `force=True` removes existing stderr handlers and recreates ours.
    - Sets the root level to `level`, else LOG_ROOT_LEVEL, else WARNING if unset.
    - Never modifies handlers that do not write to stderr.

    :param fmt: Format string. Defaults to LOG_FORMAT or the package default.
    :param datefmt: Date format. Defaults to LOG_DATEFMT or the package default.
        Without a '%' directive the timestamp is dropped from the format.
    :param level: Root logger level (int or name).
    :param force: Reinitialize even if already initialized.
    """
    root: logging.Logger = logging.getLogger()
    if getattr(root, _LOG_ROOT_ATTR_NAME, False) and not force:
        return
    setattr(root, _LOG_ROOT_ATTR_NAME, True)

    initialize_logger_constants()

    if force:
        root.handlers = [h for h in root.handlers if not _is_stderr_handler(h)]

    fmt = fmt or os.environ.get(K_LOG_FORMAT) or DEFAULT_LOG_FORMAT
    datefmt = datefmt if datefmt is not None else os.environ.get(K_LOG_DATEFMT, DEFAULT_LOG_DATEFMT)
    if "%" not in datefmt:
        fmt = re.sub(r"\s*%\(asctime\)s\s*", " ", fmt)

    stderr_handlers = [h for h in root.handlers if _is_stderr_handler(h)]
    if not stderr_handlers:
        handler: logging.StreamHandler[TextIO] = logging.StreamHandler(sys.stderr)
        handler.setFormatter(CoreFormatter(fmt, datefmt or None))
        root.addHandler(handler)
    elif not any(isinstance(h.formatter, CoreFormatter) for h in stderr_handlers):
        stderr_handlers[0].setFormatter(CoreFormatter(fmt, datefmt or None))

    if level is None:
        level = get_root_level_from_environment()
    if isinstance(level, str):
        level = logging.getLevelNamesMapping().get(level.upper(), logging.WARNING)
    if level is not None:
        root.setLevel(level)
    elif root.level == logging.NOTSET:
        root.setLevel(logging.WARNING)


def _is_stderr_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and handler.stream is sys.stderr


def _caller_class_name(depth: int) -> str:
    """Return the class of `self`/`cls` in the frame `depth` levels above log(), or ""."""
    frame: FrameType | None = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                return ""
            frame = frame.f_back
        if frame is None:
            return ""
        if (zelf := frame.f_locals.get("self")) is not None:
            return type(zelf).__name__
        if isinstance(cls := frame.f_locals.get("cls"), type):
            return cls.__name__
        return ""
    finally:
        del frame


def _render_args(args: tuple[Any, ...]) -> tuple[Any, ...]:
    """
    Replace non-primitive log args with their literal rendition.

    :param args: The %-format arguments of a log call.
    :return: Args with primitives untouched and everything else rendered to text.
    """
    from mstair.litrepr.literal.conf import Conf  # noqa: PLC0415
    from mstair.litrepr.literal.literal_api import format_literal  # noqa: PLC0415

    rendered: list[Any] = []
    for arg in args:
        if isinstance(arg, PRIMITIVE_TYPES):
            rendered.append(arg)
            continue
        try:
            rendered.append(format_literal(arg, Conf.calculated()))
        except Exception as e:
            rendered.append(f"<unrenderable: {type(arg).__name__}: {e}>")
    return tuple(rendered)


# End of file: src/mstair/litrepr/xlogging/core_logger.py
