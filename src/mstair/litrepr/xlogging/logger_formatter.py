# File: src/mstair/litrepr/xlogging/logger_formatter.py
"""
Log record formatting for CoreLogger's root stderr handler.

Adds `fileAndLine`, `funcAndName` and `levelName` record attributes, colors
level names and messages in desktop mode, and renders timestamps in the
timezone named by LOG_TZ.
"""

import logging
import os
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Literal

import pytz
from colorama import Fore

import mstair.litrepr.base.config as cfg
from mstair.litrepr.base.constants import DEFAULT_LOG_TZ, K_LOG_TZ
from mstair.litrepr.base.fs_helpers import fs_find_pyproject_toml

from .logger_constants import K_CALLER_CLASS_NAME


__all__ = ["CoreFormatter", "get_color_code", "rgb_code"]


FormatStyle = Literal["%", "{", "$"]


def rgb_code(r: int, g: int, b: int) -> str:
    """
    Convert RGB values to an ANSI 24-bit foreground escape code.

    :param r: Red component (0-255)
    :param g: Green component (0-255)
    :param b: Blue component (0-255)
    :return str: ANSI escape code for the color.
    """
    return f"\033[38;2;{max(0, min(255, r))};{max(0, min(255, g))};{max(0, min(255, b))}m"


RGB_CALLER = rgb_code(4 << 4, 8 << 4, 10 << 4)
COLOR_MAP: dict[str | None, str] = {
    "fileAndLine": RGB_CALLER,
    "funcAndName": RGB_CALLER,
    "TRACE": rgb_code(96, 0, 64),
    "DEBUG": Fore.LIGHTBLACK_EX,
    "INFO": rgb_code(184, 184, 216),
    "WARNING": Fore.YELLOW,
    "ERROR": rgb_code(224, 128, 0),
    "CRITICAL": Fore.LIGHTRED_EX,
    "SUPPRESS": Fore.BLUE,
    None: Fore.RESET,
}


def get_color_code(key: str | None = None) -> str:
    """
    Return the escape code for a color key, or "" outside desktop mode.

    Keys are COLOR_MAP entries, `#rrggbb` strings, or colorama `Fore` names
    (`"red"`, `"light green"`). Unknown keys reset the color.
    """
    if not cfg.in_desktop_mode():
        return ""
    if not key or key == "RESET":
        return Fore.RESET
    if key in COLOR_MAP:
        return COLOR_MAP[key]
    if key.startswith("#") and len(key) == 7:
        return rgb_code(*(int(key[i : i + 2], 16) for i in (1, 3, 5)))

    fore_name = key.upper().replace(" ", "").replace("BRIGHT", "LIGHT")
    if fore_name.startswith("LIGHT") and not fore_name.endswith("_EX"):
        fore_name = "LIGHT" + fore_name[5:].lstrip("_") + "_EX"
    return getattr(Fore, fore_name, Fore.RESET)


class CoreFormatter(logging.Formatter):
    """
    Formatter that adds caller location and color to log records.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: FormatStyle = "%",
        validate: bool = True,
        *,
        tz: str | None = None,
    ) -> None:
        """
        :param fmt: The format string for log messages.
        :param datefmt: The strftime format for timestamps.
        :param style: The format string style (default is "%").
        :param validate: Whether to validate the format string.
        :param tz: pytz timezone name; defaults to LOG_TZ, then UTC.
        """
        super().__init__(fmt=fmt, datefmt=datefmt, style=style, validate=validate)
        self.tz = pytz.timezone(tz or os.environ.get(K_LOG_TZ) or DEFAULT_LOG_TZ)

    def format(self, record: logging.LogRecord) -> str:
        record.fileAndLine = self.format_file_and_line(record.pathname, record.lineno)
        record.funcAndName = self.format_func_and_name(record)
        record.levelName = get_color_code(record.levelname) + record.levelname + get_color_code()

        try:
            message = super().format(record)
        except Exception as exc:
            return format_logging_error(record, exc)
        return get_color_code(record.levelname) + message + get_color_code()

    @staticmethod
    def format_file(file: str) -> str:
        """Return the file path relative to the nearest pyproject.toml directory, when there is one."""
        if not file:
            return "<unknown file>"
        path = Path(file)
        pyproject = fs_find_pyproject_toml(start_dir=path.parent)
        if pyproject is not None:
            try:
                return path.relative_to(pyproject.parent).as_posix()
            except ValueError:
                pass
        return path.as_posix()

    def format_file_and_line(self, file: str, lineno: int) -> str:
        return get_color_code("fileAndLine") + f"{self.format_file(file)}:{lineno}" + get_color_code()

    @staticmethod
    def format_func_and_name(record: logging.LogRecord) -> str:
        """Render `Class.method()`, `function()` or `<module>` for the record's caller."""
        class_name: str = getattr(record, K_CALLER_CLASS_NAME, "")
        if record.funcName == "<module>":
            text = record.funcName
        elif class_name:
            text = f"{class_name}.{record.funcName}()"
        else:
            text = f"{record.funcName}()"
        return get_color_code("funcAndName") + text + get_color_code()

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        moment = datetime.fromtimestamp(record.created, self.tz)
        if datefmt:
            try:
                return moment.strftime(datefmt.replace("%-", "%"))
            except ValueError:
                pass
        return moment.isoformat()


def format_logging_error(record: logging.LogRecord, exc: Exception) -> str:
    """
    Describe a record that failed to format, instead of raising from a handler.

    :param record: The LogRecord that failed to format
    :param exc: The exception raised while formatting
    :return: Multi-line error text, each line prefixed with ">> "
    """
    message_lines: list[Any] = [
        "Internal error: Failed to format log record",
        f"{Path(getattr(record, 'pathname', '<unknown>')).as_posix()}:{getattr(record, 'lineno', '?')}",
        f"{type(exc).__name__}: {exc}",
        f"record.msg: {getattr(record, 'msg', None)!r}",
        f"record.args: {getattr(record, 'args', None)!r}",
        *traceback.format_exception(exc)[-1:],
    ]
    return "\n>> " + "\n>> ".join(str(line).rstrip() for line in message_lines) + "\n"


# End of file: src/mstair/litrepr/xlogging/logger_formatter.py
