# File: src/mstair/litrepr/base/fs_helpers.py
"""
File System Helpers
"""

import logging
from functools import cache
from pathlib import Path
from typing import IO, TypeAlias

import dotenv


StrPath: TypeAlias = str | Path


def fs_find_pyproject_toml(*, start_dir: Path | None = None) -> Path | None:
    """
    Return the nearest `pyproject.toml` at or above `start_dir`.

    Log formatting calls this for every record, so lookups are memoized per directory.

    :param start_dir: Directory to search from, default is the current working directory.
    :return: Path of the file, or None when no ancestor has one.
    """
    return _find_pyproject_cached(start_dir or Path.cwd())


@cache
def _find_pyproject_cached(start_dir: Path) -> Path | None:
    for folder in (start_dir, *start_dir.parents):
        candidate = folder / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def fs_load_dotenv(
    *,
    logger: logging.Logger | None = None,
    dotenv_path: StrPath | None = None,
    stream: IO[str] | None = None,
    override: bool = False,
) -> bool:
    """
    Load variables from a .env file into the process environment.

    Variables already set win unless `override` is given, so an explicit
    `LITREPR_INDENT=` on the command line beats the file.

    :param logger: Receives dotenv's own messages; supplying one turns on verbose mode.
    :param dotenv_path: Path of the .env file, default is the nearest one found upward.
    :param stream: Text stream with .env content, used when `dotenv_path` is None.
    :param override: Whether .env values replace variables already set.
    :return: True if at least one variable was set.
    """
    if logger is not None:
        dotenv.main.logger = logger
    return dotenv.load_dotenv(
        dotenv_path=dotenv_path,
        stream=stream,
        verbose=logger is not None,
        override=override,
        encoding="utf-8",
    )


# End of file: src/mstair/litrepr/base/fs_helpers.py
